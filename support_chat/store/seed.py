"""
Default FAQ knowledge base for ShopEase.
"""

DEFAULT_FAQS = [
    (
        "What is your shipping policy?",
        "We offer free shipping on all orders over $50. Standard delivery takes 3-5 "
        "business days within the US. Express shipping (1-2 days) is available for $15.",
    ),
    (
        "What is your return policy?",
        "We have a 30-day return policy. Items must be unused, in original packaging, "
        "with all tags attached. Refunds are processed within 5-7 business days after "
        "we receive your return.",
    ),
    (
        "What are your support hours?",
        "Our customer support team is available Monday through Friday, 9 AM to 6 PM "
        "EST. Our AI chat assistant is available 24/7 to help answer common questions.",
    ),
    (
        "What payment methods do you accept?",
        "We accept all major credit cards (Visa, Mastercard, American Express), PayPal, "
        "Apple Pay, and Google Pay. All transactions are secure and encrypted.",
    ),
    (
        "Do you ship internationally?",
        "Yes! We currently ship to USA, Canada, United Kingdom, Australia, and most "
        "European countries. International shipping typically takes 7-14 business days.",
    ),
    (
        "How can I track my order?",
        "Once your order ships, you'll receive a tracking number via email. You can use "
        "this number to track your package on our website or the carrier's website.",
    ),
    (
        "What if my item arrives damaged?",
        "We apologize if that happens! Please contact us within 48 hours of delivery "
        "with photos of the damage. We'll send a replacement or issue a full refund "
        "immediately.",
    ),
]
