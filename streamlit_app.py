"""
ShopEase Support - Streamlit chat widget

Lightweight UI that talks to the support chat HTTP API.
Point it at a running server with SUPPORT_CHAT_API_URL (or Streamlit secrets).
"""

import os

import httpx
import streamlit as st

# Set page config first (must be first Streamlit command)
st.set_page_config(
    page_title="ShopEase Support",
    page_icon="💬",
    layout="centered",
)

API_URL = os.environ.get("SUPPORT_CHAT_API_URL", "http://localhost:3001")
if "SUPPORT_CHAT_API_URL" in st.secrets:
    API_URL = st.secrets["SUPPORT_CHAT_API_URL"]

REQUEST_TIMEOUT = 60.0
MAX_MESSAGE_LENGTH = 1000


@st.cache_resource
def get_http_client() -> httpx.Client:
    """One shared HTTP client for the session."""
    return httpx.Client(base_url=API_URL, timeout=REQUEST_TIMEOUT)


@st.cache_data(ttl=300)
def fetch_faqs() -> list[dict]:
    """Load FAQs for the sidebar."""
    response = get_http_client().get("/chat/faqs")
    response.raise_for_status()
    return response.json()["faqs"]


def send_message(message: str, conversation_id: int | None) -> dict:
    payload = {"message": message}
    if conversation_id:
        payload["conversationId"] = conversation_id

    response = get_http_client().post("/chat/message", json=payload)
    if response.status_code == 400:
        raise ValueError(response.json().get("error", "Invalid message"))
    response.raise_for_status()
    return response.json()


def reset_conversation() -> None:
    st.session_state.messages = []
    st.session_state.conversation_id = None


def main():
    """Main Streamlit application."""
    st.title("ShopEase Support")
    st.caption("Ask about shipping, returns, payments and more.")

    if "messages" not in st.session_state:
        reset_conversation()

    # Sidebar: FAQs and conversation controls
    with st.sidebar:
        st.header("Frequently Asked")
        try:
            for faq in fetch_faqs():
                with st.expander(faq["question"]):
                    st.markdown(faq["answer"])
        except httpx.HTTPError as e:
            st.warning(f"Could not load FAQs: {e}")

        st.divider()
        if st.button("New conversation", use_container_width=True):
            reset_conversation()
            st.rerun()

        if st.session_state.conversation_id:
            st.caption(f"Conversation #{st.session_state.conversation_id}")

    # Chat history
    for message in st.session_state.messages:
        with st.chat_message(message["role"]):
            st.markdown(message["text"])

    prompt = st.chat_input("Type your message...", max_chars=MAX_MESSAGE_LENGTH)
    if not prompt:
        return

    st.session_state.messages.append({"role": "user", "text": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        try:
            with st.spinner("Typing..."):
                result = send_message(prompt, st.session_state.conversation_id)
        except ValueError as e:
            st.error(str(e))
            return
        except httpx.HTTPError as e:
            st.error(f"Sorry, something went wrong. Please try again. ({e})")
            return

        st.markdown(result["reply"])
        if result.get("degraded"):
            st.caption("Offline answer - our AI assistant is temporarily unavailable.")

    st.session_state.conversation_id = result["conversationId"]
    st.session_state.messages.append({"role": "assistant", "text": result["reply"]})


if __name__ == "__main__":
    main()
