"""
Upstream failure types and classification.
"""

from __future__ import annotations

import asyncio


RATE_LIMIT_MARKERS = ("rate limit", "quota", "429", "resource exhausted")


class UpstreamFailure(Exception):
    """An upstream model invocation that did not produce a usable reply."""

    kind = "error"

    def __init__(self, model: str, message: str):
        super().__init__(f"{model}: {message}")
        self.model = model
        self.message = message


class UpstreamTimeout(UpstreamFailure):
    kind = "timeout"


class UpstreamRateLimit(UpstreamFailure):
    kind = "rate_limit"


class UpstreamOtherFailure(UpstreamFailure):
    kind = "error"


class EmptyResponseError(Exception):
    """The model returned no text."""


def is_rate_limit_message(message: str) -> bool:
    """Whether an error description names a rate limit or quota problem."""
    lowered = message.lower()
    return any(marker in lowered for marker in RATE_LIMIT_MARKERS)


def classify_failure(model: str, exc: BaseException) -> UpstreamFailure:
    """
    Turn an exception raised while invoking ``model`` into an UpstreamFailure.

    Rate limits are recognised from the error text, or from an HTTP status
    of 429 on SDK errors that carry one.
    """
    if isinstance(exc, UpstreamFailure):
        return exc

    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return UpstreamTimeout(model, str(exc) or "Request timeout")

    message = str(exc) or type(exc).__name__
    if getattr(exc, "status_code", None) == 429 or is_rate_limit_message(message):
        return UpstreamRateLimit(model, message)

    return UpstreamOtherFailure(model, message)
