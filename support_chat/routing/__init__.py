"""
Reply routing across upstream models.
"""

from .availability import AvailabilityTracker
from .config import RouterConfig
from .errors import (
    UpstreamFailure,
    UpstreamOtherFailure,
    UpstreamRateLimit,
    UpstreamTimeout,
    classify_failure,
    is_rate_limit_message,
)
from .router import ModelFallbackRouter
from .types import (
    FAQ,
    HistoryEntry,
    ReplyDegraded,
    ReplyOutcome,
    ReplyRequest,
    ReplySuccess,
)

__all__ = [
    "AvailabilityTracker",
    "FAQ",
    "HistoryEntry",
    "ModelFallbackRouter",
    "ReplyDegraded",
    "ReplyOutcome",
    "ReplyRequest",
    "ReplySuccess",
    "RouterConfig",
    "UpstreamFailure",
    "UpstreamOtherFailure",
    "UpstreamRateLimit",
    "UpstreamTimeout",
    "classify_failure",
    "is_rate_limit_message",
]
