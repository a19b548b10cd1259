"""
Configuration for the model fallback router.
"""

from dataclasses import dataclass, field

from support_chat.config.settings import DEFAULT_MODEL_PRIORITY


@dataclass
class RouterConfig:
    """
    Fixed-priority failover policy.

    The suppression window is owned by the ``AvailabilityTracker`` shared
    between routers, not by this config.
    """

    # Model identifiers in trial order
    priority: list[str] = field(default_factory=lambda: list(DEFAULT_MODEL_PRIORITY))

    # Per-invocation timeout
    timeout_seconds: float = 30.0

    # Generation settings passed to every model
    max_tokens: int = 500
    temperature: float = 0.7

    def __post_init__(self):
        """Validate configuration."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if len(set(self.priority)) != len(self.priority):
            raise ValueError("priority must not contain duplicate model identifiers")

    @classmethod
    def from_settings(cls, settings) -> "RouterConfig":
        return cls(
            priority=list(settings.model_priority),
            timeout_seconds=settings.model_timeout_seconds,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
        )
