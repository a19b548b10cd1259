"""
Model fallback router.

Walks a fixed priority list of upstream models for one reply, skipping models
that are cooling down, and degrades to the offline responder when nothing
upstream produces text.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Callable

from support_chat.fallback import FallbackResponder
from support_chat.prompt import PromptBuilder

from .availability import AvailabilityTracker
from .config import RouterConfig
from .errors import EmptyResponseError, UpstreamFailure, UpstreamTimeout, classify_failure
from .types import ReplyDegraded, ReplyOutcome, ReplyRequest, ReplySuccess

if TYPE_CHECKING:
    from support_chat.llm import ClientResolver, LLMClient


logger = logging.getLogger(__name__)


class ModelFallbackRouter:
    """
    Sequential failover across upstream models.

    Per request the router moves through ``Trying(i)`` for each index of the
    priority list and ends in either ``Succeeded`` or ``Exhausted``:

    - a suppressed model is skipped without an invocation;
    - an available model is invoked once, raced against the timeout;
    - non-empty text wins; anything else (timeout, rate limit, other error,
      blank text) suppresses the model for the cooldown and advances.

    Upstream failures never reach the caller. The worst case is a
    ``ReplyDegraded`` from the fallback responder.

    Example:
        >>> router = ModelFallbackRouter(
        ...     resolver=ClientResolver.from_settings(settings),
        ...     tracker=AvailabilityTracker(),
        ... )
        >>> outcome = await router.generate_reply(request)
        >>> print(outcome.text)
    """

    def __init__(
        self,
        resolver: "ClientResolver",
        tracker: AvailabilityTracker,
        config: RouterConfig | None = None,
        prompt_builder: PromptBuilder | None = None,
        responder: FallbackResponder | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the router.

        Args:
            resolver: Supplies the shared LLM client, or None in mock mode.
            tracker: Shared availability state.
            config: Priority list and timing policy.
            prompt_builder: Builds the prompt sent to every model.
            responder: Offline responder for degraded replies.
            clock: Time source for cooldown bookkeeping.
        """
        self.resolver = resolver
        self.tracker = tracker
        self.config = config or RouterConfig()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.responder = responder or FallbackResponder()
        self.clock = clock

        # Timed-out invocations still running upstream
        self._detached: set[asyncio.Future] = set()

    async def generate_reply(self, request: ReplyRequest) -> ReplyOutcome:
        """
        Produce a reply for ``request``.

        Args:
            request: The user message with its FAQ set and recent history.

        Returns:
            ReplySuccess from the first model that answered, or ReplyDegraded.
        """
        client = self.resolver.resolve()
        if client is None:
            logger.info("Using mock response mode")
            return self._degrade(request, "mock_mode")

        if not self.config.priority:
            logger.warning("Model priority list is empty, using mock responses")
            return self._degrade(request, "no_models")

        prompt = self.prompt_builder.build(
            faqs=request.faqs,
            history=request.history,
            user_message=request.user_message,
        )

        attempted: list[str] = []
        last_error: UpstreamFailure | None = None

        for model in self.config.priority:
            if not self.tracker.is_available(model, self.clock()):
                logger.debug(f"Skipping {model}: cooling down")
                continue

            attempted.append(model)
            logger.info(f"Using model: {model}")

            try:
                text = await self._invoke(client.for_model(model), prompt)
            except Exception as e:
                failure = classify_failure(model, e)
                last_error = failure
                now = self.clock()
                logger.warning(
                    f"Model {model} failed ({failure.kind}) at t={now:.3f}: "
                    f"{failure.message}; trying next model"
                )
                self.tracker.mark_unavailable(model, now)
                continue

            logger.info(f"Successfully generated response using {model}")
            return ReplySuccess(text=text, model_used=model, attempted=attempted)

        logger.warning(
            f"All models failed or are cooling down "
            f"({len(attempted)} of {len(self.config.priority)} invoked), "
            f"falling back to mock responses"
        )
        if last_error is not None:
            logger.error(f"Last error: {last_error}")

        return self._degrade(
            request,
            "exhausted",
            last_error=str(last_error) if last_error else None,
            attempted=attempted,
        )

    async def _invoke(self, client: "LLMClient", prompt: str) -> str:
        """
        Call one model, racing it against the timeout.

        A call that loses the race is left running and its result discarded.
        """
        task = asyncio.ensure_future(
            client.generate(
                prompt=prompt,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        )
        done, _ = await asyncio.wait({task}, timeout=self.config.timeout_seconds)

        if task not in done:
            self._detach(task)
            raise UpstreamTimeout(
                client.model_name,
                f"Request timeout after {self.config.timeout_seconds:g}s",
            )

        response = task.result()
        text = (response.content or "").strip()
        if not text:
            raise EmptyResponseError(f"Empty response from {client.model_name}")
        return text

    def _detach(self, task: asyncio.Future) -> None:
        self._detached.add(task)
        task.add_done_callback(self._reap)

    def _reap(self, task: asyncio.Future) -> None:
        self._detached.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Abandoned model call finished with error: {task.exception()}")

    def _degrade(
        self,
        request: ReplyRequest,
        reason: str,
        last_error: str | None = None,
        attempted: list[str] | None = None,
    ) -> ReplyDegraded:
        text = self.responder.respond(request.user_message, request.faqs)
        return ReplyDegraded(
            text=text,
            reason=reason,
            last_error=last_error,
            attempted=attempted or [],
        )

    @property
    def pending_abandoned_calls(self) -> int:
        """Number of timed-out calls that have not settled yet."""
        return len(self._detached)
