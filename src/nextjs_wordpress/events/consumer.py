"""Service Bus consumer that feeds post transitions to the revalidation listener."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import secrets
from typing import TYPE_CHECKING

from pydantic import ValidationError

from nextjs_wordpress.events.contracts import EventEnvelope

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from azure.servicebus import ServiceBusReceivedMessage
    from azure.servicebus.aio import ServiceBusReceiver

    from nextjs_wordpress.config import ServiceBusConfig
    from nextjs_wordpress.models.post import PostTransitionEvent
    from nextjs_wordpress.models.revalidation import RevalidationOutcome

logger = logging.getLogger(__name__)
_BASE_RECONNECT_DELAY_SECONDS = 1.0
_MAX_RECONNECT_DELAY_SECONDS = 30.0
_JITTER_SCALE = 1000
_BATCH_SIZE = 10
_MAX_WAIT_SECONDS = 5


def _reconnect_delay(attempt: int) -> float:
    """Exponential backoff with up to 100% jitter, capped at the maximum."""
    delay = _BASE_RECONNECT_DELAY_SECONDS * (2 ** min(attempt, 10))
    jitter = secrets.randbelow(_JITTER_SCALE) / _JITTER_SCALE
    return min(_MAX_RECONNECT_DELAY_SECONDS, delay * (1 + jitter))


class ServiceBusTransitionConsumer:
    """Receive post transitions from a Service Bus subscription.

    Messages are handled one at a time in delivery order; a transition's
    revalidation finishes before the next message is read.
    """

    def __init__(
        self,
        config: ServiceBusConfig,
        on_transition: Callable[[PostTransitionEvent], Awaitable[RevalidationOutcome | None]],
    ) -> None:
        """Initialize with Service Bus configuration and a transition handler."""
        self._config = config
        self._on_transition = on_transition
        self._task: asyncio.Task | None = None
        self._running = False
        self._disabled = not config.connection_string
        if self._disabled:
            logger.warning(
                "AZURE_SERVICEBUS_CONNECTION_STRING is not set, "
                "post transitions will not be consumed"
            )

    @property
    def enabled(self) -> bool:
        return not self._disabled

    async def start(self) -> None:
        """Start the background consumer task."""
        if self._disabled:
            return
        self._running = True
        self._task = asyncio.create_task(self._consume())
        logger.info(
            "Service Bus consumer started: topic=%s subscription=%s",
            self._config.topic_name,
            self._config.subscription_name,
        )

    async def stop(self) -> None:
        """Stop the background consumer task."""
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        logger.info("Service Bus consumer stopped")

    async def _dispatch(self, body: str) -> bool:
        """Hand the transition in a message body to the listener.

        Returns False for events other than post transitions. Raises
        ValidationError for malformed bodies.
        """
        envelope = EventEnvelope.from_message_body(body)
        event = envelope.transition()
        if event is None:
            logger.debug("Ignored event %s", envelope.event)
            return False
        await self._on_transition(event)
        return True

    async def _settle(
        self,
        receiver: ServiceBusReceiver,
        message: ServiceBusReceivedMessage,
    ) -> None:
        """Dispatch one message, then complete or abandon it."""
        try:
            await self._dispatch(str(message))
        except ValidationError:
            # Redelivery cannot fix a malformed body.
            logger.warning(
                "Dropping malformed message id=%s",
                message.message_id,
                exc_info=True,
            )
        except Exception:  # noqa: BLE001
            logger.warning(
                "Failed to handle message id=%s, abandoning",
                message.message_id,
                exc_info=True,
            )
            await receiver.abandon_message(message)
            return
        await receiver.complete_message(message)

    async def _consume(self) -> None:
        """Receive until stopped, reconnecting after session failures."""
        attempt = 0
        while self._running:
            try:
                await self._consume_once()
                attempt = 0
            except asyncio.CancelledError:
                raise
            except Exception:  # noqa: BLE001
                if not self._running:
                    break
                delay = _reconnect_delay(attempt)
                attempt += 1
                logger.warning(
                    "Service Bus session failed; reconnecting in %.1fs",
                    delay,
                    exc_info=True,
                )
                await asyncio.sleep(delay)

    async def _consume_once(self) -> None:
        """Run a single Service Bus receive session."""
        from azure.servicebus.aio import ServiceBusClient  # noqa: PLC0415

        client = ServiceBusClient.from_connection_string(self._config.connection_string)
        async with client:
            receiver = client.get_subscription_receiver(
                topic_name=self._config.topic_name,
                subscription_name=self._config.subscription_name,
            )
            async with receiver:
                while self._running:
                    messages = await receiver.receive_messages(
                        max_message_count=_BATCH_SIZE,
                        max_wait_time=_MAX_WAIT_SECONDS,
                    )
                    for message in messages:
                        await self._settle(receiver, message)
