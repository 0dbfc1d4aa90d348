"""CMS event contracts and the Service Bus transition consumer."""

from nextjs_wordpress.events.consumer import ServiceBusTransitionConsumer
from nextjs_wordpress.events.contracts import POST_TRANSITION, EventEnvelope

__all__ = [
    "POST_TRANSITION",
    "EventEnvelope",
    "ServiceBusTransitionConsumer",
]
