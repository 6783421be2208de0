from bitbucket_webhooks.core.exceptions import (
    BodyParseError,
    HandlerError,
    MissingEventKey,
    UnknownHandler,
    UnsupportedEventKey,
    WebhookError,
)
from bitbucket_webhooks.schemas.events import EVENT_TYPES, EventKey, Headers
from bitbucket_webhooks.services.webhook import Webhook

__all__ = [
    "BodyParseError",
    "EVENT_TYPES",
    "EventKey",
    "HandlerError",
    "Headers",
    "MissingEventKey",
    "UnknownHandler",
    "UnsupportedEventKey",
    "Webhook",
    "WebhookError",
]
