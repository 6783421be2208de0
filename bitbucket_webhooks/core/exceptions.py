"""Dispatch failures for the Bitbucket webhook receiver.

Every failure is a client error: the receiver answers 400 Bad Request with
the message as a plain-text body.
"""


class WebhookError(Exception):
    """Base exception for all dispatch failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingEventKey(WebhookError):
    """The X-Event-Key header is absent or empty."""

    def __init__(self) -> None:
        super().__init__("Missing X-Event-Key")


class UnknownHandler(WebhookError):
    """No handler is registered for the event key."""

    def __init__(self, event_key: str) -> None:
        super().__init__(f"No handler for the event key: {event_key}")
        self.event_key = event_key


class UnsupportedEventKey(WebhookError):
    """A handler is registered but the event key has no payload type."""

    def __init__(self, event_key: str) -> None:
        super().__init__(f"Unsupported event key type: {event_key}")
        self.event_key = event_key


class BodyParseError(WebhookError):
    """The request body is not JSON or does not fit the payload type."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Read error: {error}")


class HandlerError(WebhookError):
    """The registered handler raised."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Error handling the event: {error}")
