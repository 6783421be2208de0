"""Bitbucket webhook dispatcher.

Maps the X-Event-Key header of a request to the payload model for that event,
parses the JSON body and calls the handler registered for the event key.
"""
import inspect
import logging
from typing import Awaitable, Callable, Dict, KeysView, Optional, Union

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from bitbucket_webhooks.core.exceptions import (
    BodyParseError,
    HandlerError,
    MissingEventKey,
    UnknownHandler,
    UnsupportedEventKey,
    WebhookError,
)
from bitbucket_webhooks.schemas.events import (
    EVENT_KEY_HEADER,
    EventKey,
    Headers,
    collect_headers,
    payload_type,
)

logger = logging.getLogger(__name__)

# Handlers receive the headers and the parsed payload. Raising any exception
# turns the response into a 400 Bad Request.
WebhookHandler = Callable[[Headers, BaseModel], Union[None, Awaitable[None]]]


class Webhook:
    """Parses Bitbucket webhook requests and calls the registered event handlers.

    Usage::

        webhook = Webhook()

        @webhook.on("repo:push")
        def on_push(headers, event: RepoPushEvent):
            print(event.repository.full_name)

        app.include_router(create_router(webhook, "/webhooks"))

    Register handlers before serving requests; the registry is not locked.
    """

    def __init__(self):
        self._handlers: Dict[str, WebhookHandler] = {}
        # Optional callback for dispatch failures, called as log_on_error(format, *args)
        self.log_on_error: Optional[Callable[..., None]] = None

    @property
    def handlers(self) -> KeysView[str]:
        """Event keys that have a registered handler"""
        return self._handlers.keys()

    def handle(self, event_key: Union[str, EventKey], handler: WebhookHandler) -> None:
        """Register a handler for an event key, replacing any previous one.

        The key is not checked against the known Bitbucket events; a key with no
        payload type fails when a request for it arrives.
        """
        if isinstance(event_key, EventKey):
            event_key = event_key.value
        self._handlers[event_key] = handler
        logger.debug(f"Registered handler for {event_key}")

    def on(self, event_key: Union[str, EventKey]) -> Callable[[WebhookHandler], WebhookHandler]:
        """Decorator form of handle()"""

        def register(handler: WebhookHandler) -> WebhookHandler:
            self.handle(event_key, handler)
            return handler

        return register

    async def dispatch(self, headers: Headers, body: bytes) -> BaseModel:
        """Route one request body to its handler and return the parsed payload.

        Raises a WebhookError subclass for every failure.
        """
        event_key = headers.get(EVENT_KEY_HEADER, "")
        if not event_key:
            raise MissingEventKey()

        handler = self._handlers.get(event_key)
        if handler is None:
            raise UnknownHandler(event_key)

        model = payload_type(event_key)
        if model is None:
            raise UnsupportedEventKey(event_key)

        try:
            event = model.model_validate_json(body)
        except ValueError as e:
            raise BodyParseError(e) from e

        try:
            result = handler(headers, event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            raise HandlerError(e) from e

        logger.debug(f"Handled {event_key} event")
        return event

    async def __call__(self, request: Request) -> Response:
        """Request endpoint: 200 with no body on success, 400 with a message otherwise"""
        headers = collect_headers(request.headers)
        body = await request.body()
        try:
            await self.dispatch(headers, body)
        except WebhookError as e:
            return self._bad_request(e)
        return Response(status_code=200)

    def _bad_request(self, error: WebhookError) -> Response:
        logger.info(f"Rejected webhook request: {error.message}")
        if self.log_on_error is not None:
            try:
                self.log_on_error(error.message)
            except Exception:
                logger.exception("log_on_error hook failed")
        return PlainTextResponse(error.message, status_code=error.status_code)

    def __repr__(self) -> str:
        return f"Webhook(handlers={sorted(self._handlers)})"

