import logging
from typing import Optional

from fastapi import FastAPI

from bitbucket_webhooks.api.webhook_routes import create_router
from bitbucket_webhooks.core.config import Settings
from bitbucket_webhooks.core.config import settings as default_settings
from bitbucket_webhooks.services.webhook import Webhook

logger = logging.getLogger(__name__)


def create_app(
    webhook: Optional[Webhook] = None, settings: Optional[Settings] = None
) -> FastAPI:
    settings = settings or default_settings
    webhook = webhook or Webhook()

    logging.basicConfig(level=settings.LOG_LEVEL)
    if settings.LOG_WEBHOOK_ERRORS and webhook.log_on_error is None:
        webhook.log_on_error = logger.warning

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.webhook = webhook
    app.include_router(create_router(webhook, settings.WEBHOOK_PATH))

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


# Register handlers on this instance before starting the server
webhook = Webhook()
app = create_app(webhook)
