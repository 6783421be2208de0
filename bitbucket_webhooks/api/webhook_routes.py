from fastapi import APIRouter, Request, Response

from bitbucket_webhooks.services.webhook import Webhook


def create_router(webhook: Webhook, path: str = "/webhooks") -> APIRouter:
    """Expose a Webhook as a POST endpoint"""
    router = APIRouter(tags=["webhooks"])

    @router.post(path)
    async def bitbucket_webhook(request: Request) -> Response:
        return await webhook(request)

    return router
