from typing import Any, Dict, Optional
from loguru import logger

import stripe
from fastapi import Request

from giving.config import Settings


class StripeClient:
    """Thin async wrapper around the Stripe SDK for creating Checkout sessions."""

    def __init__(
        self,
        secret_key: str,
        api_version: str = "2024-06-20",
        api_base: str = "https://api.stripe.com",
        http_client: Optional[stripe.HTTPClient] = None,
    ) -> None:
        self.api_base = api_base
        self._http_client = http_client or stripe.HTTPXClient(timeout=30)
        self._client = stripe.StripeClient(
            secret_key,
            stripe_version=api_version,
            base_addresses={"api": api_base},
            max_network_retries=0,
            http_client=self._http_client,
        )

    async def create_checkout_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        logger.bind(event="stripe.request").info("Creating Stripe checkout session")
        try:
            session = await self._client.v1.checkout.sessions.create_async(params=params)
        except stripe.StripeError as exc:
            logger.bind(event="stripe.error", code=exc.code, status=exc.http_status).warning(
                "Stripe rejected checkout session: {}", exc.user_message or str(exc)
            )
            raise
        logger.bind(event="stripe.response").info("Stripe checkout session {id} created", id=session.id)
        return {"id": session.id, "url": session.url}

    async def close(self) -> None:
        await self._http_client.close_async()


def build_stripe_client(settings: Settings) -> Optional[StripeClient]:
    """Create the process-wide client, or ``None`` when no secret key is configured."""
    if not settings.stripe_secret_key:
        logger.bind(event="stripe.not_configured").warning(
            "STRIPE_SECRET_KEY is missing. /create-checkout will return 500 until it is set."
        )
        return None
    return StripeClient(
        settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
        api_base=settings.stripe_api_base,
    )


def get_stripe_client(request: Request) -> Optional[StripeClient]:
    return request.app.state.stripe_client
