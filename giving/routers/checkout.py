from typing import Optional

from fastapi import APIRouter, Depends
from loguru import logger

from giving.config import Settings, get_settings
from giving.errors import ConfigurationError, UpstreamError, ValidationError
from giving.schemas.checkout import CreateCheckoutRequest, CreateCheckoutResponse
from giving.services.references import build_session_params, resolve_reference
from giving.services.stripe import StripeClient, get_stripe_client
from giving.utils.texts import get_text

router = APIRouter(tags=["checkout"])


@router.post("/create-checkout", response_model=CreateCheckoutResponse)
async def create_checkout(
    payload: CreateCheckoutRequest,
    stripe: Optional[StripeClient] = Depends(get_stripe_client),
    settings: Settings = Depends(get_settings),
) -> CreateCheckoutResponse:
    """Create a Stripe Checkout session for a one-off gift and return its URL.

    Body: ``{"type": "tithe"|"offering"|"haggai", "amount": 12345, "currency": "gbp"}``
    """
    donation_type, amount = payload.donation_type, payload.amount
    if not donation_type or not amount:
        logger.bind(event="checkout.rejected").info("Missing type or amount")
        raise ValidationError(get_text("checkout", "missing_fields", "Missing type or amount"))
    if amount < 0:
        logger.bind(event="checkout.rejected", amount=amount).info("Negative amount")
        raise ValidationError(get_text("checkout", "invalid_amount", "amount must be a positive integer"))

    reference = resolve_reference(donation_type, strict=settings.strict_donation_types)

    if stripe is None:
        raise ConfigurationError(
            get_text("checkout", "not_configured", "Stripe not configured on server (missing STRIPE_SECRET_KEY).")
        )

    currency = settings.default_currency if payload.currency is None else payload.currency
    params = build_session_params(donation_type, amount, currency, reference, settings)
    try:
        session = await stripe.create_checkout_session(params)
        url = session["url"]
        if not url:
            raise ValueError("checkout session has no url")
    except Exception as exc:
        logger.bind(event="checkout.failed", type=donation_type, reference=reference).exception("Checkout error: {}", exc)
        raise UpstreamError(get_text("checkout", "failed", "Failed to create checkout session.")) from exc

    logger.bind(event="checkout.created", session_id=session.get("id"), reference=reference).info(
        "Checkout session created: {amount} {currency}", amount=amount, currency=currency
    )
    return CreateCheckoutResponse(url=url)
