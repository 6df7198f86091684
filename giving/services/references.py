from typing import Any, Dict

from giving.config import Settings
from giving.errors import ValidationError
from giving.utils.texts import get_text

REFERENCE_CODES: Dict[str, str] = {
    "tithe": "TITHE",
    "offering": "OFFERING",
    "haggai": "HP2025",
}
UNKNOWN_REFERENCE = "UNKNOWN"


def resolve_reference(donation_type: str, strict: bool = False) -> str:
    """Map a donation type to its reference code.

    Unmapped types fall back to ``UNKNOWN`` and still go through to checkout,
    unless ``strict`` is set, in which case they are rejected.
    """
    reference = REFERENCE_CODES.get(donation_type)
    if reference is not None:
        return reference
    if strict:
        raise ValidationError(get_text("checkout", "unknown_type", "Unknown donation type: {type}", type=donation_type))
    return UNKNOWN_REFERENCE


def build_session_params(
    donation_type: str,
    amount: int,
    currency: str,
    reference: str,
    settings: Settings,
) -> Dict[str, Any]:
    product_name = get_text("checkout", "product_name", "Giving - {type}", type=donation_type.upper())
    return {
        "mode": "payment",
        "currency": currency,
        "line_items": [
            {
                "price_data": {
                    "currency": currency,
                    "product_data": {"name": product_name},
                    "unit_amount": amount,
                },
                "quantity": 1,
            }
        ],
        "metadata": {"reference": reference, "type": donation_type},
        "success_url": settings.success_url,
        "cancel_url": settings.cancel_url,
    }
