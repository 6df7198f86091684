from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from giving.config import Settings, get_settings
from giving.services.stripe import get_stripe_client
from giving.utils.texts import get_text

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return get_text("service", "liveness", "KAC Giving Backend is running ✅")


@router.get("/health")
async def health(settings: Settings = Depends(get_settings), stripe=Depends(get_stripe_client)) -> dict:
    return {
        "ok": True,
        "port": settings.port,
        "hasStripeKey": stripe is not None,
        "time": datetime.now(timezone.utc).isoformat(),
    }
