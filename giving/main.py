from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from giving.config import Settings, settings
from giving.errors import register_exception_handlers
from giving.services.stripe import StripeClient, build_stripe_client


def create_app(app_settings: Optional[Settings] = None, stripe_client: Optional[StripeClient] = None) -> FastAPI:
    """Build the API.

    The Stripe client is resolved once here and injected into handlers through
    ``app.state``; it is ``None`` when no secret key is configured.
    """
    cfg = app_settings or settings
    client = stripe_client if stripe_client is not None else build_stripe_client(cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.bind(event="startup").info("Giving API started", port=cfg.port, has_stripe_key=client is not None)
        yield
        if client is not None:
            await client.close()
        logger.bind(event="shutdown").info("Giving API stopped")

    app = FastAPI(title="KAC Giving API", lifespan=lifespan)
    app.state.settings = cfg
    app.state.stripe_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    from giving.routers.health import router as health_router  # local import to avoid circular deps
    from giving.routers.checkout import router as checkout_router

    app.include_router(health_router)
    app.include_router(checkout_router)

    register_exception_handlers(app)
    return app


app = create_app()

# Run with: uvicorn giving.main:app --reload
