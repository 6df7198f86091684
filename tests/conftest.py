from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from giving.config import Settings
from giving.main import create_app


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {"STRIPE_SECRET_KEY": "sk_test_123"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeStripe:
    """Records checkout params and answers with a canned session."""

    def __init__(self, url: str = "https://checkout.example/session/abc", error: Optional[Exception] = None) -> None:
        self.url = url
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create_checkout_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return {"id": f"cs_test_{len(self.calls)}", "url": self.url}

    async def close(self) -> None:
        pass


@pytest.fixture
def fake_stripe() -> FakeStripe:
    return FakeStripe()


@pytest.fixture
def client(fake_stripe: FakeStripe) -> TestClient:
    return TestClient(create_app(make_settings(), stripe_client=fake_stripe))


@pytest.fixture
def unconfigured_client() -> TestClient:
    return TestClient(create_app(make_settings(STRIPE_SECRET_KEY=None)))


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    yield messages
    logger.remove(handler_id)
