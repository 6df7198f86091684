from datetime import datetime

from fastapi.testclient import TestClient

from giving.main import create_app
from tests.conftest import make_settings


def test_root_returns_liveness_text(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "KAC Giving Backend is running ✅"


def test_health_reports_port_and_key_presence(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["ok"] is True
    assert data["port"] == 3000
    assert data["hasStripeKey"] is True
    assert datetime.fromisoformat(data["time"]).tzinfo is not None


def test_health_without_key(unconfigured_client):
    data = unconfigured_client.get("/health").json()

    assert data["ok"] is True
    assert data["hasStripeKey"] is False


def test_health_uses_configured_port():
    client = TestClient(create_app(make_settings(STRIPE_SECRET_KEY=None, PORT=8080)))

    assert client.get("/health").json()["port"] == 8080


def test_lifespan_closes_stripe_client(fake_stripe):
    closed = []

    async def close() -> None:
        closed.append(True)

    fake_stripe.close = close
    with TestClient(create_app(make_settings(), stripe_client=fake_stripe)) as client:
        assert client.get("/").status_code == 200

    assert closed == [True]
