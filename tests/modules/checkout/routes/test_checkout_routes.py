# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/routes/test_checkout_routes.py

Tests HTTP de las rutas de checkout con store y pasarela en memoria
(inyectados vía app.dependency_overrides).

Autor: HatsuSound
Fecha: 12/09/2026
"""
import httpx
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from app.modules.checkout.adapters import WompiClient
from app.modules.checkout.enums import TransactionStatus
from app.modules.checkout.metrics import get_sample_value
from app.modules.checkout.routes import (
    get_payment_gateway,
    get_transaction_store,
    get_wompi_admin_client,
)
from app.shared.config.settings_wompi import WompiSettings

CHECKOUT_BODY = {
    "amount": 50000,
    "currency": "COP",
    "customerEmail": "a@b.com",
    "productId": "album_001",
    "productName": "Vol. 1",
    "productCategory": "Música",
}


@pytest.fixture
def app(store, gateway):
    from app.main import create_app

    fastapi_app = create_app()
    fastapi_app.dependency_overrides[get_transaction_store] = lambda: store
    fastapi_app.dependency_overrides[get_payment_gateway] = lambda: gateway
    return fastapi_app


@pytest.fixture
async def client(app):
    async with LifespanManager(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac


# ---------------------------------------------------------------------------
# POST /checkout
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_checkout_returns_201(client):
    resp = await client.post("/checkout", json=CHECKOUT_BODY)

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["paymentType"] == "intent"
    assert body["wompiTransactionId"] == "wtx_1"
    assert body["checkoutUrl"].endswith("transaction_id=wtx_1")
    assert body["transaction"]["status"] == "pending"


@pytest.mark.asyncio
async def test_direct_checkout_omits_checkout_url(client):
    resp = await client.post("/checkout", json={**CHECKOUT_BODY, "paymentMethodToken": "tok_1"})

    assert resp.status_code == 201
    assert resp.json()["paymentType"] == "direct"
    assert "checkoutUrl" not in resp.json()


@pytest.mark.asyncio
async def test_create_checkout_business_error_returns_400(client, store):
    resp = await client.post("/checkout", json={**CHECKOUT_BODY, "amount": 500})

    assert resp.status_code == 400
    assert resp.json() == {
        "success": False,
        "error": "El monto debe ser al menos 1000 centavos (10.00)",
        "errorCode": "INVALID_AMOUNT",
    }
    assert store.rows == {}


@pytest.mark.asyncio
async def test_create_checkout_wrong_types_return_422(client):
    resp = await client.post("/checkout", json={**CHECKOUT_BODY, "amount": "mucho"})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /checkout/webhook
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_webhook_ack(client, store, pending_transaction, make_webhook):
    resp = await client.post("/checkout/webhook", json=make_webhook())

    assert resp.status_code == 200
    assert resp.json() == {"received": True}
    assert store.rows[pending_transaction.id].status is TransactionStatus.APPROVED


@pytest.mark.asyncio
async def test_webhook_bad_signature_returns_400(client, pending_transaction, make_webhook):
    payload = make_webhook()
    payload["signature"]["checksum"] = "f" * 64

    resp = await client.post("/checkout/webhook", json=payload)

    assert resp.status_code == 400
    assert resp.json()["detail"]["errorCode"] == "INVALID_SIGNATURE"


@pytest.mark.asyncio
async def test_webhook_invalid_json_returns_400(client):
    resp = await client.post(
        "/checkout/webhook",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"]["errorCode"] == "INVALID_PAYLOAD"


@pytest.mark.asyncio
async def test_webhook_arbitrary_event_names_do_not_create_metric_series(client):
    before = get_sample_value("checkout_webhook_received_total", {"event": "other"})

    for i in range(3):
        resp = await client.post("/checkout/webhook", json={"event": f"spam.{i}", "data": {}})
        assert resp.status_code == 400

    metrics = (await client.get("/metrics")).text
    assert "spam." not in metrics
    assert get_sample_value("checkout_webhook_received_total", {"event": "other"}) == before + 3


@pytest.mark.asyncio
async def test_webhook_unknown_transaction_returns_500(client, make_webhook):
    resp = await client.post("/checkout/webhook", json=make_webhook(transaction_id="wtx_404"))

    assert resp.status_code == 500
    assert resp.json()["detail"]["errorCode"] == "TRANSACTION_NOT_FOUND"


# ---------------------------------------------------------------------------
# GET /checkout/status/{id}
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_status_by_id_and_reference(client, pending_transaction):
    by_id = await client.get(f"/checkout/status/{pending_transaction.id}")
    by_ref = await client.get(f"/checkout/status/{pending_transaction.reference}")

    assert by_id.status_code == 200
    assert by_ref.status_code == 200
    assert by_id.json()["transaction"]["id"] == pending_transaction.id
    assert by_ref.json()["transaction"]["reference"] == pending_transaction.reference


@pytest.mark.asyncio
async def test_status_not_found(client):
    resp = await client.get("/checkout/status/nope")
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# /checkout/wompi/*
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_wompi_status_passthrough(client):
    ok = await client.get("/checkout/wompi/status/wtx_1")
    missing = await client.get("/checkout/wompi/status/wtx_x")

    assert ok.status_code == 200
    assert ok.json()["transaction"]["id"] == "wtx_1"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_wompi_config_and_validate(app, client):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"data": {"presigned_acceptance": {"acceptance_token": "acc_1"}}}
        )

    wompi = WompiClient(
        WompiSettings(WOMPI_PUBLIC_KEY="pub_test_abcdefghijklmnopqrstuvwxyz"),
        transport=httpx.MockTransport(handler),
    )
    app.dependency_overrides[get_wompi_admin_client] = lambda: wompi

    config = await client.get("/checkout/wompi/config")
    validate = await client.get("/checkout/wompi/validate")

    assert config.status_code == 200
    assert config.json()["config"]["publicKey"] == "pub_test_abcde…wxyz"
    assert config.json()["config"]["privateKey"] == "UNDEFINED"
    assert validate.json()["valid"] is True
    assert validate.json()["environment"] == "uat_sandbox"


@pytest.mark.asyncio
async def test_create_token(client):
    resp = await client.post(
        "/checkout/wompi/create-token",
        json={
            "number": "4242424242424242",
            "cvc": "123",
            "expMonth": "08",
            "expYear": "28",
            "cardHolderName": "Ana Ruiz",
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "token": "tok_test_4242"}


# ---------------------------------------------------------------------------
# /health y /metrics
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health_reports_degraded_without_database(client, monkeypatch):
    async def _db_down(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
        return False

    monkeypatch.setattr("app.routes.health_routes.check_database_health", _db_down)

    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "degraded"
    assert resp.json()["environment"] == "test"


@pytest.mark.asyncio
async def test_metrics_exposes_checkout_counters(client):
    await client.post("/checkout", json={**CHECKOUT_BODY, "currency": "MXN"})

    resp = await client.get("/metrics")

    assert resp.status_code == 200
    assert "checkout_requests_total" in resp.text

# Fin del archivo backend/tests/modules/checkout/routes/test_checkout_routes.py
