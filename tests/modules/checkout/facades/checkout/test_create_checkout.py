# backend/tests/modules/checkout/facades/checkout/test_create_checkout.py
# -*- coding: utf-8 -*-
"""
Tests del orquestador create_checkout con store y pasarela en memoria.
"""
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.modules.checkout.adapters import (
    GatewayErrorCategory,
    GatewayErrorReason,
    WompiGatewayError,
)
from app.modules.checkout.enums import TransactionStatus, TransactionType
from app.modules.checkout.facades.checkout import DEFAULT_REDIRECT_URL, create_checkout
from app.modules.checkout.metrics import get_sample_value


@pytest.mark.asyncio
async def test_intent_checkout_happy_path(store, gateway, make_checkout_request):
    """Sin token: flujo intent con checkoutUrl."""
    result = await create_checkout(make_checkout_request(), store=store, gateway=gateway)

    assert result.success is True
    assert result.payment_type == "intent"
    assert result.wompi_transaction_id == "wtx_1"
    assert result.checkout_url == (
        "https://checkout.wompi.co/p/pub_test_key?transaction_id=wtx_1"
    )
    assert result.amount == 50000
    assert result.currency == "COP"

    transaction = store.rows[result.transaction.id]
    assert transaction.external_transaction_id == "wtx_1"
    assert transaction.status is TransactionStatus.PENDING
    assert transaction.type is TransactionType.PAYMENT
    assert transaction.description == 'Compra de música "Vol. 1"'
    assert transaction.transaction_metadata["wompi_status"] == "PENDING"
    assert transaction.transaction_metadata["product_name"] == "Vol. 1"
    assert "created_at" in transaction.transaction_metadata


@pytest.mark.asyncio
async def test_direct_checkout_has_no_checkout_url(store, gateway, make_checkout_request):
    """Con token: flujo directo, el token viaja en payment_method."""
    result = await create_checkout(
        make_checkout_request(paymentMethodToken="tok_1"), store=store, gateway=gateway
    )

    assert result.success is True
    assert result.payment_type == "direct"
    assert result.checkout_url is None
    assert "checkoutUrl" not in result.to_public()
    assert gateway.requests[0]["payment_method"]["token"] == "tok_1"


@pytest.mark.asyncio
async def test_amount_below_minimum_makes_no_io(make_checkout_request):
    store = AsyncMock()
    gateway = AsyncMock()

    result = await create_checkout(make_checkout_request(amount=500), store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == "INVALID_AMOUNT"
    assert result.error == "El monto debe ser al menos 1000 centavos (10.00)"
    store.create.assert_not_awaited()
    gateway.create_transaction.assert_not_awaited()


@pytest.mark.asyncio
async def test_supplied_reference_and_description_pass_through(store, gateway, make_checkout_request):
    request = make_checkout_request(reference="MY-REF-1", description="Regalo", metadata={"a": 1})
    result = await create_checkout(request, store=store, gateway=gateway)

    assert result.reference == "MY-REF-1"
    assert gateway.requests[0]["reference"] == "MY-REF-1"
    transaction = store.rows[result.transaction.id]
    assert transaction.description == "Regalo"
    assert transaction.transaction_metadata["a"] == 1


@pytest.mark.asyncio
async def test_generated_references_differ_between_calls(store, gateway, make_checkout_request):
    first = await create_checkout(make_checkout_request(), store=store, gateway=gateway)
    second = await create_checkout(make_checkout_request(), store=store, gateway=gateway)
    assert first.reference != second.reference


@pytest.mark.asyncio
async def test_gateway_request_uses_redirect_url(store, gateway, make_checkout_request):
    await create_checkout(make_checkout_request(), store=store, gateway=gateway)
    assert gateway.requests[0]["redirect_url"] == DEFAULT_REDIRECT_URL

    await create_checkout(
        make_checkout_request(),
        store=store,
        gateway=gateway,
        redirect_url="https://hatsusound.co/payment/result",
    )
    assert gateway.requests[1]["redirect_url"] == "https://hatsusound.co/payment/result"


@pytest.mark.asyncio
async def test_gateway_status_is_mapped(store, make_gateway, make_checkout_request):
    gateway = make_gateway(status="APPROVED")
    result = await create_checkout(
        make_checkout_request(paymentMethodToken="tok_1"), store=store, gateway=gateway
    )
    assert result.transaction.status is TransactionStatus.APPROVED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error,expected",
    [
        (WompiGatewayError("401", category=GatewayErrorCategory.AUTH, status_code=401), "AUTH_ERROR"),
        (
            WompiGatewayError(
                "422",
                category=GatewayErrorCategory.VALIDATION,
                status_code=422,
                reason=GatewayErrorReason.PAYMENT_TOKEN,
            ),
            "INVALID_PAYMENT_TOKEN",
        ),
        (WompiGatewayError("timeout", category=GatewayErrorCategory.UNAVAILABLE), "SERVICE_UNAVAILABLE"),
    ],
)
async def test_gateway_failure_leaves_local_record_pending(
    store, make_gateway, make_checkout_request, error, expected
):
    gateway = make_gateway(error=error)

    result = await create_checkout(make_checkout_request(), store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == expected
    assert "Wompi" not in result.error
    assert result.to_public() == {
        "success": False,
        "error": result.error,
        "errorCode": expected,
    }

    (transaction,) = store.rows.values()
    assert transaction.status is TransactionStatus.PENDING
    assert transaction.external_transaction_id is None


@pytest.mark.asyncio
async def test_unexpected_error_is_internal_error(gateway, make_checkout_request):
    store = AsyncMock()
    store.create.side_effect = RuntimeError("connection reset by peer")

    result = await create_checkout(make_checkout_request(), store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == "INTERNAL_ERROR"


@pytest.mark.asyncio
async def test_duplicate_reference_in_store_is_internal_error(gateway, make_checkout_request):
    store = AsyncMock()
    store.create.side_effect = IntegrityError(
        "INSERT INTO transactions (id, reference, amount, currency) VALUES ($1, $2, $3, $4)",
        {"reference": "ALBUM001-DUP", "amount": 50000},
        Exception("duplicate key value violates unique constraint uq_transactions_reference"),
    )

    result = await create_checkout(
        make_checkout_request(reference="ALBUM001-DUP"), store=store, gateway=gateway
    )

    assert result.success is False
    assert result.error_code == "INTERNAL_ERROR"
    assert "monto" not in result.error
    assert gateway.requests == []


@pytest.mark.asyncio
async def test_checkout_outcomes_are_counted(store, gateway, make_checkout_request):
    labels = {"payment_type": "intent", "outcome": "INVALID_CURRENCY"}
    before = get_sample_value("checkout_requests_total", labels)

    await create_checkout(make_checkout_request(currency="MXN"), store=store, gateway=gateway)

    assert get_sample_value("checkout_requests_total", labels) == before + 1


@pytest.mark.asyncio
async def test_success_response_serializes_in_camel_case(store, gateway, make_checkout_request):
    result = await create_checkout(make_checkout_request(), store=store, gateway=gateway)
    body = result.to_public()

    assert body["success"] is True
    assert body["wompiTransactionId"] == "wtx_1"
    assert body["paymentType"] == "intent"
    assert body["transaction"]["externalTransactionId"] == "wtx_1"
    assert body["transaction"]["status"] == "pending"
    assert body["transaction"]["metadata"]["product_id"] == "album_001"

# Fin del archivo backend/tests/modules/checkout/facades/checkout/test_create_checkout.py
