# backend/tests/modules/checkout/conftest.py
# -*- coding: utf-8 -*-
"""
Fixtures del módulo Checkout.

- FakeTransactionStore: TransactionStore en memoria sobre objetos ORM
  Transaction (sin base de datos).
- FakeGateway: PaymentGateway con respuestas configurables y registro
  de llamadas; la firma se calcula con HMAC-SHA256 real.
"""

import hashlib
import hmac
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

import pytest

from app.modules.checkout.adapters import GatewayErrorCategory, WompiGatewayError
from app.modules.checkout.facades.webhooks import canonical_payload
from app.modules.checkout.models import Transaction
from app.modules.checkout.ports import PaymentGateway, TransactionNotFoundError, TransactionStore
from app.modules.checkout.enums import Currency, TransactionStatus, TransactionType
from app.modules.checkout.schemas import CheckoutRequest

INTEGRITY_KEY = "test_integrity_secret"


class FakeTransactionStore(TransactionStore):
    def __init__(self):
        self.rows: Dict[str, Transaction] = {}
        self.calls: List[str] = []

    async def create(self, data):
        self.calls.append("create")
        values = dict(data)
        values.setdefault("id", str(uuid4()))
        values.setdefault("transaction_metadata", {})
        now = datetime.now(timezone.utc)
        values.setdefault("created_at", now)
        values.setdefault("updated_at", now)
        transaction = Transaction(**values)
        self.rows[transaction.id] = transaction
        return transaction

    async def update(self, transaction_id, data):
        self.calls.append("update")
        transaction = self.rows.get(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        for key, value in dict(data).items():
            setattr(transaction, key, deepcopy(value))
        transaction.updated_at = datetime.now(timezone.utc)
        return transaction

    async def get_by_id(self, transaction_id):
        self.calls.append("get_by_id")
        return self.rows.get(transaction_id)

    async def get_by_reference(self, reference):
        self.calls.append("get_by_reference")
        return next((t for t in self.rows.values() if t.reference == reference), None)

    async def get_by_external_transaction_id(self, external_id):
        self.calls.append("get_by_external_transaction_id")
        return next(
            (t for t in self.rows.values() if t.external_transaction_id == external_id),
            None,
        )


class FakeGateway(PaymentGateway):
    def __init__(
        self,
        *,
        transaction_id: str = "wtx_1",
        status: str = "PENDING",
        error: Optional[Exception] = None,
        integrity_key: Optional[str] = INTEGRITY_KEY,
    ):
        self.transaction_id = transaction_id
        self.status = status
        self.error = error
        self.integrity_key = integrity_key
        self.requests: List[Dict[str, Any]] = []
        self.signature_checks: List[str] = []

    async def create_transaction(self, request):
        self.requests.append(dict(request))
        if self.error is not None:
            raise self.error
        return {
            "data": {
                "id": self.transaction_id,
                "status": self.status,
                "amount_in_cents": request["amount_in_cents"],
                "currency": request["currency"],
                "reference": request["reference"],
                "customer_email": request["customer_email"],
                "created_at": "2026-09-10T12:00:00.000Z",
                "updated_at": "2026-09-10T12:00:00.000Z",
            }
        }

    async def get_transaction(self, transaction_id):
        if transaction_id != self.transaction_id:
            raise WompiGatewayError(
                "Wompi 404 NOT_FOUND_ERROR: get_transaction",
                category=GatewayErrorCategory.OTHER,
                status_code=404,
            )
        return {"data": {"id": transaction_id, "status": self.status}}

    async def verify_signature(self, payload, checksum):
        self.signature_checks.append(payload)
        if not self.integrity_key:
            return True
        expected = hmac.new(
            self.integrity_key.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256
        ).hexdigest()
        return hmac.compare_digest(expected, checksum.lower())

    def get_checkout_url(self, transaction_id):
        return f"https://checkout.wompi.co/p/pub_test_key?transaction_id={transaction_id}"

    async def create_payment_method_token(self, card_data):
        return "tok_test_" + str(card_data.get("number", ""))[-4:]


def _sign(payload: Dict[str, Any], key: str = INTEGRITY_KEY) -> str:
    return hmac.new(
        key.encode("utf-8"), canonical_payload(payload).encode("utf-8"), hashlib.sha256
    ).hexdigest()


def _make_webhook(
    *,
    transaction_id: str = "wtx_1",
    status: str = "APPROVED",
    timestamp: int = 1757500000,
    status_message: Optional[str] = None,
    key: Optional[str] = INTEGRITY_KEY,
) -> Dict[str, Any]:
    transaction = {
        "id": transaction_id,
        "status": status,
        "reference": "ALBUM001-1757499000000-ABCDEF12",
        "amount_in_cents": 50000,
        "currency": "COP",
        "customer_email": "a@b.com",
        "created_at": "2026-09-10T12:00:00.000Z",
        "updated_at": "2026-09-10T12:05:00.000Z",
    }
    if status_message is not None:
        transaction["status_message"] = status_message
    payload = {
        "event": "transaction.updated",
        "data": {"transaction": transaction},
        "timestamp": timestamp,
        "signature": {"checksum": "", "properties": ["transaction.id", "transaction.status"]},
    }
    payload["signature"]["checksum"] = _sign(payload, key) if key else "unsigned"
    return payload


def _checkout_payload(**overrides) -> CheckoutRequest:
    data = {
        "amount": 50000,
        "currency": "COP",
        "customerEmail": "a@b.com",
        "productId": "album_001",
        "productName": "Vol. 1",
        "productCategory": "Música",
    }
    data.update(overrides)
    return CheckoutRequest.model_validate(data)


@pytest.fixture
def make_webhook():
    return _make_webhook


@pytest.fixture
def sign_webhook():
    return _sign


@pytest.fixture
def make_checkout_request():
    return _checkout_payload


@pytest.fixture
def make_gateway():
    return FakeGateway


@pytest.fixture
def store():
    return FakeTransactionStore()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
async def pending_transaction(store):
    """Transacción local PENDING ya enlazada con la transacción wtx_1 de Wompi."""
    return await store.create(
        {
            "reference": "ALBUM001-1757499000000-ABCDEF12",
            "amount": 50000,
            "currency": Currency.COP,
            "status": TransactionStatus.PENDING,
            "type": TransactionType.PAYMENT,
            "customer_email": "a@b.com",
            "external_transaction_id": "wtx_1",
            "transaction_metadata": {"product_id": "album_001"},
        }
    )

# Fin del archivo backend/tests/modules/checkout/conftest.py
