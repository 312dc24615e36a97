# backend/tests/modules/checkout/facades/webhooks/test_process_webhook.py
# -*- coding: utf-8 -*-
"""
Tests de reconciliación de webhooks de Wompi (process_webhook).
"""
from datetime import datetime, timezone

import pytest

from app.modules.checkout.enums import TransactionStatus
from app.modules.checkout.facades.webhooks import TransactionStatusHooks, process_webhook


class RecordingHooks(TransactionStatusHooks):
    def __init__(self, store, *, fail=False):
        super().__init__(store)
        self.calls = []
        self.fail = fail

    async def dispatch(self, status, transaction, webhook_transaction):
        self.calls.append(status)
        if self.fail:
            raise RuntimeError("servicio de correo caído")
        return await super().dispatch(status, transaction, webhook_transaction)


@pytest.mark.asyncio
async def test_approved_webhook_updates_transaction(store, gateway, pending_transaction, make_webhook):
    hooks = RecordingHooks(store)

    result = await process_webhook(make_webhook(), store=store, gateway=gateway, hooks=hooks)

    assert result.success is True
    assert result.applied is True
    assert result.status is TransactionStatus.APPROVED
    assert result.transaction_id == pending_transaction.id

    transaction = store.rows[pending_transaction.id]
    assert transaction.status is TransactionStatus.APPROVED
    assert transaction.processed_at is not None
    assert hooks.calls == [TransactionStatus.APPROVED]

    metadata = transaction.transaction_metadata
    assert metadata["product_id"] == "album_001"
    assert metadata["webhook_event"] == "transaction.updated"
    assert metadata["webhook_timestamp"] == datetime.fromtimestamp(
        1757500000, tz=timezone.utc
    ).isoformat()
    assert metadata["webhook_timestamp_epoch"] == 1757500000
    assert metadata["amount_in_cents"] == 50000
    assert "last_webhook_processed_at" in metadata
    assert "approved_at" in metadata
    assert metadata["wompi_approval_data"]["id"] == "wtx_1"


@pytest.mark.asyncio
async def test_replayed_webhook_is_idempotent(store, gateway, pending_transaction, make_webhook):
    hooks = RecordingHooks(store)
    payload = make_webhook()

    await process_webhook(payload, store=store, gateway=gateway, hooks=hooks)
    transaction = store.rows[pending_transaction.id]
    first = (
        transaction.status,
        transaction.external_transaction_id,
        transaction.processed_at,
        transaction.transaction_metadata["status"],
        transaction.transaction_metadata["webhook_timestamp"],
    )

    result = await process_webhook(payload, store=store, gateway=gateway, hooks=hooks)
    second = (
        transaction.status,
        transaction.external_transaction_id,
        transaction.processed_at,
        transaction.transaction_metadata["status"],
        transaction.transaction_metadata["webhook_timestamp"],
    )

    assert result.success is True
    assert first == second
    # Un hook por entrega
    assert hooks.calls == [TransactionStatus.APPROVED, TransactionStatus.APPROVED]


@pytest.mark.asyncio
async def test_bad_signature_is_rejected_before_lookup(store, gateway, pending_transaction, make_webhook):
    payload = make_webhook()
    payload["signature"]["checksum"] = "0" * 64
    store.calls.clear()

    result = await process_webhook(payload, store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == "INVALID_SIGNATURE"
    assert store.calls == []
    assert store.rows[pending_transaction.id].status is TransactionStatus.PENDING


@pytest.mark.asyncio
async def test_structural_failure_skips_signature_and_store(store, gateway, make_webhook):
    payload = make_webhook()
    del payload["data"]["transaction"]["id"]

    result = await process_webhook(payload, store=store, gateway=gateway)

    assert result.error_code == "INVALID_PAYLOAD"
    assert gateway.signature_checks == []
    assert store.calls == []


@pytest.mark.asyncio
async def test_unknown_transaction_is_a_hard_failure(store, gateway, make_webhook):
    result = await process_webhook(make_webhook(transaction_id="wtx_missing"), store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == "TRANSACTION_NOT_FOUND"


@pytest.mark.asyncio
async def test_unsigned_webhooks_accepted_without_integrity_key(
    store, make_gateway, pending_transaction, make_webhook
):
    gateway = make_gateway(integrity_key=None)

    result = await process_webhook(make_webhook(key=None), store=store, gateway=gateway)

    assert result.success is True
    assert store.rows[pending_transaction.id].status is TransactionStatus.APPROVED


@pytest.mark.asyncio
async def test_declined_webhook_sets_error_message(store, gateway, pending_transaction, make_webhook):
    hooks = RecordingHooks(store)
    payload = make_webhook(status="DECLINED", status_message="Fondos insuficientes")

    await process_webhook(payload, store=store, gateway=gateway, hooks=hooks)

    transaction = store.rows[pending_transaction.id]
    assert transaction.status is TransactionStatus.DECLINED
    assert transaction.error_message == "Fondos insuficientes"
    assert hooks.calls == [TransactionStatus.DECLINED]


@pytest.mark.asyncio
async def test_pending_webhook_does_not_set_processed_at(store, gateway, pending_transaction, make_webhook):
    await process_webhook(make_webhook(status="PENDING"), store=store, gateway=gateway)
    assert store.rows[pending_transaction.id].processed_at is None


@pytest.mark.asyncio
async def test_processed_at_keeps_first_terminal_observation(
    store, gateway, pending_transaction, make_webhook
):
    await process_webhook(make_webhook(timestamp=100), store=store, gateway=gateway)
    first = store.rows[pending_transaction.id].processed_at

    await process_webhook(make_webhook(status="VOIDED", timestamp=200), store=store, gateway=gateway)

    transaction = store.rows[pending_transaction.id]
    assert transaction.status is TransactionStatus.DECLINED
    assert transaction.processed_at == first


@pytest.mark.asyncio
async def test_late_pending_does_not_regress_terminal_status(
    store, gateway, pending_transaction, make_webhook
):
    hooks = RecordingHooks(store)
    await process_webhook(make_webhook(timestamp=200), store=store, gateway=gateway, hooks=hooks)

    result = await process_webhook(
        make_webhook(status="PENDING", timestamp=100), store=store, gateway=gateway, hooks=hooks
    )

    assert result.success is True
    assert result.applied is False
    assert store.rows[pending_transaction.id].status is TransactionStatus.APPROVED
    assert hooks.calls == [TransactionStatus.APPROVED]


@pytest.mark.asyncio
async def test_older_terminal_event_does_not_override_newer(
    store, gateway, pending_transaction, make_webhook
):
    await process_webhook(make_webhook(status="APPROVED", timestamp=200), store=store, gateway=gateway)

    result = await process_webhook(
        make_webhook(status="DECLINED", timestamp=150), store=store, gateway=gateway
    )

    assert result.applied is False
    assert store.rows[pending_transaction.id].status is TransactionStatus.APPROVED


@pytest.mark.asyncio
async def test_hook_failure_is_swallowed(store, gateway, pending_transaction, make_webhook):
    hooks = RecordingHooks(store, fail=True)

    result = await process_webhook(make_webhook(), store=store, gateway=gateway, hooks=hooks)

    assert result.success is True
    assert store.rows[pending_transaction.id].status is TransactionStatus.APPROVED


@pytest.mark.asyncio
async def test_store_failure_is_internal_error(gateway, make_webhook):
    from unittest.mock import AsyncMock

    store = AsyncMock()
    store.get_by_external_transaction_id.side_effect = RuntimeError("db down")

    result = await process_webhook(make_webhook(), store=store, gateway=gateway)

    assert result.success is False
    assert result.error_code == "INTERNAL_ERROR"

# Fin del archivo backend/tests/modules/checkout/facades/webhooks/test_process_webhook.py
