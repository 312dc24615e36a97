# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/webhooks/process_webhook.py

Reconciliación de eventos de Wompi contra las transacciones locales.

Pasos (cada uno aborta el procesamiento si falla):
1. Estructura mínima del evento.
2. Firma HMAC (antes de cualquier lectura o escritura).
3. Búsqueda de la transacción por id externo.
4. Mapeo del estado de Wompi.
5. Actualización local: estado, processed_at, error_message y metadata.
6. Hook del estado resultante (errores registrados y descartados).

Reprocesar el mismo evento deja la transacción en el mismo estado.
Eventos fuera de orden: un estado terminal nunca regresa a PENDING, y un
cambio entre estados terminales solo se aplica si el evento no es más
antiguo que el último aplicado.

Autor: HatsuSound
Fecha: 09/09/2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Mapping, Optional

from app.modules.checkout.enums import TransactionStatus
from app.modules.checkout.metrics import (
    record_webhook_applied,
    record_webhook_received,
    record_webhook_rejected,
)
from app.modules.checkout.ports import PaymentGateway, TransactionNotFoundError, TransactionStore
from app.modules.checkout.schemas import WebhookPayload
from app.modules.checkout.facades.status_mapping import is_known_status, map_status

from .hooks import TransactionStatusHooks
from .validation import WebhookPayloadError, validate_webhook_payload
from .verify import WebhookSignatureError, verify_webhook_signature

if TYPE_CHECKING:
    from app.modules.checkout.models import Transaction

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class WebhookProcessingResult:
    success: bool
    error: Optional[str] = None
    error_code: Optional[str] = None
    transaction_id: Optional[str] = None
    status: Optional[TransactionStatus] = None
    applied: bool = False

    @classmethod
    def failure(cls, error: str, error_code: str) -> "WebhookProcessingResult":
        return cls(success=False, error=error, error_code=error_code)


def _stored_webhook_epoch(transaction: "Transaction") -> Optional[int]:
    value = (transaction.transaction_metadata or {}).get("webhook_timestamp_epoch")
    return value if isinstance(value, int) else None


def should_apply(transaction: "Transaction", new_status: TransactionStatus, timestamp: int) -> bool:
    """
    Decide si un evento puede aplicarse sobre el estado actual.

    >>> from types import SimpleNamespace as T
    >>> should_apply(T(status=TransactionStatus.APPROVED, transaction_metadata={}), TransactionStatus.PENDING, 10)
    False
    """
    current = TransactionStatus(transaction.status)
    if not current.is_terminal:
        return True
    if not new_status.is_terminal:
        return False
    if new_status is current:
        return True

    last_epoch = _stored_webhook_epoch(transaction)
    return last_epoch is None or timestamp >= last_epoch


def _webhook_changes(
    transaction: "Transaction",
    event: WebhookPayload,
    new_status: TransactionStatus,
    now: datetime,
) -> dict[str, Any]:
    webhook_tx = event.data.transaction
    changes: dict[str, Any] = {
        "status": new_status,
        "transaction_metadata": {
            **(transaction.transaction_metadata or {}),
            **webhook_tx.model_dump(mode="json", exclude_none=True),
            "webhook_event": event.event,
            "webhook_timestamp": datetime.fromtimestamp(event.timestamp, tz=timezone.utc).isoformat(),
            "webhook_timestamp_epoch": event.timestamp,
            "last_webhook_processed_at": now.isoformat(),
        },
    }
    if transaction.processed_at is None and new_status.is_terminal:
        changes["processed_at"] = now
    if webhook_tx.status_message:
        changes["error_message"] = webhook_tx.status_message
    return changes


async def _run_hooks(
    hooks: TransactionStatusHooks,
    status: TransactionStatus,
    transaction: "Transaction",
    event: WebhookPayload,
) -> None:
    try:
        await hooks.dispatch(status, transaction, event.data.transaction)
    except Exception as e:
        # El estado ya está persistido; un hook fallido no invalida el webhook
        logger.error(
            "Hook %s falló para %s: %r", status.value, transaction.reference, e, exc_info=True
        )


async def process_webhook(
    payload: Mapping[str, Any],
    *,
    store: TransactionStore,
    gateway: PaymentGateway,
    hooks: Optional[TransactionStatusHooks] = None,
) -> WebhookProcessingResult:
    """
    Aplica un evento de Wompi a la transacción local.

    Nunca lanza; los fallos vuelven como WebhookProcessingResult con
    error_code INVALID_PAYLOAD, INVALID_SIGNATURE, TRANSACTION_NOT_FOUND
    o INTERNAL_ERROR.
    """
    record_webhook_received(payload.get("event") if isinstance(payload, Mapping) else None)

    try:
        event = validate_webhook_payload(payload)
        await verify_webhook_signature(payload, event.signature.checksum, gateway)

        webhook_tx = event.data.transaction
        logger.info(
            "Webhook %s: transacción %s (%s) -> %s",
            event.event, webhook_tx.id, webhook_tx.reference, webhook_tx.status,
        )

        transaction = await store.get_by_external_transaction_id(webhook_tx.id)
        if transaction is None:
            raise TransactionNotFoundError(webhook_tx.id)

        if not is_known_status(webhook_tx.status):
            logger.warning("Estado de Wompi no reconocido en webhook: %r", webhook_tx.status)
        new_status = map_status(webhook_tx.status)

        if not should_apply(transaction, new_status, event.timestamp):
            logger.warning(
                "Webhook fuera de orden ignorado: %s %s -> %s (ts=%s)",
                transaction.reference, transaction.status, new_status.value, event.timestamp,
            )
            record_webhook_rejected("out_of_order")
            return WebhookProcessingResult(
                success=True,
                transaction_id=transaction.id,
                status=TransactionStatus(transaction.status),
                applied=False,
            )

        now = datetime.now(timezone.utc)
        updated = await store.update(
            transaction.id, _webhook_changes(transaction, event, new_status, now)
        )
        logger.info("Transacción %s actualizada a %s", updated.reference, new_status.value)
        record_webhook_applied(new_status.value)

        await _run_hooks(hooks or TransactionStatusHooks(store), new_status, updated, event)

        return WebhookProcessingResult(
            success=True,
            transaction_id=updated.id,
            status=new_status,
            applied=True,
        )

    except (WebhookPayloadError, WebhookSignatureError, TransactionNotFoundError) as e:
        logger.warning("Webhook rechazado (%s): %s", e.error_code, e)
        record_webhook_rejected(e.error_code)
        return WebhookProcessingResult.failure(str(e), e.error_code)

    except Exception as e:
        logger.error("Error procesando webhook: %r", e, exc_info=True)
        record_webhook_rejected(INTERNAL_ERROR)
        return WebhookProcessingResult.failure("Error interno procesando webhook", INTERNAL_ERROR)


__all__ = ["WebhookProcessingResult", "should_apply", "process_webhook"]

# Fin del archivo backend/app/modules/checkout/facades/webhooks/process_webhook.py
