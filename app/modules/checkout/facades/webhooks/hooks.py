# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/webhooks/hooks.py

Efectos secundarios tras aplicar un cambio de estado por webhook.

- APPROVED: registra approved_at y los datos de aprobación en metadata.
  Aquí se engancharán la activación del producto y el correo de
  confirmación cuando existan esos servicios.
- DECLINED / ERROR / EXPIRED: solo se registran en logs.

El estado ya quedó persistido cuando corren los hooks; quien los invoca
registra y descarta sus errores.

Autor: HatsuSound
Fecha: 09/09/2026
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from app.modules.checkout.enums import TransactionStatus
from app.modules.checkout.ports import TransactionStore
from app.modules.checkout.schemas import WebhookTransaction

if TYPE_CHECKING:
    from app.modules.checkout.models import Transaction

logger = logging.getLogger(__name__)

HookHandler = Callable[["Transaction", WebhookTransaction], Awaitable[None]]


class TransactionStatusHooks:
    """Hooks por estado terminal; los estados sin hook no hacen nada."""

    def __init__(self, store: TransactionStore):
        self.store = store
        self._handlers: dict[TransactionStatus, HookHandler] = {
            TransactionStatus.APPROVED: self.on_approved,
            TransactionStatus.DECLINED: self.on_declined,
            TransactionStatus.ERROR: self.on_error,
            TransactionStatus.EXPIRED: self.on_expired,
        }

    async def dispatch(
        self,
        status: TransactionStatus,
        transaction: "Transaction",
        webhook_transaction: WebhookTransaction,
    ) -> bool:
        """Ejecuta el hook del estado; devuelve False si no hay hook para él."""
        handler: Optional[HookHandler] = self._handlers.get(status)
        if handler is None:
            return False
        await handler(transaction, webhook_transaction)
        return True

    async def on_approved(self, transaction: "Transaction", webhook_transaction: WebhookTransaction) -> None:
        logger.info("Transacción aprobada: %s", transaction.reference)

        # Se relee para fusionar sobre la metadata recién persistida
        current = await self.store.get_by_id(transaction.id) or transaction
        await self.store.update(
            current.id,
            {
                "transaction_metadata": {
                    **(current.transaction_metadata or {}),
                    "approved_at": datetime.now(timezone.utc).isoformat(),
                    "wompi_approval_data": webhook_transaction.model_dump(mode="json"),
                }
            },
        )

    async def on_declined(self, transaction: "Transaction", webhook_transaction: WebhookTransaction) -> None:
        logger.warning(
            "Transacción rechazada: %s - %s",
            transaction.reference, webhook_transaction.status_message or "sin motivo",
        )

    async def on_error(self, transaction: "Transaction", webhook_transaction: WebhookTransaction) -> None:
        logger.error(
            "Error en transacción: %s - %s",
            transaction.reference, webhook_transaction.status_message or "sin detalle",
        )

    async def on_expired(self, transaction: "Transaction", webhook_transaction: WebhookTransaction) -> None:
        logger.info("Transacción expirada: %s", transaction.reference)


__all__ = ["TransactionStatusHooks", "HookHandler"]

# Fin del archivo backend/app/modules/checkout/facades/webhooks/hooks.py
