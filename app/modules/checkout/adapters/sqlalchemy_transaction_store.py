# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/sqlalchemy_transaction_store.py

Implementación de TransactionStore sobre SQLAlchemy async.

Une una AsyncSession con TransactionRepository y confirma (commit) cada
escritura: el checkout y los webhooks no comparten transacción de BD,
cada create/update es una escritura atómica de una sola fila. Los errores
de SQLAlchemy se revierten (rollback) y se reportan como
TransactionStoreError para no filtrar SQL hacia el checkout.

Autor: HatsuSound
Fecha: 06/09/2026
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.checkout.models import Transaction
from app.modules.checkout.ports import (
    TransactionNotFoundError,
    TransactionStore,
    TransactionStoreError,
)
from app.modules.checkout.repositories import TransactionRepository

logger = logging.getLogger(__name__)

# Campos que no cambian una vez asignados
_IMMUTABLE_ONCE_SET = ("reference", "external_transaction_id")


class SqlAlchemyTransactionStore(TransactionStore):
    def __init__(
        self,
        session: AsyncSession,
        repo: TransactionRepository | None = None,
    ) -> None:
        self.session = session
        self.repo = repo or TransactionRepository()

    async def _write(
        self,
        operation: str,
        write: Callable[[], Awaitable[Transaction]],
    ) -> Transaction:
        try:
            transaction = await write()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Fallo de BD en %s: %s", operation, type(e).__name__)
            raise TransactionStoreError(f"Fallo de persistencia en {operation}") from e
        return transaction

    async def create(self, data: Mapping[str, Any]) -> Transaction:
        transaction = await self._write(
            "create", lambda: self.repo.create(self.session, **dict(data))
        )
        logger.debug("Transacción creada: id=%s reference=%s", transaction.id, transaction.reference)
        return transaction

    async def update(self, transaction_id: str, data: Mapping[str, Any]) -> Transaction:
        transaction = await self.repo.get(self.session, transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)

        changes = dict(data)
        for field in _IMMUTABLE_ONCE_SET:
            current = getattr(transaction, field)
            if current and field in changes and changes[field] != current:
                logger.warning(
                    "Ignorando cambio de %s en transacción %s (%s -> %s)",
                    field, transaction_id, current, changes[field],
                )
                changes.pop(field)

        return await self._write(
            "update", lambda: self.repo.update(self.session, transaction, **changes)
        )

    async def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        return await self.repo.get(self.session, transaction_id)

    async def get_by_reference(self, reference: str) -> Optional[Transaction]:
        return await self.repo.get_by_reference(self.session, reference)

    async def get_by_external_transaction_id(self, external_id: str) -> Optional[Transaction]:
        return await self.repo.get_by_external_transaction_id(self.session, external_id)


__all__ = ["SqlAlchemyTransactionStore"]

# Fin del archivo backend/app/modules/checkout/adapters/sqlalchemy_transaction_store.py
