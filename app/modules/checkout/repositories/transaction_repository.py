# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/transaction_repository.py

Repositorio para la tabla transactions.

Responsabilidades:
- Búsqueda por referencia local
- Búsqueda por ID de transacción en Wompi (llave de los webhooks)

Autor: HatsuSound
Fecha: 06/09/2026
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.checkout.models.transaction_models import Transaction


class TransactionRepository(BaseRepository[Transaction]):
    def __init__(self) -> None:
        super().__init__(Transaction)

    # -----------------------------------------------------------
    # Búsquedas clave para checkout y webhooks
    # -----------------------------------------------------------
    async def get_by_reference(
        self,
        session: AsyncSession,
        reference: str,
    ) -> Optional[Transaction]:
        stmt = select(Transaction).where(Transaction.reference == reference)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def get_by_external_transaction_id(
        self,
        session: AsyncSession,
        external_transaction_id: str,
    ) -> Optional[Transaction]:
        """Obtiene una transacción por el ID que le asignó Wompi."""
        stmt = select(Transaction).where(
            Transaction.external_transaction_id == external_transaction_id
        )
        result = await session.execute(stmt)
        return result.scalars().first()


__all__ = ["TransactionRepository"]

# Fin del archivo backend/app/modules/checkout/repositories/transaction_repository.py
