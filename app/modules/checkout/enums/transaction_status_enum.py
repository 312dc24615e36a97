# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/transaction_status_enum.py

Enum de estados de una transacción de checkout.
Sincronizado con el tipo ENUM de PostgreSQL: transaction_status_enum.

PENDING es el único estado no terminal.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from enum import StrEnum
from sqlalchemy.dialects.postgresql import ENUM as PG_ENUM

from app.shared.database.base import as_pg_enum as _as_pg_enum


class TransactionStatus(StrEnum):
    """Estado interno de la transacción."""

    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    ERROR = "error"
    EXPIRED = "expired"

    __pg_enum_name__ = "transaction_status_enum"

    @property
    def is_terminal(self) -> bool:
        return self is not TransactionStatus.PENDING

    @classmethod
    def as_pg_enum(
        cls,
        name: str = "transaction_status_enum",
        schema: str | None = "public",
    ) -> PG_ENUM:
        return _as_pg_enum(cls, name=name, schema=schema)


__all__ = ["TransactionStatus"]

# Fin del archivo backend/app/modules/checkout/enums/transaction_status_enum.py
