# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/transaction_type_enum.py

Enum de tipos de transacción.
Sincronizado con el tipo ENUM de PostgreSQL: transaction_type_enum.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from enum import StrEnum
from sqlalchemy.dialects.postgresql import ENUM as PG_ENUM

from app.shared.database.base import as_pg_enum as _as_pg_enum


class TransactionType(StrEnum):
    PAYMENT = "payment"
    REFUND = "refund"

    __pg_enum_name__ = "transaction_type_enum"

    @classmethod
    def as_pg_enum(
        cls,
        name: str = "transaction_type_enum",
        schema: str | None = "public",
    ) -> PG_ENUM:
        return _as_pg_enum(cls, name=name, schema=schema)


__all__ = ["TransactionType"]

# Fin del archivo backend/app/modules/checkout/enums/transaction_type_enum.py
