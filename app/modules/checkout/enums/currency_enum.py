# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/currency_enum.py

Monedas aceptadas por el checkout de Wompi.
Sincronizado con el tipo ENUM de PostgreSQL: currency_enum.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from enum import StrEnum
from sqlalchemy.dialects.postgresql import ENUM as PG_ENUM

from app.shared.database.base import as_pg_enum as _as_pg_enum


class Currency(StrEnum):
    COP = "COP"
    USD = "USD"
    EUR = "EUR"

    __pg_enum_name__ = "currency_enum"

    @classmethod
    def as_pg_enum(
        cls,
        name: str = "currency_enum",
        schema: str | None = "public",
    ) -> PG_ENUM:
        return _as_pg_enum(cls, name=name, schema=schema)


SUPPORTED_CURRENCIES = frozenset(c.value for c in Currency)


__all__ = ["Currency", "SUPPORTED_CURRENCIES"]

# Fin del archivo backend/app/modules/checkout/enums/currency_enum.py
