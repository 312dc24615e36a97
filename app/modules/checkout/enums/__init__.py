# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/enums/__init__.py

Superficie de exportación de enums del módulo Checkout.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from .currency_enum import Currency, SUPPORTED_CURRENCIES
from .transaction_status_enum import TransactionStatus
from .transaction_type_enum import TransactionType

__all__ = [
    "Currency",
    "SUPPORTED_CURRENCIES",
    "TransactionStatus",
    "TransactionType",
]

# Fin del archivo backend/app/modules/checkout/enums/__init__.py
