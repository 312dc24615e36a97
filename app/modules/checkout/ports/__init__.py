# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/ports/__init__.py

Interfaces (puertos) del módulo Checkout.

Autor: HatsuSound
Fecha: 05/09/2026
"""

from .payment_gateway import (
    ACCEPTANCE_TOKEN_PLACEHOLDER,
    GatewayErrorCategory,
    GatewayErrorReason,
    PaymentGateway,
    PaymentGatewayError,
)
from .transaction_store import (
    TransactionNotFoundError,
    TransactionStore,
    TransactionStoreError,
)

__all__ = [
    "ACCEPTANCE_TOKEN_PLACEHOLDER",
    "GatewayErrorCategory",
    "GatewayErrorReason",
    "PaymentGateway",
    "PaymentGatewayError",
    "TransactionStore",
    "TransactionNotFoundError",
    "TransactionStoreError",
]

# Fin del archivo backend/app/modules/checkout/ports/__init__.py
