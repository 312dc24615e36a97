# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/__init__.py

Esquemas Pydantic del módulo Checkout.

Autor: HatsuSound
Fecha: 05/09/2026
"""

from .checkout_schemas import (
    CamelModel,
    CardTokenRequest,
    CheckoutRequest,
    CheckoutResponse,
    PaymentType,
    TransactionOut,
)
from .webhook_schemas import (
    WebhookData,
    WebhookPayload,
    WebhookSignature,
    WebhookTransaction,
)

__all__ = [
    "CamelModel",
    "CardTokenRequest",
    "CheckoutRequest",
    "CheckoutResponse",
    "PaymentType",
    "TransactionOut",
    "WebhookData",
    "WebhookPayload",
    "WebhookSignature",
    "WebhookTransaction",
]

# Fin del archivo backend/app/modules/checkout/schemas/__init__.py
