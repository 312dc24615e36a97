# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/__init__.py

Facade del checkout: validación, referencias, solicitud a Wompi,
clasificación de errores y orquestador.

Autor: HatsuSound
Fecha: 08/09/2026
"""

from .create_checkout import DEFAULT_REDIRECT_URL, create_checkout
from .errors import CheckoutValidationError, classify_error, user_message
from .gateway_requests import (
    DirectPaymentRequest,
    GatewayTransactionRequest,
    IntentPaymentRequest,
    build_gateway_request,
)
from .references import generate_description, generate_reference
from .validators import MIN_AMOUNT_CENTS, validate_checkout_request

__all__ = [
    "create_checkout",
    "DEFAULT_REDIRECT_URL",
    "CheckoutValidationError",
    "classify_error",
    "user_message",
    "GatewayTransactionRequest",
    "DirectPaymentRequest",
    "IntentPaymentRequest",
    "build_gateway_request",
    "generate_reference",
    "generate_description",
    "MIN_AMOUNT_CENTS",
    "validate_checkout_request",
]

# Fin del archivo backend/app/modules/checkout/facades/checkout/__init__.py
