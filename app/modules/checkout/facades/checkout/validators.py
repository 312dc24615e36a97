# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/validators.py

Validadores de negocio para el flujo de checkout.

Se aplican antes de cualquier I/O y en orden fijo; la primera regla
que falla determina el código de error:
1. monto presente y >= mínimo     -> INVALID_AMOUNT
2. moneda en {COP, USD, EUR}      -> INVALID_CURRENCY
3. email con forma local@dominio.tld -> INVALID_EMAIL
4. id, nombre y categoría de producto -> INVALID_PRODUCT_DATA

Autor: HatsuSound
Fecha: 07/09/2026
"""

from __future__ import annotations

import re
from typing import Optional

from app.modules.checkout.enums import SUPPORTED_CURRENCIES
from app.modules.checkout.schemas import CheckoutRequest
from .errors import (
    INVALID_AMOUNT,
    INVALID_CURRENCY,
    INVALID_EMAIL,
    INVALID_PRODUCT_DATA,
    CheckoutValidationError,
)

MIN_AMOUNT_CENTS = 1000

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def validate_checkout_request(
    data: CheckoutRequest,
    *,
    min_amount_cents: int = MIN_AMOUNT_CENTS,
) -> None:
    """Lanza CheckoutValidationError con el código de la primera regla que falla."""

    if data.amount is None or data.amount < min_amount_cents:
        raise CheckoutValidationError(INVALID_AMOUNT)

    if data.currency not in SUPPORTED_CURRENCIES:
        raise CheckoutValidationError(INVALID_CURRENCY)

    if not is_valid_email(data.customer_email):
        raise CheckoutValidationError(INVALID_EMAIL)

    if not (
        _present(data.product_id)
        and _present(data.product_name)
        and _present(data.product_category)
    ):
        raise CheckoutValidationError(INVALID_PRODUCT_DATA)


__all__ = [
    "MIN_AMOUNT_CENTS",
    "EMAIL_PATTERN",
    "is_valid_email",
    "validate_checkout_request",
]

# Fin del archivo backend/app/modules/checkout/facades/checkout/validators.py
