# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/errors.py

Códigos de error del checkout, mensajes fijos para el usuario y
clasificación de excepciones.

La clasificación usa primero las etiquetas (CheckoutValidationError con
código, PaymentGatewayError con categoría/razón). Las palabras clave del
mensaje solo se revisan en ValueError sin etiqueta; cualquier otra
excepción (p. ej. de la BD, cuyo texto incluye el SQL) es INTERNAL_ERROR.
El mensaje devuelto al cliente siempre sale de CHECKOUT_ERROR_MESSAGES
y nunca incluye el detalle técnico de la pasarela.

Autor: HatsuSound
Fecha: 07/09/2026
"""

from __future__ import annotations

from typing import Tuple

from app.modules.checkout.ports import (
    GatewayErrorCategory,
    GatewayErrorReason,
    PaymentGatewayError,
)

# Validación de entrada
INVALID_AMOUNT = "INVALID_AMOUNT"
INVALID_CURRENCY = "INVALID_CURRENCY"
INVALID_EMAIL = "INVALID_EMAIL"
INVALID_PRODUCT_DATA = "INVALID_PRODUCT_DATA"

# Pasarela
AUTH_ERROR = "AUTH_ERROR"
FORBIDDEN = "FORBIDDEN"
INVALID_PAYMENT_TOKEN = "INVALID_PAYMENT_TOKEN"
INVALID_PAYMENT_METHOD = "INVALID_PAYMENT_METHOD"
VALIDATION_ERROR = "VALIDATION_ERROR"
SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
PAYMENT_GATEWAY_ERROR = "PAYMENT_GATEWAY_ERROR"

INTERNAL_ERROR = "INTERNAL_ERROR"

CHECKOUT_ERROR_MESSAGES: dict[str, str] = {
    INVALID_AMOUNT: "El monto debe ser al menos 1000 centavos (10.00)",
    INVALID_CURRENCY: "Moneda no válida. Debe ser COP, USD o EUR",
    INVALID_EMAIL: "Email del cliente no válido",
    INVALID_PRODUCT_DATA: "Información del producto incompleta",
    AUTH_ERROR: "Error de autenticación con el servicio de pagos",
    FORBIDDEN: "Acceso denegado al servicio de pagos",
    INVALID_PAYMENT_TOKEN: "Token de método de pago inválido o expirado",
    INVALID_PAYMENT_METHOD: "Método de pago inválido o no soportado",
    VALIDATION_ERROR: "Datos de pago inválidos",
    SERVICE_UNAVAILABLE: "El servicio de pagos no está disponible en este momento",
    PAYMENT_GATEWAY_ERROR: "Error en el servicio de pagos. Intenta más tarde.",
    INTERNAL_ERROR: "Error al procesar el checkout. Verifica los datos e intenta nuevamente.",
}

# Palabras clave para excepciones sin etiqueta (en orden de prioridad)
_KEYWORD_CODES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("monto", "amount"), INVALID_AMOUNT),
    (("moneda", "currency"), INVALID_CURRENCY),
    (("email",), INVALID_EMAIL),
    (("producto", "product"), INVALID_PRODUCT_DATA),
)


class CheckoutValidationError(ValueError):
    """Error de validación de negocio en el flujo de checkout."""

    def __init__(self, error_code: str, message: str | None = None):
        super().__init__(message or CHECKOUT_ERROR_MESSAGES[error_code])
        self.error_code = error_code


def _gateway_error_code(error: PaymentGatewayError) -> str:
    category = error.category
    if category is GatewayErrorCategory.AUTH:
        return AUTH_ERROR
    if category is GatewayErrorCategory.FORBIDDEN:
        return FORBIDDEN
    if category is GatewayErrorCategory.VALIDATION:
        if error.reason is GatewayErrorReason.PAYMENT_TOKEN:
            return INVALID_PAYMENT_TOKEN
        if error.reason is GatewayErrorReason.PAYMENT_METHOD:
            return INVALID_PAYMENT_METHOD
        return VALIDATION_ERROR
    if category is GatewayErrorCategory.UNAVAILABLE:
        return SERVICE_UNAVAILABLE
    return PAYMENT_GATEWAY_ERROR


def classify_error(error: BaseException) -> str:
    """Devuelve el código de error para una excepción del checkout."""
    if isinstance(error, CheckoutValidationError):
        return error.error_code
    if isinstance(error, PaymentGatewayError):
        return _gateway_error_code(error)
    if not isinstance(error, ValueError):
        # Incluye TransactionStoreError y errores de BD/red sin etiqueta
        return INTERNAL_ERROR

    message = str(error).lower()
    for keywords, code in _KEYWORD_CODES:
        if any(k in message for k in keywords):
            return code
    return INTERNAL_ERROR


def user_message(error_code: str) -> str:
    return CHECKOUT_ERROR_MESSAGES.get(error_code, CHECKOUT_ERROR_MESSAGES[INTERNAL_ERROR])


__all__ = [
    "INVALID_AMOUNT",
    "INVALID_CURRENCY",
    "INVALID_EMAIL",
    "INVALID_PRODUCT_DATA",
    "AUTH_ERROR",
    "FORBIDDEN",
    "INVALID_PAYMENT_TOKEN",
    "INVALID_PAYMENT_METHOD",
    "VALIDATION_ERROR",
    "SERVICE_UNAVAILABLE",
    "PAYMENT_GATEWAY_ERROR",
    "INTERNAL_ERROR",
    "CHECKOUT_ERROR_MESSAGES",
    "CheckoutValidationError",
    "classify_error",
    "user_message",
]

# Fin del archivo backend/app/modules/checkout/facades/checkout/errors.py
