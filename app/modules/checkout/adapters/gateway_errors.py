# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/gateway_errors.py

Errores etiquetados de la pasarela Wompi.

Cada fallo HTTP o de red se convierte en un WompiGatewayError, variante
de PaymentGatewayError (ports) con la categoría y razón derivadas del
status HTTP y del cuerpo de error de Wompi.

Autor: HatsuSound
Fecha: 06/09/2026
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from app.modules.checkout.ports.payment_gateway import (
    GatewayErrorCategory,
    GatewayErrorReason,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


class WompiGatewayError(PaymentGatewayError):
    """Fallo de una llamada a Wompi."""


def category_for_status(status_code: int) -> GatewayErrorCategory:
    if status_code == 401:
        return GatewayErrorCategory.AUTH
    if status_code == 403:
        return GatewayErrorCategory.FORBIDDEN
    if status_code == 422:
        return GatewayErrorCategory.VALIDATION
    if status_code >= 500:
        return GatewayErrorCategory.UNAVAILABLE
    return GatewayErrorCategory.OTHER


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    error = body.get("error")
    return error if isinstance(error, dict) else {}


def validation_reason(error_body: dict[str, Any]) -> Optional[GatewayErrorReason]:
    """
    Deriva la razón de un 422 a partir de `error.reason` y `error.messages`.

    Wompi reporta el token ausente/inválido como mensajes sobre el campo
    de token ("No está presente") y los problemas del método de pago
    bajo la llave `payment_method`.
    """
    text = json.dumps(
        {"reason": error_body.get("reason"), "messages": error_body.get("messages")},
        ensure_ascii=False,
    )
    if "token" in text or "No está presente" in text:
        return GatewayErrorReason.PAYMENT_TOKEN
    if "payment_method" in text:
        return GatewayErrorReason.PAYMENT_METHOD
    return None


def error_from_response(response: httpx.Response, *, operation: str) -> WompiGatewayError:
    """Construye el error etiquetado para una respuesta HTTP no exitosa."""
    status_code = response.status_code
    category = category_for_status(status_code)
    body = _error_body(response)
    error_type = body.get("type")
    reason = validation_reason(body) if category is GatewayErrorCategory.VALIDATION else None

    logger.error(
        "Wompi %s falló: status=%s type=%s reason=%s messages=%s",
        operation, status_code, error_type, body.get("reason"), body.get("messages"),
    )
    return WompiGatewayError(
        f"Wompi {status_code} {error_type or ''}: {body.get('reason') or operation}".strip(),
        category=category,
        status_code=status_code,
        reason=reason,
        error_type=error_type,
        details=body.get("messages"),
    )


def error_from_transport(exc: httpx.RequestError, *, operation: str) -> WompiGatewayError:
    """Timeouts cuentan como UNAVAILABLE; otros errores de red como OTHER."""
    if isinstance(exc, httpx.TimeoutException):
        category = GatewayErrorCategory.UNAVAILABLE
    else:
        category = GatewayErrorCategory.OTHER
    logger.error("Wompi %s sin respuesta (%s): %s", operation, type(exc).__name__, exc)
    return WompiGatewayError(
        f"Wompi {operation}: {type(exc).__name__}",
        category=category,
    )


__all__ = [
    "GatewayErrorCategory",
    "GatewayErrorReason",
    "WompiGatewayError",
    "category_for_status",
    "validation_reason",
    "error_from_response",
    "error_from_transport",
]

# Fin del archivo backend/app/modules/checkout/adapters/gateway_errors.py
