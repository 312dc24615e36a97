# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/webhooks/validation.py

Validación estructural de los eventos de Wompi.

Autor: HatsuSound
Fecha: 09/09/2026
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from app.modules.checkout.schemas import WebhookPayload


class WebhookPayloadError(ValueError):
    """El evento no tiene la estructura mínima esperada."""

    error_code = "INVALID_PAYLOAD"


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(p) for p in first.get("loc", ()))
    return f"Payload de webhook inválido: {location or 'root'} ({first.get('msg')})"


def validate_webhook_payload(raw: Any) -> WebhookPayload:
    """
    Exige event, data.transaction (id, status, reference, amount_in_cents > 0,
    customer_email), timestamp > 0 y signature.checksum.

    Raises:
        WebhookPayloadError: con la primera violación encontrada.
    """
    if not isinstance(raw, Mapping):
        raise WebhookPayloadError("Payload de webhook inválido: se esperaba un objeto JSON")
    try:
        return WebhookPayload.model_validate(raw)
    except ValidationError as e:
        raise WebhookPayloadError(_describe(e)) from e


__all__ = ["WebhookPayloadError", "validate_webhook_payload"]

# Fin del archivo backend/app/modules/checkout/facades/webhooks/validation.py
