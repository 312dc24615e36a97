# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/webhooks/verify.py

Verificación de la firma de los eventos de Wompi.

La firma es un HMAC-SHA256 (hex) del JSON canónico de
{event, data, timestamp}: sin espacios y con caracteres no ASCII
tal cual. El cálculo y la comparación en tiempo constante viven en el
cliente de la pasarela (PaymentGateway.verify_signature); si no hay
integrity key configurada, el cliente omite la verificación y lo
registra en los logs.

Autor: HatsuSound
Fecha: 09/09/2026
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from app.modules.checkout.ports import PaymentGateway

logger = logging.getLogger(__name__)


class WebhookSignatureError(ValueError):
    """La firma del evento no coincide con la recalculada."""

    error_code = "INVALID_SIGNATURE"


def canonical_payload(raw: Mapping[str, Any]) -> str:
    """
    >>> canonical_payload({"signature": {}, "timestamp": 1, "event": "e", "data": {"a": "ñ"}})
    '{"event":"e","data":{"a":"ñ"},"timestamp":1}'
    """
    return json.dumps(
        {"event": raw.get("event"), "data": raw.get("data"), "timestamp": raw.get("timestamp")},
        separators=(",", ":"),
        ensure_ascii=False,
    )


async def verify_webhook_signature(
    raw: Mapping[str, Any],
    checksum: str,
    gateway: PaymentGateway,
) -> None:
    """Raises WebhookSignatureError si la firma no es válida."""
    if not await gateway.verify_signature(canonical_payload(raw), checksum):
        raise WebhookSignatureError("Firma de webhook inválida")


__all__ = ["WebhookSignatureError", "canonical_payload", "verify_webhook_signature"]

# Fin del archivo backend/app/modules/checkout/facades/webhooks/verify.py
