# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/webhook_schemas.py

DTOs de los eventos que Wompi envía al webhook.

La estructura se valida con estos modelos; la firma se calcula sobre
el dict crudo recibido (ver facades/webhooks/verify.py), no sobre
el modelo, para no alterar el orden ni los campos extra del evento.

Autor: HatsuSound
Fecha: 05/09/2026
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WebhookTransaction(BaseModel):
    """Transacción tal como la reporta Wompi en data.transaction."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    status: str = Field(min_length=1)
    reference: str = Field(min_length=1)
    amount_in_cents: int = Field(gt=0)
    currency: Optional[str] = None
    customer_email: str = Field(min_length=1)
    status_message: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class WebhookData(BaseModel):
    model_config = ConfigDict(extra="allow")

    transaction: WebhookTransaction


class WebhookSignature(BaseModel):
    checksum: str = Field(min_length=1)
    properties: list[str] = Field(default_factory=list)


class WebhookPayload(BaseModel):
    """Evento completo: {event, data, timestamp, signature}."""

    model_config = ConfigDict(extra="allow")

    event: str = Field(min_length=1)
    data: WebhookData
    timestamp: int = Field(gt=0, description="Epoch en segundos.")
    signature: WebhookSignature


__all__ = [
    "WebhookTransaction",
    "WebhookData",
    "WebhookSignature",
    "WebhookPayload",
]

# Fin del archivo backend/app/modules/checkout/schemas/webhook_schemas.py
