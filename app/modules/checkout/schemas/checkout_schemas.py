# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/schemas/checkout_schemas.py

Esquemas Pydantic del checkout con Wompi.

El JSON de entrada y salida usa camelCase (contrato con el frontend);
en Python los campos son snake_case. Todos los campos del request son
opcionales a nivel de esquema: las reglas de negocio (monto mínimo,
moneda, email, producto) las aplica el validador del checkout para
devolver códigos de error estables en lugar de un 422 genérico.

Autor: HatsuSound
Fecha: 05/09/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.checkout.enums import Currency, TransactionStatus, TransactionType

PaymentType = Literal["direct", "intent"]


class CamelModel(BaseModel):
    """Base con alias camelCase; acepta también los nombres snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CheckoutRequest(CamelModel):
    """Payload de entrada para crear un checkout."""

    amount: Optional[int] = Field(
        default=None,
        description="Monto en centavos (mínimo 1000).",
    )
    currency: Optional[str] = Field(
        default=None,
        description="Moneda: COP | USD | EUR.",
    )
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    reference: Optional[str] = Field(
        default=None,
        description="Referencia propia; si falta, el backend genera una.",
    )

    product_id: Optional[str] = None
    product_name: Optional[str] = None
    product_category: Optional[str] = None
    product_artist: Optional[str] = None
    product_genre: Optional[str] = None
    product_format: Optional[str] = None

    payment_method_token: Optional[str] = Field(
        default=None,
        description="Token de tarjeta; si está presente el flujo es directo.",
    )


class TransactionOut(CamelModel):
    """Representación pública de una transacción."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    reference: str
    amount: int
    currency: Currency
    status: TransactionStatus
    type: TransactionType
    external_transaction_id: Optional[str] = None
    external_session_id: Optional[str] = None
    customer_email: str
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    description: Optional[str] = None
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("transaction_metadata", "metadata"),
        serialization_alias="metadata",
    )
    error_message: Optional[str] = None
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CheckoutResponse(CamelModel):
    """
    Resultado del checkout.

    En éxito: transaction, wompi_transaction_id, amount, currency, reference
    y payment_type; checkout_url solo en el flujo intent.
    En fallo: success=False con error (mensaje fijo en español) y error_code.
    """

    success: bool
    transaction: Optional[TransactionOut] = None
    checkout_url: Optional[str] = None
    wompi_transaction_id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    reference: Optional[str] = None
    payment_type: Optional[PaymentType] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_public(self) -> dict[str, Any]:
        """Serializa en camelCase omitiendo campos ausentes."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def failure(cls, error: str, error_code: str) -> "CheckoutResponse":
        return cls(success=False, error=error, error_code=error_code)


class CardTokenRequest(CamelModel):
    """Datos de tarjeta para tokenizar en Wompi (solo pruebas)."""

    number: str
    cvc: str
    exp_month: str
    exp_year: str
    card_holder_name: str


__all__ = [
    "PaymentType",
    "CamelModel",
    "CheckoutRequest",
    "TransactionOut",
    "CheckoutResponse",
    "CardTokenRequest",
]

# Fin del archivo backend/app/modules/checkout/schemas/checkout_schemas.py
