# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/gateway_requests.py

Construcción de la solicitud de transacción para Wompi.

Hay dos variantes producidas por una sola fábrica:
- DirectPaymentRequest: el cliente trae un token de tarjeta
  (payment_method incluye `token`); no hay checkout hospedado.
- IntentPaymentRequest: sin token; el cliente completa el pago en el
  checkout web de Wompi (se devuelve checkout_url).

Ambas viajan con redirect_url, expiración a 24 h, el placeholder del
acceptance_token (el adaptador lo resuelve) y metadata del producto.

Autor: HatsuSound
Fecha: 08/09/2026
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Optional

from app.modules.checkout.ports import ACCEPTANCE_TOKEN_PLACEHOLDER
from app.modules.checkout.schemas import CheckoutRequest, PaymentType

DEFAULT_EXPIRY_HOURS = 24
REQUEST_SOURCE = "hatsusound_backend"
REQUEST_VERSION = "1.0.0"


@dataclass(frozen=True)
class GatewayTransactionRequest:
    amount_in_cents: int
    currency: str
    customer_email: str
    reference: str
    redirect_url: str
    expires_at: datetime
    acceptance_token: str = ACCEPTANCE_TOKEN_PLACEHOLDER
    customer_phone: Optional[str] = None
    customer_full_name: Optional[str] = None
    product: dict[str, Any] = field(default_factory=dict)

    payment_type: ClassVar[PaymentType]

    def payment_method(self) -> dict[str, Any]:
        return {"type": "CARD", "installments": 1}

    def to_payload(self) -> dict[str, Any]:
        """Cuerpo JSON para POST /transactions."""
        return {
            "amount_in_cents": self.amount_in_cents,
            "currency": self.currency,
            "customer_email": self.customer_email,
            "payment_method": self.payment_method(),
            "acceptance_token": self.acceptance_token,
            "reference": self.reference,
            "customer_data": {
                "phone_number": self.customer_phone,
                "full_name": self.customer_full_name,
            },
            "redirect_url": self.redirect_url,
            "expires_at": self.expires_at.isoformat(),
            "metadata": {
                **self.product,
                "source": REQUEST_SOURCE,
                "version": REQUEST_VERSION,
                "payment_type": self.payment_type,
            },
        }


@dataclass(frozen=True)
class DirectPaymentRequest(GatewayTransactionRequest):
    payment_token: str = ""

    payment_type: ClassVar[PaymentType] = "direct"

    def payment_method(self) -> dict[str, Any]:
        return {"type": "CARD", "token": self.payment_token, "installments": 1}


@dataclass(frozen=True)
class IntentPaymentRequest(GatewayTransactionRequest):
    payment_type: ClassVar[PaymentType] = "intent"


def product_attributes(request: CheckoutRequest) -> dict[str, Any]:
    return {
        "product_id": request.product_id,
        "product_name": request.product_name,
        "product_category": request.product_category,
        "product_artist": request.product_artist,
        "product_genre": request.product_genre,
        "product_format": request.product_format,
    }


def build_gateway_request(
    request: CheckoutRequest,
    *,
    reference: str,
    redirect_url: str,
    now: Optional[datetime] = None,
    expiry_hours: int = DEFAULT_EXPIRY_HOURS,
    acceptance_token: str = ACCEPTANCE_TOKEN_PLACEHOLDER,
) -> GatewayTransactionRequest:
    """Elige la variante según exista o no `payment_method_token`."""
    now = now or datetime.now(timezone.utc)
    email = request.customer_email or ""

    common = dict(
        amount_in_cents=request.amount,
        currency=request.currency,
        customer_email=email,
        reference=reference,
        redirect_url=redirect_url,
        expires_at=now + timedelta(hours=expiry_hours),
        acceptance_token=acceptance_token,
        customer_phone=request.customer_phone,
        customer_full_name=request.customer_name or email.split("@")[0],
        product=product_attributes(request),
    )

    if request.payment_method_token:
        return DirectPaymentRequest(payment_token=request.payment_method_token, **common)
    return IntentPaymentRequest(**common)


__all__ = [
    "ACCEPTANCE_TOKEN_PLACEHOLDER",
    "DEFAULT_EXPIRY_HOURS",
    "GatewayTransactionRequest",
    "DirectPaymentRequest",
    "IntentPaymentRequest",
    "product_attributes",
    "build_gateway_request",
]

# Fin del archivo backend/app/modules/checkout/facades/checkout/gateway_requests.py
