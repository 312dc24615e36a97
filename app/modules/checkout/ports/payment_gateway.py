# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/ports/payment_gateway.py

Interfaz base (ABC) del cliente de la pasarela de pagos.

Define el contrato que implementa WompiClient y que los tests sustituyen
por un fake, para que el checkout y los webhooks no dependan de httpx
ni de la configuración de Wompi.

También define el error etiquetado de la pasarela: una categoría cerrada
(AUTH, FORBIDDEN, VALIDATION, UNAVAILABLE, OTHER) y, para errores de
validación, una razón opcional (PAYMENT_TOKEN, PAYMENT_METHOD). El
checkout clasifica por estas etiquetas, nunca por el texto del mensaje.

Autor: HatsuSound
Fecha: 05/09/2026
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, Mapping, Optional

# Valor que el checkout envía en acceptance_token; el adaptador lo
# reemplaza por el token de aceptación vigente del comercio.
ACCEPTANCE_TOKEN_PLACEHOLDER = "TOKEN_ACEPTACION"


class GatewayErrorCategory(StrEnum):
    AUTH = "auth"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    UNAVAILABLE = "unavailable"
    OTHER = "other"


class GatewayErrorReason(StrEnum):
    PAYMENT_TOKEN = "payment_token"
    PAYMENT_METHOD = "payment_method"


class PaymentGatewayError(RuntimeError):
    """Fallo etiquetado de una llamada a la pasarela."""

    def __init__(
        self,
        message: str,
        *,
        category: GatewayErrorCategory,
        status_code: Optional[int] = None,
        reason: Optional[GatewayErrorReason] = None,
        error_type: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.category = category
        self.status_code = status_code
        self.reason = reason
        self.error_type = error_type
        self.details = details

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(category={self.category!s}, status_code={self.status_code}, "
            f"reason={self.reason}, message={str(self)!r})"
        )


class PaymentGateway(ABC):
    """Contrato de la pasarela de pagos."""

    @abstractmethod
    async def create_transaction(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """
        Crea una transacción en la pasarela.

        Returns:
            Respuesta JSON de la pasarela: {"data": {"id", "status", ...}}

        Raises:
            PaymentGatewayError: con categoría (AUTH, FORBIDDEN, VALIDATION,
            UNAVAILABLE, OTHER) y razón opcional.
        """
        ...

    @abstractmethod
    async def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def verify_signature(self, payload: str, checksum: str) -> bool:
        """True si `checksum` es el HMAC-SHA256 hex de `payload` con la llave de integridad."""
        ...

    @abstractmethod
    def get_checkout_url(self, transaction_id: str) -> str:
        ...

    @abstractmethod
    async def create_payment_method_token(self, card_data: Mapping[str, Any]) -> str:
        """Tokeniza una tarjeta y devuelve el id del token."""
        ...


__all__ = [
    "ACCEPTANCE_TOKEN_PLACEHOLDER",
    "GatewayErrorCategory",
    "GatewayErrorReason",
    "PaymentGatewayError",
    "PaymentGateway",
]

# Fin del archivo backend/app/modules/checkout/ports/payment_gateway.py
