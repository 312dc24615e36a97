# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/create_checkout.py

Orquestador del checkout con Wompi.

Flujo:
1. Valida el request (antes de cualquier I/O).
2. Resuelve referencia y descripción (del cliente o generadas).
3. Crea la transacción local en PENDING.
4. Construye la solicitud (directa o intent) y la envía a Wompi.
5. Mapea el estado devuelto y actualiza la transacción local.
6. Responde con la transacción y, en el flujo intent, la URL de checkout.

Nunca lanza: cualquier fallo se traduce a CheckoutResponse(success=False)
con un código estable y un mensaje fijo para el usuario. Si Wompi falla,
la transacción local queda en PENDING sin id externo.

Autor: HatsuSound
Fecha: 08/09/2026
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from app.modules.checkout.enums import Currency, TransactionStatus, TransactionType
from app.modules.checkout.metrics import record_checkout
from app.modules.checkout.ports import PaymentGateway, TransactionStore
from app.modules.checkout.schemas import CheckoutRequest, CheckoutResponse, TransactionOut
from app.modules.checkout.facades.status_mapping import is_known_status, map_status

from .errors import CheckoutValidationError, classify_error, user_message
from .gateway_requests import (
    DEFAULT_EXPIRY_HOURS,
    IntentPaymentRequest,
    build_gateway_request,
    product_attributes,
)
from .references import generate_description, generate_reference
from .validators import MIN_AMOUNT_CENTS, validate_checkout_request

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_URL = "http://localhost:3000/payment/result"


def _gateway_echo(gateway_data: dict[str, Any]) -> dict[str, Any]:
    return {
        "wompi_status": gateway_data.get("status"),
        "wompi_created_at": gateway_data.get("created_at"),
        "wompi_updated_at": gateway_data.get("updated_at"),
        "wompi_status_message": gateway_data.get("status_message"),
    }


async def create_checkout(
    payload: CheckoutRequest,
    *,
    store: TransactionStore,
    gateway: PaymentGateway,
    redirect_url: Optional[str] = None,
    min_amount_cents: int = MIN_AMOUNT_CENTS,
    expiry_hours: int = DEFAULT_EXPIRY_HOURS,
) -> CheckoutResponse:
    """
    Crea una transacción local y su contraparte en Wompi.

    Args:
        payload: Request del cliente (camelCase ya parseado).
        store: Persistencia de transacciones.
        gateway: Cliente de la pasarela.
        redirect_url: Página de resultado del frontend (default localhost).

    Returns:
        CheckoutResponse con success=True o con error/error_code.
    """
    payment_type = "direct" if payload.payment_method_token else "intent"
    logger.info(
        "Iniciando checkout (%s) para %s - %s %s",
        payment_type, payload.customer_email, payload.amount, payload.currency,
    )

    try:
        validate_checkout_request(payload, min_amount_cents=min_amount_cents)

        reference = payload.reference or generate_reference(payload.product_id)
        description = payload.description or generate_description(payload)
        now = datetime.now(timezone.utc)

        transaction = await store.create(
            {
                "reference": reference,
                "amount": payload.amount,
                "currency": Currency(payload.currency),
                "status": TransactionStatus.PENDING,
                "type": TransactionType.PAYMENT,
                "customer_email": payload.customer_email,
                "customer_name": payload.customer_name,
                "customer_phone": payload.customer_phone,
                "description": description,
                "transaction_metadata": {
                    **(payload.metadata or {}),
                    **product_attributes(payload),
                    "created_at": now.isoformat(),
                },
            }
        )
        logger.info("Transacción local creada: %s (%s)", transaction.id, reference)

        gateway_request = build_gateway_request(
            payload,
            reference=reference,
            redirect_url=redirect_url or DEFAULT_REDIRECT_URL,
            now=now,
            expiry_hours=expiry_hours,
        )
        gateway_response = await gateway.create_transaction(gateway_request.to_payload())
        gateway_data = gateway_response.get("data") or {}

        external_id = gateway_data.get("id")
        if not external_id:
            # Sin id externo no hay forma de reconciliar por webhook
            raise RuntimeError("La pasarela no devolvió id de transacción")

        external_status = gateway_data.get("status")
        if not is_known_status(external_status):
            logger.warning("Estado de Wompi no reconocido: %r", external_status)
        status = map_status(external_status)

        transaction = await store.update(
            transaction.id,
            {
                "external_transaction_id": external_id,
                "status": status,
                "transaction_metadata": {
                    **(transaction.transaction_metadata or {}),
                    **_gateway_echo(gateway_data),
                },
            },
        )

        checkout_url = None
        if isinstance(gateway_request, IntentPaymentRequest):
            checkout_url = gateway.get_checkout_url(external_id)

        logger.info(
            "Checkout creado: %s wompi=%s status=%s", reference, external_id, status.value
        )
        record_checkout(payment_type, "success")

        return CheckoutResponse(
            success=True,
            transaction=TransactionOut.model_validate(transaction),
            checkout_url=checkout_url,
            wompi_transaction_id=external_id,
            amount=payload.amount,
            currency=payload.currency,
            reference=reference,
            payment_type=gateway_request.payment_type,
        )

    except Exception as e:
        error_code = classify_error(e)
        if isinstance(e, CheckoutValidationError):
            logger.warning("Checkout rechazado (%s): %s", error_code, e)
        else:
            logger.error("Error en checkout (%s): %r", error_code, e, exc_info=True)
        record_checkout(payment_type, error_code)
        return CheckoutResponse.failure(user_message(error_code), error_code)


__all__ = ["DEFAULT_REDIRECT_URL", "create_checkout"]

# Fin del archivo backend/app/modules/checkout/facades/checkout/create_checkout.py
