# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/checkout_routes.py

Rutas HTTP del checkout con Wompi.

Endpoints:
- POST /checkout                           crea el checkout (201 / 400)
- POST /checkout/webhook                   eventos de Wompi (200 / 400 / 500)
- GET  /checkout/status/{transaction_id}   estado local por id o referencia
- GET  /checkout/wompi/status/{id}         consulta directa a Wompi
- GET  /checkout/wompi/config              configuración efectiva (enmascarada)
- GET  /checkout/wompi/validate            verifica merchant y acceptance token
- POST /checkout/wompi/create-token        tokeniza una tarjeta (pruebas)

Los fallos del webhook por búsqueda o error interno responden 500 para
que Wompi reintente la entrega; los estructurales y de firma, 400.

Autor: HatsuSound
Fecha: 10/09/2026
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_wompi import WompiSettings, get_wompi_settings
from app.shared.database.database import get_async_session
from app.modules.checkout.adapters import (
    SqlAlchemyTransactionStore,
    WompiClient,
    WompiGatewayError,
    get_wompi_client,
)
from app.modules.checkout.facades.checkout import classify_error, create_checkout, user_message
from app.modules.checkout.facades.webhooks import process_webhook
from app.modules.checkout.ports import PaymentGateway, TransactionStore
from app.modules.checkout.schemas import CardTokenRequest, CheckoutRequest, TransactionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])

# Códigos de webhook que Wompi no debe reintentar
_WEBHOOK_CLIENT_ERRORS = {"INVALID_PAYLOAD", "INVALID_SIGNATURE"}


# =============================================================================
# Dependencias (sobrescribibles en tests con app.dependency_overrides)
# =============================================================================

async def get_transaction_store(
    session: AsyncSession = Depends(get_async_session),
) -> TransactionStore:
    return SqlAlchemyTransactionStore(session)


def get_payment_gateway() -> PaymentGateway:
    return get_wompi_client()


def get_wompi_admin_client() -> WompiClient:
    return get_wompi_client()


def get_checkout_settings() -> WompiSettings:
    return get_wompi_settings()


# =============================================================================
# Checkout
# =============================================================================

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_checkout_endpoint(
    payload: CheckoutRequest,
    store: TransactionStore = Depends(get_transaction_store),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: WompiSettings = Depends(get_checkout_settings),
) -> JSONResponse:
    """Crea la transacción local y la de Wompi; 400 con errorCode si falla."""
    result = await create_checkout(
        payload,
        store=store,
        gateway=gateway,
        redirect_url=settings.default_redirect_url,
        min_amount_cents=settings.min_amount_cents,
        expiry_hours=settings.transaction_expiry_hours,
    )
    code = status.HTTP_201_CREATED if result.success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=code, content=result.to_public())


@router.post("/webhook", status_code=status.HTTP_200_OK)
async def wompi_webhook(
    request: Request,
    store: TransactionStore = Depends(get_transaction_store),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> Dict[str, Any]:
    """Recibe eventos de Wompi (transaction.updated)."""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Cuerpo del webhook no es JSON válido", "errorCode": "INVALID_PAYLOAD"},
        )

    result = await process_webhook(payload, store=store, gateway=gateway)
    if not result.success:
        code = (
            status.HTTP_400_BAD_REQUEST
            if result.error_code in _WEBHOOK_CLIENT_ERRORS
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        raise HTTPException(
            status_code=code,
            detail={"error": result.error, "errorCode": result.error_code},
        )
    return {"received": True}


@router.get("/status/{transaction_id}")
async def get_transaction_status(
    transaction_id: str,
    store: TransactionStore = Depends(get_transaction_store),
) -> Dict[str, Any]:
    """Estado local por id interno o, si no existe, por referencia."""
    transaction = await store.get_by_id(transaction_id)
    if transaction is None:
        transaction = await store.get_by_reference(transaction_id)
    if transaction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Transacción no encontrada", "errorCode": "TRANSACTION_NOT_FOUND"},
        )
    return {
        "success": True,
        "transaction": TransactionOut.model_validate(transaction).model_dump(
            mode="json", by_alias=True
        ),
    }


# =============================================================================
# Wompi (diagnóstico y pruebas)
# =============================================================================

def _gateway_http_error(e: WompiGatewayError) -> HTTPException:
    code = classify_error(e)
    http_status = (
        status.HTTP_404_NOT_FOUND if e.status_code == 404 else status.HTTP_502_BAD_GATEWAY
    )
    return HTTPException(
        status_code=http_status,
        detail={"error": user_message(code), "errorCode": code},
    )


@router.get("/wompi/status/{wompi_transaction_id}")
async def get_wompi_transaction_status(
    wompi_transaction_id: str,
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> Dict[str, Any]:
    try:
        data = await gateway.get_transaction(wompi_transaction_id)
    except WompiGatewayError as e:
        raise _gateway_http_error(e) from e
    return {"success": True, "transaction": data.get("data")}


@router.get("/wompi/config")
async def get_wompi_config(
    client: WompiClient = Depends(get_wompi_admin_client),
) -> Dict[str, Any]:
    return {"success": True, "config": client.get_configuration_info()}


@router.get("/wompi/validate")
async def validate_wompi_config(
    client: WompiClient = Depends(get_wompi_admin_client),
) -> Dict[str, Any]:
    valid = await client.validate_configuration()
    return {
        "success": True,
        "valid": valid,
        "environment": client.settings.wompi_environment,
        "baseUrl": client.base_url,
    }


@router.post("/wompi/create-token")
async def create_card_token(
    card: CardTokenRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> Dict[str, Any]:
    """Tokeniza una tarjeta en Wompi; pensado para probar el flujo directo."""
    try:
        token = await gateway.create_payment_method_token(card.model_dump())
    except WompiGatewayError as e:
        code = classify_error(e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": user_message(code), "errorCode": code},
        ) from e
    return {"success": True, "token": token}


__all__ = [
    "router",
    "get_transaction_store",
    "get_payment_gateway",
    "get_wompi_admin_client",
    "get_checkout_settings",
]

# Fin del archivo backend/app/modules/checkout/routes/checkout_routes.py
