# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/routes/__init__.py

Ensamblador de rutas del módulo Checkout.

Incluye:
- /checkout
- /checkout/webhook
- /checkout/status/{transaction_id}
- /checkout/wompi/*

Autor: HatsuSound
Fecha: 10/09/2026
"""

from fastapi import APIRouter

from .checkout_routes import (
    router as checkout_router,
    get_transaction_store,
    get_payment_gateway,
    get_wompi_admin_client,
    get_checkout_settings,
)

router = APIRouter()
router.include_router(checkout_router)

__all__ = [
    "router",
    "get_transaction_store",
    "get_payment_gateway",
    "get_wompi_admin_client",
    "get_checkout_settings",
]

# Fin del archivo backend/app/modules/checkout/routes/__init__.py
