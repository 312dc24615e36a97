# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/adapters/__init__.py

Adaptadores de infraestructura del módulo Checkout:
- SqlAlchemyTransactionStore (TransactionStore sobre PostgreSQL)
- WompiClient (PaymentGateway sobre la API HTTP de Wompi)

Autor: HatsuSound
Fecha: 07/09/2026
"""

from .gateway_errors import (
    GatewayErrorCategory,
    GatewayErrorReason,
    WompiGatewayError,
)
from .sqlalchemy_transaction_store import SqlAlchemyTransactionStore
from .wompi_client import WompiClient, close_wompi_client, get_wompi_client

__all__ = [
    "GatewayErrorCategory",
    "GatewayErrorReason",
    "WompiGatewayError",
    "SqlAlchemyTransactionStore",
    "WompiClient",
    "get_wompi_client",
    "close_wompi_client",
]

# Fin del archivo backend/app/modules/checkout/adapters/__init__.py
