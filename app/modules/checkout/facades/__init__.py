# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/__init__.py

Lógica de negocio del checkout: orquestador, reconciliación de webhooks
y mapeo de estados.

Autor: HatsuSound
Fecha: 08/09/2026
"""

from .status_mapping import WOMPI_STATUS_MAP, is_known_status, map_status
from .checkout import create_checkout
from .webhooks import WebhookProcessingResult, process_webhook

__all__ = [
    "WOMPI_STATUS_MAP",
    "is_known_status",
    "map_status",
    "create_checkout",
    "WebhookProcessingResult",
    "process_webhook",
]

# Fin del archivo backend/app/modules/checkout/facades/__init__.py
