# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/metrics/__init__.py

Métricas Prometheus del módulo de checkout.

Autor: HatsuSound
Fecha: 10/09/2026
"""

from .checkout_metrics import (
    registry,
    record_checkout,
    webhook_event_label,
    record_webhook_received,
    record_webhook_rejected,
    record_webhook_applied,
    get_sample_value,
    export_latest,
)

__all__ = [
    "registry",
    "record_checkout",
    "webhook_event_label",
    "record_webhook_received",
    "record_webhook_rejected",
    "record_webhook_applied",
    "get_sample_value",
    "export_latest",
]

# Fin del archivo backend/app/modules/checkout/metrics/__init__.py
