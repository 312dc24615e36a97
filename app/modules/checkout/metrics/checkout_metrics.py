# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/metrics/checkout_metrics.py

Métricas Prometheus del checkout con Wompi.
Registro propio (no el global de prometheus_client) para que /metrics
exponga solo lo que el módulo define y los tests puedan leer valores
sin interferencia entre colectores.

Autor: HatsuSound
Fecha: 10/09/2026
"""

from __future__ import annotations

import logging

from prometheus_client import CollectorRegistry, Counter, generate_latest

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
# Registro del módulo
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Checkout
# --------------------------------------------------------------------------
CHECKOUTS_TOTAL = Counter(
    "checkout_requests_total",
    "Checkouts procesados por tipo de pago y resultado",
    ["payment_type", "outcome"],  # outcome: success | <error_code>
    registry=registry,
)

# --------------------------------------------------------------------------
# Webhooks
# --------------------------------------------------------------------------
# Eventos de Wompi que se etiquetan por nombre; el resto cuenta como "other"
KNOWN_WEBHOOK_EVENTS = frozenset({"transaction.updated"})

WEBHOOKS_RECEIVED_TOTAL = Counter(
    "checkout_webhook_received_total",
    "Webhooks de Wompi recibidos",
    ["event"],
    registry=registry,
)
WEBHOOKS_REJECTED_TOTAL = Counter(
    "checkout_webhook_rejected_total",
    "Webhooks rechazados por razón",
    ["reason"],
    registry=registry,
)
WEBHOOKS_APPLIED_TOTAL = Counter(
    "checkout_webhook_applied_total",
    "Webhooks aplicados por estado resultante",
    ["status"],
    registry=registry,
)


def record_checkout(payment_type: str, outcome: str) -> None:
    try:
        CHECKOUTS_TOTAL.labels(payment_type=payment_type, outcome=outcome).inc()
    except ValueError as e:
        logger.debug("No se pudo registrar métrica de checkout: %s", e)


def webhook_event_label(event: object) -> str:
    """Etiqueta acotada para el evento: el cuerpo llega sin autenticar."""
    if not isinstance(event, str) or not event:
        return "unknown"
    return event if event in KNOWN_WEBHOOK_EVENTS else "other"


def record_webhook_received(event: object) -> None:
    WEBHOOKS_RECEIVED_TOTAL.labels(event=webhook_event_label(event)).inc()


def record_webhook_rejected(reason: str) -> None:
    WEBHOOKS_REJECTED_TOTAL.labels(reason=reason).inc()


def record_webhook_applied(status: str) -> None:
    WEBHOOKS_APPLIED_TOTAL.labels(status=status).inc()


def get_sample_value(name: str, labels: dict[str, str]) -> float:
    """Valor actual de una muestra del registro (0.0 si aún no existe)."""
    return registry.get_sample_value(name, labels) or 0.0


def export_latest() -> bytes:
    """Exposición en formato texto de Prometheus del registro del módulo."""
    return generate_latest(registry)


__all__ = [
    "registry",
    "CHECKOUTS_TOTAL",
    "WEBHOOKS_RECEIVED_TOTAL",
    "WEBHOOKS_REJECTED_TOTAL",
    "WEBHOOKS_APPLIED_TOTAL",
    "record_checkout",
    "KNOWN_WEBHOOK_EVENTS",
    "webhook_event_label",
    "record_webhook_received",
    "record_webhook_rejected",
    "record_webhook_applied",
    "get_sample_value",
    "export_latest",
]

# Fin del archivo backend/app/modules/checkout/metrics/checkout_metrics.py
