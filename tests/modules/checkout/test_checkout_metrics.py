# -*- coding: utf-8 -*-
"""
backend/tests/modules/checkout/test_checkout_metrics.py

Tests de etiquetas de las métricas del checkout.

Autor: HatsuSound
Fecha: 14/09/2026
"""
import pytest

from app.modules.checkout.metrics import (
    get_sample_value,
    record_webhook_received,
    webhook_event_label,
)


@pytest.mark.parametrize(
    "event,expected",
    [
        ("transaction.updated", "transaction.updated"),
        ("nequi_token.updated", "other"),
        ("x" * 500, "other"),
        ("", "unknown"),
        (None, "unknown"),
        (["transaction.updated"], "unknown"),
    ],
)
def test_webhook_event_label_is_bounded(event, expected):
    assert webhook_event_label(event) == expected


def test_unknown_events_share_one_series():
    before = get_sample_value("checkout_webhook_received_total", {"event": "other"})

    record_webhook_received("evil.event.1")
    record_webhook_received("evil.event.2")

    assert get_sample_value("checkout_webhook_received_total", {"event": "other"}) == before + 2
    assert get_sample_value("checkout_webhook_received_total", {"event": "evil.event.1"}) == 0.0
# Fin del archivo backend/tests/modules/checkout/test_checkout_metrics.py
