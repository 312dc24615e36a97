# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/webhooks/__init__.py

Facade de webhooks de Wompi: validación, firma, hooks y reconciliación.

Autor: HatsuSound
Fecha: 09/09/2026
"""

from .hooks import TransactionStatusHooks
from .process_webhook import WebhookProcessingResult, process_webhook, should_apply
from .validation import WebhookPayloadError, validate_webhook_payload
from .verify import WebhookSignatureError, canonical_payload, verify_webhook_signature

__all__ = [
    "TransactionStatusHooks",
    "WebhookProcessingResult",
    "process_webhook",
    "should_apply",
    "WebhookPayloadError",
    "validate_webhook_payload",
    "WebhookSignatureError",
    "canonical_payload",
    "verify_webhook_signature",
]

# Fin del archivo backend/app/modules/checkout/facades/webhooks/__init__.py
