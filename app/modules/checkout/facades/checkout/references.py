# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/checkout/references.py

Generación de referencias y descripciones de checkout.

Autor: HatsuSound
Fecha: 07/09/2026
"""

from __future__ import annotations

import re
import time
from typing import Optional
from uuid import uuid4

from app.modules.checkout.schemas import CheckoutRequest

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def generate_reference(
    product_id: str,
    *,
    now_ms: Optional[int] = None,
    random_suffix: Optional[str] = None,
) -> str:
    """
    Referencia `<PRODUCTO[:10]>-<epoch ms>-<8 hex>` en mayúsculas.

    El id de producto se limpia de caracteres no alfanuméricos. El sufijo
    aleatorio hace única la referencia aun con el mismo producto y milisegundo.
    """
    product = _NON_ALNUM.sub("", product_id or "")[:10]
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    suffix = random_suffix if random_suffix is not None else uuid4().hex[:8]
    return f"{product}-{timestamp}-{suffix}".upper()


def generate_description(request: CheckoutRequest) -> str:
    """Compra de <categoría> "<nombre>"[ por <artista>][ (<formato>)]."""
    parts = [
        f"Compra de {(request.product_category or '').lower()}",
        f'"{request.product_name}"',
    ]
    if request.product_artist:
        parts.append(f"por {request.product_artist}")
    if request.product_format:
        parts.append(f"({request.product_format})")
    return " ".join(parts)


__all__ = ["generate_reference", "generate_description"]

# Fin del archivo backend/app/modules/checkout/facades/checkout/references.py
