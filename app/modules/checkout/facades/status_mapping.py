# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/facades/status_mapping.py

Mapeo de estados de Wompi al enum interno TransactionStatus.

Función pura y total: cualquier estado desconocido se traduce a PENDING.
Quien llama decide si registrar un warning (ver is_known_status).

Autor: HatsuSound
Fecha: 07/09/2026
"""

from __future__ import annotations

from typing import Optional

from app.modules.checkout.enums import TransactionStatus

WOMPI_STATUS_MAP: dict[str, TransactionStatus] = {
    "approved": TransactionStatus.APPROVED,
    "declined": TransactionStatus.DECLINED,
    "error": TransactionStatus.ERROR,
    "expired": TransactionStatus.EXPIRED,
    "pending": TransactionStatus.PENDING,
    "in_process": TransactionStatus.PENDING,
    "voided": TransactionStatus.DECLINED,
    "failed": TransactionStatus.ERROR,
    "cancelled": TransactionStatus.DECLINED,
    "rejected": TransactionStatus.DECLINED,
}


def is_known_status(external_status: Optional[str]) -> bool:
    return (external_status or "").lower() in WOMPI_STATUS_MAP


def map_status(external_status: Optional[str]) -> TransactionStatus:
    """
    >>> map_status("VOIDED")
    <TransactionStatus.DECLINED: 'declined'>
    >>> map_status("bogus")
    <TransactionStatus.PENDING: 'pending'>
    """
    return WOMPI_STATUS_MAP.get((external_status or "").lower(), TransactionStatus.PENDING)


__all__ = ["WOMPI_STATUS_MAP", "is_known_status", "map_status"]

# Fin del archivo backend/app/modules/checkout/facades/status_mapping.py
