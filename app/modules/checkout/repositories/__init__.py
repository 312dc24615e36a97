# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/__init__.py

Autor: HatsuSound
Fecha: 06/09/2026
"""

from .transaction_repository import TransactionRepository

__all__ = ["TransactionRepository"]

# Fin del archivo backend/app/modules/checkout/repositories/__init__.py
