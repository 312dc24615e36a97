# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/__init__.py

Modelos ORM del módulo Checkout.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from .transaction_models import Transaction

__all__ = ["Transaction"]

# Fin del archivo backend/app/modules/checkout/models/__init__.py
