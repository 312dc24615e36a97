# -*- coding: utf-8 -*-
"""
backend/app/observability/__init__.py

Observabilidad HTTP (Prometheus) del backend de HatsuSound.

Autor: HatsuSound
Fecha: 11/09/2026
"""

from .prom import setup_observability

__all__ = ["setup_observability"]

# Fin del archivo backend/app/observability/__init__.py
