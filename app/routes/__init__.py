# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de HatsuSound.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir las rutas del módulo de checkout (/checkout/*).

Autor: HatsuSound
Fecha: 11/09/2026
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from app.modules.checkout.routes import router as checkout_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)
router.include_router(checkout_router)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
