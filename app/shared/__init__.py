# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración (pydantic-settings) y base de
datos (SQLAlchemy async).

Autor: HatsuSound
Fecha: 02/09/2026
"""

# Fin del archivo backend/app/shared/__init__.py
