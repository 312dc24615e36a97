# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto de entrada de configuración compartida.

Autor: HatsuSound
Fecha: 02/09/2026
"""

from .config_loader import get_settings
from .settings_base import BaseAppSettings
from .settings_wompi import WompiSettings, get_wompi_settings

__all__ = ["get_settings", "BaseAppSettings", "WompiSettings", "get_wompi_settings"]
# Fin del archivo backend/app/shared/config/__init__.py
