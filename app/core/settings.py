# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración para HatsuSound.
Reexpone la carga de settings basada en Pydantic v2 definida en
`app.shared.config`, junto con la configuración de Wompi.

Autor: HatsuSound
Fecha: 03/09/2026
"""

from typing import cast

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings
from app.shared.config.settings_wompi import WompiSettings, get_wompi_settings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    settings = _get_settings()
    return cast(BaseAppSettings, settings)


__all__ = ["get_settings", "get_wompi_settings", "WompiSettings"]
# Fin del archivo backend/app/core/settings.py
