# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para HatsuSound.

- Fuerza PYTHON_ENV=test y llaves de Wompi vacías ANTES de importar la app,
  para que ningún test dependa de un .env local ni llame a Wompi.
- Limpia los singletons de configuración entre tests.
"""

import os

import pytest

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")
for _key in (
    "WOMPI_ENVIRONMENT",
    "WOMPI_BASE_URL",
    "WOMPI_PUBLIC_KEY",
    "WOMPI_PRIVATE_KEY",
    "WOMPI_EVENTS_KEY",
    "WOMPI_INTEGRITY_KEY",
):
    os.environ[_key] = ""


@pytest.fixture(autouse=True)
def _reset_settings_singletons():
    """Cada test ve la configuración derivada de su propio entorno."""
    from app.shared.config.config_loader import get_settings
    from app.shared.config.settings_wompi import reset_wompi_settings

    get_settings.cache_clear()
    reset_wompi_settings()
    yield
    get_settings.cache_clear()
    reset_wompi_settings()

# Fin del archivo backend/tests/conftest.py
