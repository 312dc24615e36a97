# -*- coding: utf-8 -*-
import os
import pytest


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia los singletons de configuración en cada test.
    """
    # Asegura que no heredamos PYTHON_ENV ni secretos del shell del dev
    for k in list(os.environ.keys()):
        if k.startswith(("DB_", "CORS_", "APP_", "HTTP_", "WOMPI_", "LOG_", "FRONTEND_")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")

    from app.shared.config.config_loader import get_settings
    from app.shared.config.settings_wompi import reset_wompi_settings

    get_settings.cache_clear()
    reset_wompi_settings()

    yield

    get_settings.cache_clear()
    reset_wompi_settings()
# Fin del archivo backend/tests/shared/config/conftest.py
