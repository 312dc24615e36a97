# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de HatsuSound.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging configurado desde settings (plain en dev, json en producción).
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Ciclo de vida con limpieza segura en shutdown (cliente Wompi y pool de BD)
- Health principal /health y rutas de checkout vía el paquete app.routes

Autor: HatsuSound
Fecha: 11/09/2026
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea la configuración
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"  # backend/.env
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _PYTHON_ENV not in ("production", "test")
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.observability.prom import setup_observability
from app.shared.database import dispose_engine
from app.modules.checkout.adapters import close_wompi_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    logger.info(
        "🚀 %s %s arrancando (env=%s)",
        settings.app_name, settings.app_version, settings.python_env,
    )

    yield

    # ────────── SHUTDOWN ──────────
    logger.info("🛑 Cerrando recursos...")
    try:
        await close_wompi_client()
    except Exception as e:
        logger.warning("⚠️ Error cerrando cliente Wompi: %s", e)
    try:
        await dispose_engine()
    except Exception as e:
        logger.warning("⚠️ Error cerrando pool de base de datos: %s", e)
    logger.info("✅ Shutdown completo")


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
def _configure_cors(app_instance: FastAPI) -> list[str]:
    """Registra CORSMiddleware con los orígenes de CORS_ORIGINS."""
    settings = get_settings()
    origins = settings.get_cors_origins()
    if "*" in origins and settings.is_prod:
        logger.warning("⚠️ CORS WILDCARD en producción: define CORS_ORIGINS explícito")

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Con wildcard el navegador rechaza credenciales
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("🌐 CORS habilitado para: %s", origins)
    return origins


def create_app() -> FastAPI:
    """Construye la aplicación FastAPI con middlewares y rutas."""
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)

    app_instance = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "checkout", "description": "Checkout y webhooks de Wompi"},
        ],
    )

    setup_observability(app_instance, http_metrics=settings.http_metrics_enabled)

    from app.routes import router as main_router
    app_instance.include_router(main_router)

    # CORS al final para que se ejecute primero (outermost)
    _configure_cors(app_instance)
    return app_instance


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
    )

# Fin del archivo backend/app/main.py
