# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_wompi.py

Configuración de la pasarela Wompi para HatsuSound.

Descripción:
    Centraliza llaves, URLs por entorno, límites y tiempos de espera
    del checkout con Wompi. Los alias de entorno se normalizan a uno de
    uat | uat_sandbox | sandbox | production.

Autor: HatsuSound
Fecha: 02/09/2026
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


WompiEnvName = Literal["uat", "uat_sandbox", "sandbox", "production"]

# Alias de entorno aceptados en WOMPI_ENVIRONMENT
WOMPI_ENV_ALIASES: dict[str, str] = {
    "staging": "uat_sandbox",
    "uat-sandbox": "uat_sandbox",
    "uat": "uat",
    "uat_sandbox": "uat_sandbox",
    "sbx": "sandbox",
    "dev": "sandbox",
    "sandbox": "sandbox",
    "prod": "production",
    "production": "production",
}

DEFAULT_WOMPI_ENV = "uat_sandbox"


def resolve_wompi_env(raw: Optional[str]) -> str:
    """Normaliza un alias de entorno; valores desconocidos caen en uat_sandbox."""
    value = (raw or "").strip().lower()
    return WOMPI_ENV_ALIASES.get(value, DEFAULT_WOMPI_ENV)


class WompiSettings(BaseSettings):
    """Configuración de la pasarela Wompi."""

    # =========================================================================
    # ENTORNO Y URLS
    # =========================================================================

    wompi_environment: WompiEnvName = Field(
        default="uat_sandbox",
        validation_alias="WOMPI_ENVIRONMENT",
        description="Entorno de Wompi (acepta alias: staging, prod, dev, ...)",
    )

    wompi_base_url: Optional[str] = Field(
        default=None,
        validation_alias="WOMPI_BASE_URL",
        description="Override explícito de la URL base del API",
    )

    wompi_uat_url: str = Field(default="https://api.co.uat.wompi.dev/v1", validation_alias="WOMPI_UAT_URL")
    wompi_uat_sandbox_url: str = Field(
        default="https://api-sandbox.co.uat.wompi.dev/v1", validation_alias="WOMPI_UAT_SANDBOX_URL"
    )
    wompi_sandbox_url: str = Field(default="https://sandbox.wompi.co/v1", validation_alias="WOMPI_SANDBOX_URL")
    wompi_production_url: str = Field(default="https://api.wompi.co/v1", validation_alias="WOMPI_PRODUCTION_URL")

    checkout_base_url: str = Field(
        default="https://checkout.wompi.co",
        validation_alias="WOMPI_CHECKOUT_BASE_URL",
        description="Base del checkout web hospedado por Wompi",
    )

    # =========================================================================
    # LLAVES
    # =========================================================================

    wompi_public_key: str = Field(default="", validation_alias="WOMPI_PUBLIC_KEY")
    wompi_private_key: str = Field(default="", validation_alias="WOMPI_PRIVATE_KEY")
    wompi_events_key: str = Field(default="", validation_alias="WOMPI_EVENTS_KEY")
    wompi_integrity_key: str = Field(
        default="",
        validation_alias="WOMPI_INTEGRITY_KEY",
        description="Secreto HMAC para firmas de webhooks (vacío = verificación omitida)",
    )

    # =========================================================================
    # CHECKOUT
    # =========================================================================

    frontend_url: str = Field(default="http://localhost:3000", validation_alias="FRONTEND_URL")

    redirect_path: str = Field(
        default="/payment/result",
        validation_alias="WOMPI_REDIRECT_PATH",
        description="Ruta del frontend a la que Wompi redirige tras el pago",
    )

    min_amount_cents: int = Field(
        default=1000,
        validation_alias="WOMPI_MIN_AMOUNT_CENTS",
        description="Monto mínimo en centavos (10.00)",
    )

    transaction_expiry_hours: int = Field(
        default=24,
        validation_alias="WOMPI_TRANSACTION_EXPIRY_HOURS",
        description="Horas hasta la expiración de una transacción intent",
    )

    # =========================================================================
    # TIMEOUTS
    # =========================================================================

    timeout_seconds: float = Field(
        default=30.0,
        validation_alias="WOMPI_TIMEOUT_SECONDS",
        description="Timeout de llamadas HTTP a Wompi",
    )

    @field_validator("wompi_environment", mode="before")
    @classmethod
    def _normalize_environment(cls, v: Optional[str]) -> str:
        return resolve_wompi_env(v)

    @property
    def base_urls(self) -> dict[str, str]:
        return {
            "uat": self.wompi_uat_url.rstrip("/"),
            "uat_sandbox": self.wompi_uat_sandbox_url.rstrip("/"),
            "sandbox": self.wompi_sandbox_url.rstrip("/"),
            "production": self.wompi_production_url.rstrip("/"),
        }

    @property
    def api_base_url(self) -> str:
        """URL base efectiva: WOMPI_BASE_URL o la del entorno resuelto."""
        if self.wompi_base_url:
            return self.wompi_base_url.rstrip("/")
        return self.base_urls[self.wompi_environment]

    @property
    def default_redirect_url(self) -> str:
        return f"{self.frontend_url.rstrip('/')}{self.redirect_path}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_wompi_settings: Optional[WompiSettings] = None


def get_wompi_settings() -> WompiSettings:
    """
    Obtiene la instancia global de configuración de Wompi.

    Returns:
        WompiSettings: Configuración de la pasarela
    """
    global _wompi_settings
    if _wompi_settings is None:
        _wompi_settings = WompiSettings()
    return _wompi_settings


def reset_wompi_settings() -> None:
    """Descarta el singleton (útil en tests que cambian variables de entorno)."""
    global _wompi_settings
    _wompi_settings = None


__all__ = [
    "WompiSettings",
    "WompiEnvName",
    "WOMPI_ENV_ALIASES",
    "resolve_wompi_env",
    "get_wompi_settings",
    "reset_wompi_settings",
]
# Fin del archivo backend/app/shared/config/settings_wompi.py
