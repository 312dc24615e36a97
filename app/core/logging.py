# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Fachada de logging para HatsuSound.
Delegates en `app.shared.config.logging_config` y ofrece el helper
`mask_secret` para registrar llaves de Wompi sin exponerlas.

Autor: HatsuSound
Fecha: 03/09/2026
"""

from typing import Literal, Optional

from app.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)


def mask_secret(value: Optional[str], head: int = 14, tail: int = 4) -> str:
    """
    Enmascara una llave dejando visibles prefijo y sufijo.

    >>> mask_secret("pub_stagtest_g2u0HQd3ZMh05hsSgTS2IUV8t3s4mOt7")
    'pub_stagtest_g…mOt7'
    """
    if not value:
        return "UNDEFINED"
    if len(value) <= head + tail:
        return f"{value[:4]}…"
    return f"{value[:head]}…{value[-tail:]}"


__all__ = ["setup_logging", "mask_secret"]
# Fin del archivo backend/app/core/logging.py
