# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: HatsuSound
Fecha: 03/09/2026
"""

from __future__ import annotations

from .database import (
    get_engine,
    get_sessionmaker,
    get_async_session,
    session_scope,
    dispose_engine,
    check_database_health,
)
from .base import Base, NAMING_CONVENTION, as_pg_enum
from .repository import BaseRepository

__all__ = [
    "get_engine",
    "get_sessionmaker",
    "Base",
    "NAMING_CONVENTION",
    "as_pg_enum",
    "BaseRepository",
    "get_async_session",
    "session_scope",
    "dispose_engine",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
