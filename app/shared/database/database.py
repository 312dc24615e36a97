# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy 2 async + asyncpg para el backend de HatsuSound.

Provee:
- get_engine() (create_async_engine, perezoso y cacheado)
- get_sessionmaker() (async_sessionmaker)
- Dependencia FastAPI: get_async_session
- context manager: session_scope()
- check_database_health()

El engine se crea en el primer uso, no al importar el módulo, para que
los tests puedan importar rutas y modelos sin una base de datos real.

Autor: HatsuSound
Fecha: 03/09/2026
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.shared.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Crea el engine async a partir de BaseAppSettings (singleton)."""
    settings = get_settings()
    logger.info(
        "[DB] Conectando a %s:%s/%s (asyncpg, echo=%s)",
        settings.db_host, settings.db_port, settings.db_name, settings.db_echo_sql,
    )
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo_sql,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
    )


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


# ── Dependencia FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_sessionmaker()() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Context manager reutilizable en scripts/tests
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with get_sessionmaker()() as session:
        try:
            yield session
            # El commit queda a cargo de quien use el scope
        finally:
            if session.in_transaction():
                await session.rollback()


async def dispose_engine() -> None:
    """Cierra el pool si el engine llegó a crearse."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_engine.cache_clear()
        get_sessionmaker.cache_clear()


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with get_engine().connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


__all__ = [
    "get_engine",
    "get_sessionmaker",
    "get_async_session",
    "session_scope",
    "dispose_engine",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
