# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend de HatsuSound.

Funciones:
- Asegura compatibilidad del event loop de asyncio en Windows
  (asyncpg + SQLAlchemy Async).
- Permite que los módulos internos puedan importarse como 'app.*'
  cuando la carpeta 'backend' se incluye en PYTHONPATH.

Autor: HatsuSound
Fecha: 02/09/2026
"""
import sys
import asyncio

# Fuerza un event loop compatible en Windows
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# Fin del archivo backend/app/__init__.py
