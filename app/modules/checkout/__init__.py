# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/__init__.py

Módulo de checkout de HatsuSound con la pasarela Wompi.

Este módulo gestiona:
- Creación de checkouts (flujo directo con token y flujo intent con
  checkout web hospedado)
- Reconciliación de transacciones a partir de los webhooks de Wompi
- Consulta de estado local y en Wompi

Estructura:
- enums: TransactionStatus, TransactionType, Currency
- models: Modelo ORM Transaction
- schemas: Validación y serialización Pydantic
- ports: Interfaces TransactionStore y PaymentGateway
- repositories / adapters: Implementaciones sobre PostgreSQL y Wompi
- facades: Orquestador de checkout y reconciliación de webhooks
- metrics: Contadores Prometheus del módulo
- routes: Endpoints FastAPI

Autor: HatsuSound
Fecha: 04/09/2026
"""

# Fin del archivo backend/app/modules/checkout/__init__.py
