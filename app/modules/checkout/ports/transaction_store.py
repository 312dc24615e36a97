# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/ports/transaction_store.py

Interfaz base (ABC) del almacén de transacciones.

El checkout y la reconciliación de webhooks dependen solo de este
contrato; la implementación con SQLAlchemy vive en
adapters/sqlalchemy_transaction_store.py y los tests usan un fake
en memoria.

Los dicts de `create`/`update` usan los nombres de atributo del modelo
Transaction (`transaction_metadata`, `external_transaction_id`, ...).

Autor: HatsuSound
Fecha: 05/09/2026
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from app.modules.checkout.models import Transaction


class TransactionNotFoundError(LookupError):
    """No existe una transacción para el identificador dado."""

    error_code = "TRANSACTION_NOT_FOUND"

    def __init__(self, identifier: str):
        super().__init__(f"Transacción no encontrada: {identifier}")
        self.identifier = identifier


class TransactionStoreError(RuntimeError):
    """Fallo de la persistencia al leer o escribir una transacción."""

    error_code = "INTERNAL_ERROR"


class TransactionStore(ABC):
    """Persistencia de transacciones (crear, leer, actualizar; nunca borrar)."""

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> "Transaction":
        """
        Crea la transacción y devuelve el registro persistido (con id).

        Raises:
            TransactionStoreError: si la escritura falla (p. ej. referencia duplicada).
        """
        ...

    @abstractmethod
    async def update(self, transaction_id: str, data: Mapping[str, Any]) -> "Transaction":
        """
        Reemplaza los campos dados en una sola escritura atómica.

        Raises:
            TransactionNotFoundError: si el id no existe.
            TransactionStoreError: si la escritura falla.
        """
        ...

    @abstractmethod
    async def get_by_id(self, transaction_id: str) -> Optional["Transaction"]:
        ...

    @abstractmethod
    async def get_by_reference(self, reference: str) -> Optional["Transaction"]:
        ...

    @abstractmethod
    async def get_by_external_transaction_id(self, external_id: str) -> Optional["Transaction"]:
        ...


__all__ = ["TransactionStore", "TransactionNotFoundError", "TransactionStoreError"]

# Fin del archivo backend/app/modules/checkout/ports/transaction_store.py
