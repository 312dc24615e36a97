# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/models/transaction_models.py

Modelo ORM para la tabla transactions.

Una transacción nace PENDING sin ID externo, recibe el ID de Wompi tras
la llamada a la pasarela y después se reconcilia con los webhooks.
Nunca se borra físicamente.

Autor: HatsuSound
Fecha: 04/09/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base
from app.modules.checkout.enums import Currency, TransactionStatus, TransactionType


def _new_transaction_id() -> str:
    return str(uuid4())


class Transaction(Base):
    """Transacción de checkout procesada con Wompi."""

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_transaction_id,
    )

    reference: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        doc="Referencia única e inmutable enviada a Wompi.",
    )

    # Monto en centavos (unidades menores)
    amount: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )

    currency: Mapped[Currency] = mapped_column(
        Currency.as_pg_enum(),
        nullable=False,
    )

    status: Mapped[TransactionStatus] = mapped_column(
        TransactionStatus.as_pg_enum(),
        nullable=False,
        default=TransactionStatus.PENDING,
        index=True,
    )

    type: Mapped[TransactionType] = mapped_column(
        TransactionType.as_pg_enum(),
        nullable=False,
        default=TransactionType.PAYMENT,
    )

    external_transaction_id: Mapped[Optional[str]] = mapped_column(
        String(128),
        nullable=True,
        index=True,
        doc="ID de la transacción en Wompi; llave de unión para webhooks.",
    )

    external_session_id: Mapped[Optional[str]] = mapped_column(
        String(128),
        nullable=True,
    )

    customer_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    customer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    customer_phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # "metadata" está reservado por DeclarativeBase; la columna conserva el nombre
    transaction_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSONB,
        nullable=False,
        default=dict,
        server_default="{}",
        doc="Atributos de producto, eco de la pasarela y datos de webhooks.",
    )

    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    processed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        doc="Momento en que se observó por primera vez un estado terminal.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        CheckConstraint("amount >= 1000", name="amount_min"),
        Index("ix_transactions_created_at", "created_at"),
    )

    # created_at/updated_at se devuelven vía RETURNING (sin refresh implícito en async)
    __mapper_args__ = {"eager_defaults": True}

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"<Transaction id={self.id} reference={self.reference} "
            f"status={self.status} external_id={self.external_transaction_id}>"
        )


__all__ = ["Transaction"]

# Fin del archivo backend/app/modules/checkout/models/transaction_models.py
