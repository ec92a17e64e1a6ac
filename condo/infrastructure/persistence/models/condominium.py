"""Condominium (tenant) ORM model and the account membership table."""

from sqlalchemy import Boolean, Column, ForeignKey, String, Table, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from condo.infrastructure.persistence.database import Base
from condo.infrastructure.persistence.models.mixins import SoftDeletableModel

account_condominium = Table(
    "account_condominium",
    Base.metadata,
    Column(
        "account_id",
        String,
        ForeignKey("account.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "condominium_id",
        String,
        ForeignKey("condominium.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Condominium(SoftDeletableModel, Base):
    """Condominium model. Table: condominium."""

    __tablename__ = "condominium"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    tax_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
