"""Account ORM model (credentials, role, refresh-token hash)."""

from sqlalchemy import Boolean, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from condo.infrastructure.persistence.database import Base
from condo.infrastructure.persistence.models.mixins import SoftDeletableModel


class Account(SoftDeletableModel, Base):
    """Account model. Table: account. Email is unique across live and soft-deleted rows."""

    __tablename__ = "account"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'user'")
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
    refresh_token_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (UniqueConstraint("email", name="uq_account_email"),)
