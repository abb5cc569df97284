from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DocumentModel(Base):
    """
    One row per Document.

    ``upload_date`` is kept as ISO-8601 text so the record shape matches the
    other backends; it is parsed back when the row is loaded.
    """
    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    file_name: Mapped[str] = mapped_column(String(512), default="")
    storage_key: Mapped[str] = mapped_column(Text, default="")
    upload_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(String(64), default="", index=True)
    owner_id: Mapped[str] = mapped_column(String(64), default="", index=True)  # employees.id, not enforced
    requires_signature: Mapped[bool] = mapped_column(Boolean, default=False)
    document_type: Mapped[str] = mapped_column(String(128), default="")
    group_name: Mapped[str] = mapped_column(String(128), default="")
    recipient: Mapped[str] = mapped_column(String(256), default="")


class EmployeeModel(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), default="")
    email: Mapped[str] = mapped_column(String(256), default="")
    status: Mapped[str] = mapped_column(String(64), default="")
    link_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    role_id: Mapped[str] = mapped_column(String(64), default="", index=True)  # roles.id, not enforced


class RoleModel(Base):
    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), default="")
    description: Mapped[str] = mapped_column(Text, default="")
