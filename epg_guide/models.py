"""
SQLAlchemy ORM Models for the guide generator

This module defines the record store schema for channel name/logo variants.
"""
from datetime import datetime, timezone
from sqlalchemy import Integer, String, DateTime, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models"""
    pass


class ChannelRecord(Base):
    """One name/logo variant of a channel; several rows may share an xmltv_id"""
    __tablename__ = "channels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    xmltv_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    logo: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("idx_channels_xmltv_id", "xmltv_id"),
    )

    def __repr__(self) -> str:
        return f"<ChannelRecord(xmltv_id={self.xmltv_id}, name={self.name})>"
