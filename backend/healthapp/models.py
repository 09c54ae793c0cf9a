from __future__ import annotations
from typing import Optional

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    BigInteger, Integer, String, Text, DateTime, CheckConstraint,
    ForeignKey, Index, JSON, TypeDecorator,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from healthapp.db import Base
from datetime import datetime, timezone

# SQLite only autoincrements INTEGER PRIMARY KEY columns
PK = BigInteger().with_variant(Integer, "sqlite")
DOCUMENT = JSON().with_variant(JSONB, "postgresql")


class UTCDateTime(TypeDecorator):
    """
    항상 UTC aware datetime 으로 읽고 씀.
    SQLite 는 tzinfo 를 버리므로 저장 전에 UTC 로 맞추고, 읽을 때 다시 붙입니다.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Account(Base):
    """
    계정 + 프로필 (1:1 이므로 같은 행에 보관).
    email 유일성은 DB unique 제약으로만 보장합니다.
    """
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint(
            "classification in ('vata','pitta','kapha') or classification is null",
            name="ck_accounts_classification",
        ),
    )

    id: Mapped[int] = mapped_column(PK, primary_key=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        UTCDateTime(), server_default=func.now()
    )

    # 프로필 문서
    personal: Mapped[dict] = mapped_column(DOCUMENT, nullable=False, default=dict)
    health: Mapped[dict] = mapped_column(DOCUMENT, nullable=False, default=dict)
    classification: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    last_updated: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)

    followups: Mapped[list["Followup"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
    )


class Followup(Base):
    """Append-only; rows are never updated or deleted by the API."""
    __tablename__ = "followups"
    __table_args__ = (
        Index("idx_followups_account_ts", "account_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(PK, primary_key=True)
    account_id: Mapped[int] = mapped_column(
        PK, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    account: Mapped["Account"] = relationship(back_populates="followups")
