import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from devconnector.common.base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JsonDocument = JSON().with_variant(JSONB(), "postgresql")


class ProfileEntity(Base):
    __tablename__ = "profiles"

    profile_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.user_id"), unique=True
    )

    status: Mapped[str] = mapped_column(String)
    company: Mapped[str | None] = mapped_column(String)
    website: Mapped[str | None] = mapped_column(String)
    location: Mapped[str | None] = mapped_column(String)
    bio: Mapped[str | None] = mapped_column(Text)
    githubusername: Mapped[str | None] = mapped_column(String)

    # Embedded documents. Always reassign, never mutate in place: plain JSON
    # columns do not track in-place changes.
    skills: Mapped[list[str]] = mapped_column(JsonDocument, default=list)
    social: Mapped[dict] = mapped_column(JsonDocument, default=dict)
    experience: Mapped[list[dict]] = mapped_column(JsonDocument, default=list)
    education: Mapped[list[dict]] = mapped_column(JsonDocument, default=list)

    created_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
