"""Database models for user owned entities."""

import enum
import uuid
from datetime import datetime

from sqlalchemy import JSON, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.db.types import UTCDateTime, utcnow


class EntityStatus(str, enum.Enum):
    """Lifecycle status of an entity."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class EntityPriority(str, enum.Enum):
    """Priority of an entity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Entity(Base):
    """A record owned by exactly one user.

    `user_id` is assigned from the authenticated caller at creation and is
    never changed afterwards.
    """

    __tablename__ = "entities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[EntityStatus] = mapped_column(
        SAEnum(EntityStatus, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=EntityStatus.ACTIVE,
    )
    priority: Mapped[EntityPriority] = mapped_column(
        SAEnum(EntityPriority, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=EntityPriority.MEDIUM,
    )
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Metrics
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    engagement: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        Index("ix_entities_user_id_created_at", "user_id", "created_at"),
        Index("ix_entities_user_id_category", "user_id", "category"),
    )
