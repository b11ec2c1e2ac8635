"""Declarative base shared by the JobConnect models.

Every table gets a UUID primary key plus ``created_at`` / ``updated_at``
columns holding naive UTC timestamps. Table names are declared on each model.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.utcnow()


class Base(DeclarativeBase):
    type_annotation_map = {uuid.UUID: Uuid(as_uuid=True), datetime: DateTime()}

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(default=utcnow, onupdate=utcnow)

    def touch(self, at: Optional[datetime] = None) -> None:
        """Stamp ``updated_at`` on a row changed through attribute assignment."""
        self.updated_at = at or utcnow()
