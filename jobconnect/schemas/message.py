"""Direct message schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from jobconnect.schemas.common import JsonList, RecordModel, RequestModel
from jobconnect.schemas.user import UserRead


class MessageCreate(RequestModel):
    """Message sent by the acting user."""

    receiver_id: UUID
    content: str = Field(..., min_length=1, max_length=10000)
    subject: Optional[str] = Field(None, max_length=255)
    application_id: Optional[UUID] = None


class MessageRead(RecordModel):
    """Stored message."""

    id: UUID
    sender_id: UUID
    receiver_id: UUID
    application_id: Optional[UUID] = None
    subject: Optional[str] = None
    content: str
    is_read: bool = False
    attachments: JsonList = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None


class MessageWithUsers(BaseModel):
    """Message with both participants resolved."""

    message: MessageRead
    sender: UserRead
    receiver: UserRead
