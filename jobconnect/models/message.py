"""Message model."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, JSON, String, Text, Uuid

from jobconnect.db.base import Base


class Message(Base):
    """Direct message between two users, optionally about an application."""

    __tablename__ = "messages"

    sender_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    receiver_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    application_id = Column(
        Uuid(as_uuid=True), ForeignKey("applications.id", ondelete="SET NULL"), nullable=True
    )

    subject = Column(String(255))
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    attachments = Column(JSON, default=list)

    __table_args__ = (
        Index("idx_messages_sender_receiver", "sender_id", "receiver_id"),
        Index("idx_messages_receiver_read", "receiver_id", "is_read"),
        Index("idx_messages_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Message {self.sender_id} -> {self.receiver_id}>"
