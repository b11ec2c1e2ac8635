"""Interview model."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class Interview(Base):
    """Interview scheduled by an employer for one application."""

    __tablename__ = "interviews"

    application_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    employer_id = Column(
        Uuid(as_uuid=True), ForeignKey("employers.id", ondelete="CASCADE"), nullable=False
    )
    job_seeker_id = Column(
        Uuid(as_uuid=True), ForeignKey("job_seekers.id", ondelete="CASCADE"), nullable=False
    )

    title = Column(String(255), nullable=False)
    description = Column(Text)
    scheduled_at = Column(DateTime, nullable=False)
    duration = Column(Integer, default=60, nullable=False)  # minutes
    type = Column(String(50), nullable=False)  # phone, video, in-person
    location = Column(String(255))  # Physical address or meeting link
    status = Column(String(50), default="scheduled", nullable=False)  # scheduled, completed, cancelled, rescheduled

    # Outcome
    interviewer_notes = Column(Text)
    candidate_notes = Column(Text)
    rating = Column(Integer)  # 1-5
    feedback = Column(Text)

    # Relationships
    application = relationship("Application", back_populates="interviews")

    __table_args__ = (
        Index("idx_interviews_employer", "employer_id"),
        Index("idx_interviews_job_seeker", "job_seeker_id"),
        Index("idx_interviews_scheduled_at", "scheduled_at"),
    )

    def __repr__(self):
        return f"<Interview {self.title} at {self.scheduled_at} ({self.status})>"
