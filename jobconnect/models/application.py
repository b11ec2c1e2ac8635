"""Application model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class Application(Base):
    """Job application submitted by a job seeker."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "job_seeker_id", name="unique_job_seeker_application"),
    )

    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    job_seeker_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("job_seekers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Status tracking
    status = Column(String(20), default="pending", nullable=False)  # pending, reviewed, shortlisted, interview, accepted, rejected

    # Submission
    cover_letter = Column(Text)
    custom_resume = Column(String(500))
    expected_salary = Column(Integer)
    availability = Column(String(100))
    notes = Column(Text)  # Internal notes from employer

    # Relationships
    job = relationship("Job", back_populates="applications")
    interviews = relationship("Interview", back_populates="application", passive_deletes=True)

    def __repr__(self):
        return f"<Application {self.job_seeker_id} -> {self.job_id} ({self.status})>"
