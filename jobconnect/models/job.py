"""Job model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, JSON, String, Text, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class Job(Base):
    """Job posting owned by an employer."""

    __tablename__ = "jobs"

    employer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("employers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False)
    department = Column(String(100))

    # Job details
    employment_type = Column(String(50), nullable=False)  # full-time, part-time, contract, internship
    experience_level = Column(String(50))  # entry, mid, senior, executive
    work_location = Column(String(50), default="onsite")  # remote, onsite, hybrid
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_type = Column(String(20), default="monthly")  # hourly, monthly, yearly
    currency = Column(String(3), default="USD")

    # Lists
    required_skills = Column(JSON, default=list)
    preferred_skills = Column(JSON, default=list)
    responsibilities = Column(JSON, default=list)
    requirements = Column(JSON, default=list)
    benefits = Column(JSON, default=list)

    # Location & dates
    location = Column(String(200))
    application_deadline = Column(DateTime)
    start_date = Column(DateTime)

    # Flags
    is_urgent = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)

    # Stats
    views = Column(Integer, default=0, nullable=False)
    applications_count = Column(Integer, default=0, nullable=False)

    # Status
    status = Column(String(20), default="active", nullable=False)  # active, paused, closed, filled

    # Relationships
    employer = relationship("Employer", back_populates="jobs")
    applications = relationship("Application", back_populates="job", passive_deletes=True)

    __table_args__ = (
        Index("idx_jobs_status_created", "status", "created_at"),
    )

    def __repr__(self):
        return f"<Job {self.title} ({self.status})>"
