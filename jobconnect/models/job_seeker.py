"""Job seeker profile model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, String, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class JobSeeker(Base):
    """Professional profile of a job seeker account."""

    __tablename__ = "job_seekers"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    professional_title = Column(String(200))
    years_experience = Column(String(20))
    skills = Column(JSON, default=list)  # ["Python", "React", ...]
    location = Column(String(200))

    # Links
    resume_url = Column(String(500))
    portfolio_url = Column(String(500))
    linkedin_url = Column(String(500))
    github_url = Column(String(500))
    website_url = Column(String(500))

    # Preferences
    expected_salary_min = Column(Integer)
    expected_salary_max = Column(Integer)
    salary_type = Column(String(20), default="monthly")  # hourly, monthly, yearly
    work_preference = Column(String(50))  # remote, onsite, hybrid
    availability = Column(String(100))
    notice_period = Column(String(50))

    # JSON fields
    education = Column(JSON, default=list)  # [{"degree": "B.Sc", "year": 2020}, ...]
    experience = Column(JSON, default=list)  # [{"company": "X", "role": "Dev"}, ...]
    certifications = Column(JSON, default=list)
    languages = Column(JSON, default=list)

    # Settings
    open_to_relocate = Column(Boolean, default=False, nullable=False)
    job_alerts = Column(Boolean, default=True, nullable=False)
    profile_visibility = Column(String(20), default="public")

    # Relationships
    user = relationship("User", back_populates="job_seeker")

    def __repr__(self):
        return f"<JobSeeker {self.professional_title} (user={self.user_id})>"
