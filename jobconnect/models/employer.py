"""Employer profile model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, String, Text, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class Employer(Base):
    """Company profile of an employer account."""

    __tablename__ = "employers"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    job_title = Column(String(200))
    company_name = Column(String(200), nullable=False, index=True)
    company_size = Column(String(20))  # 1-10, 11-50, 51-200, ...
    industry = Column(String(100))
    company_location = Column(String(200))
    company_description = Column(Text)
    company_logo = Column(String(500))
    website = Column(String(500))
    linkedin_url = Column(String(500))
    founded_year = Column(Integer)
    employee_count = Column(Integer)
    headquarters = Column(String(200))
    benefits = Column(JSON, default=list)
    company_values = Column(JSON, default=list)
    work_culture = Column(Text)
    remote_policy = Column(String(50))  # remote, onsite, hybrid, flexible

    # Verification
    is_verified = Column(Boolean, default=False, nullable=False)
    is_hiring = Column(Boolean, default=True, nullable=False)

    # Relationships
    user = relationship("User", back_populates="employer")
    jobs = relationship("Job", back_populates="employer", passive_deletes=True)

    def __repr__(self):
        return f"<Employer {self.company_name}>"
