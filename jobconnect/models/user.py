"""User model."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class User(Base):
    """User account. Owns exactly one role-specific profile."""

    __tablename__ = "users"

    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)  # job_seeker, employer
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(20))
    profile_image = Column(String(500))
    bio = Column(Text)
    is_verified = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_login = Column(DateTime, nullable=True)

    # Relationships
    job_seeker = relationship(
        "JobSeeker", back_populates="user", uselist=False, passive_deletes=True
    )
    employer = relationship(
        "Employer", back_populates="user", uselist=False, passive_deletes=True
    )

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
