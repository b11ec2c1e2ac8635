"""Skill catalog and per-user skills."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class Skill(Base):
    """Normalized skill catalog entry."""

    __tablename__ = "skills"

    name = Column(String(100), unique=True, nullable=False)
    category = Column(String(50))  # technical, soft, language, ...
    description = Column(Text)
    is_verified = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<Skill {self.name}>"


class UserSkill(Base):
    """A user's proficiency in a catalog skill."""

    __tablename__ = "user_skills"
    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="unique_user_skill"),
    )

    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id = Column(Uuid(as_uuid=True), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    proficiency_level = Column(String(20))  # beginner, intermediate, advanced, expert
    years_experience = Column(Integer)
    is_endorsed = Column(Boolean, default=False, nullable=False)

    # Relationships
    skill = relationship("Skill")

    def __repr__(self):
        return f"<UserSkill user={self.user_id} skill={self.skill_id}>"
