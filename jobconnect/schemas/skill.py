"""Skill catalog schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from jobconnect.schemas.common import RecordModel, RequestModel
from jobconnect.schemas.enums import ProficiencyLevel


class SkillCreate(RequestModel):
    """New catalog skill."""

    name: str = Field(..., min_length=1, max_length=100)
    category: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None


class SkillRead(RecordModel):
    id: UUID
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    is_verified: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserSkillCreate(RequestModel):
    """Attach a catalog skill to the acting user."""

    skill_id: UUID
    proficiency_level: Optional[ProficiencyLevel] = None
    years_experience: Optional[int] = Field(None, ge=0, le=70)


class UserSkillRead(RecordModel):
    id: UUID
    user_id: UUID
    skill_id: UUID
    proficiency_level: Optional[ProficiencyLevel] = None
    years_experience: Optional[int] = None
    is_endorsed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserSkillWithSkill(BaseModel):
    user_skill: UserSkillRead
    skill: SkillRead
