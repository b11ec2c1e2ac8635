"""Skill catalog endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from jobconnect.core.deps import get_current_session, get_storage
from jobconnect.core.exceptions import NotFoundError
from jobconnect.core.sessions import SessionData
from jobconnect.schemas import (
    SkillCreate,
    SkillRead,
    UserSkillCreate,
    UserSkillRead,
    UserSkillWithSkill,
)
from jobconnect.storage import Storage

router = APIRouter()


@router.get("", response_model=List[SkillRead])
async def list_skills(storage: Storage = Depends(get_storage)):
    return await storage.get_skills()


@router.post("", response_model=SkillRead)
async def create_skill(
    data: SkillCreate,
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    return await storage.create_skill(data.model_dump())


@router.get("/user", response_model=List[UserSkillWithSkill])
async def my_skills(
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_user_skills(session.user_id)


@router.post("/user", response_model=UserSkillRead)
async def add_my_skill(
    data: UserSkillCreate,
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    """Attach a catalog skill to the acting user."""
    if await storage.get_skill(data.skill_id) is None:
        raise NotFoundError("Skill not found")
    return await storage.add_user_skill(session.user_id, data.model_dump())
