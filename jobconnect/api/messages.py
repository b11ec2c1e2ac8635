"""Direct messaging endpoints."""

from typing import List, Set
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends

from jobconnect.config import Settings
from jobconnect.core.deps import get_current_session, get_settings, get_storage
from jobconnect.core.exceptions import AuthorizationError, NotFoundError
from jobconnect.core.sessions import SessionData
from jobconnect.schemas import MessageCreate, MessageRead, MessageWithUsers
from jobconnect.storage import Storage

logger = structlog.get_logger(__name__)

router = APIRouter()


async def check_application_parties(
    storage: Storage, application_id: UUID, participants: Set[UUID]
) -> None:
    """A message may reference an application only between its applicant and its employer."""
    application = await storage.get_application(application_id)
    job = await storage.get_job(application.job_id) if application else None
    job_seeker = (
        await storage.get_job_seeker_by_id(application.job_seeker_id) if application else None
    )
    if job is None or job_seeker is None:
        raise AuthorizationError("Application not found or unauthorized")
    if participants != {job_seeker.user.id, job.employer.user.id}:
        raise AuthorizationError("Application not found or unauthorized")


@router.get("/conversations", response_model=List[MessageWithUsers])
async def conversations(
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Latest messages sent or received by the acting user."""
    return await storage.get_conversations(session.user_id, limit=settings.CONVERSATIONS_LIMIT)


@router.get("/{user_id}", response_model=List[MessageWithUsers])
async def thread(
    user_id: UUID,
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    """Messages exchanged with another user, oldest first."""
    return await storage.get_messages(session.user_id, user_id)


@router.post("", response_model=MessageRead)
async def send_message(
    data: MessageCreate,
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    if await storage.get_user(data.receiver_id) is None:
        raise NotFoundError("Recipient not found")
    if data.application_id:
        await check_application_parties(
            storage, data.application_id, {session.user_id, data.receiver_id}
        )

    message = await storage.create_message(session.user_id, data.model_dump())
    logger.info("message_sent", message_id=str(message.id), receiver_id=str(data.receiver_id))
    return message


@router.put("/{message_id}/read", response_model=MessageRead)
async def mark_read(
    message_id: UUID,
    session: SessionData = Depends(get_current_session),
    storage: Storage = Depends(get_storage),
):
    """Mark a received message as read."""
    message = await storage.get_message(message_id)
    if message is None or message.receiver_id != session.user_id:
        raise AuthorizationError("Message not found or unauthorized")
    return await storage.mark_message_read(message_id)
