import pytest
from sqlalchemy import Uuid

from factories import make_settings
from jobconnect.core.exceptions import ConflictError
from jobconnect.db.base import Base
from jobconnect.db.session import create_engine
from jobconnect.storage import DatabaseStorage, MemoryStorage


@pytest.fixture(params=["memory", "database"])
async def storage(request):
    if request.param == "memory":
        yield MemoryStorage()
        return
    db = DatabaseStorage(create_engine(make_settings()))
    await db.create_tables()
    yield db
    await db.close()


def user_values(**overrides):
    values = {
        "username": "grace",
        "email": "grace@acme.com",
        "password_hash": "$2b$04$hash",
        "role": "employer",
        "first_name": "Grace",
        "last_name": "Hopper",
    }
    values.update(overrides)
    return values


EMPLOYER_PROFILE = {
    "company_name": "Acme",
    "company_size": "11-50",
    "industry": "Software",
    "company_location": "Berlin",
}


async def test_create_user_with_profile(storage):
    user, profile = await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
    assert profile.user_id == user.id
    assert user.password_hash == "$2b$04$hash"
    assert "password_hash" not in user.model_dump()

    employer = await storage.get_employer(user.id)
    assert employer.employer.company_name == "Acme"
    assert employer.user.email == "grace@acme.com"
    assert await storage.get_job_seeker(user.id) is None


async def test_duplicate_email_creates_nothing(storage):
    await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
    with pytest.raises(ConflictError):
        await storage.create_user_with_profile(
            user_values(username="other"), {**EMPLOYER_PROFILE, "company_name": "Other"}
        )
    assert await storage.get_user_by_username("other") is None


async def test_failed_profile_insert_leaves_no_user():
    storage = DatabaseStorage(create_engine(make_settings()))
    await storage.create_tables()
    try:
        profile = {k: v for k, v in EMPLOYER_PROFILE.items() if k != "company_name"}
        with pytest.raises(ConflictError):
            await storage.create_user_with_profile(user_values(), profile)
        assert await storage.get_user_by_email("grace@acme.com") is None
    finally:
        await storage.close()


async def test_update_user_keeps_password_hash(storage):
    user, _ = await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
    updated = await storage.update_user(user.id, {"first_name": "Amazing"})
    assert updated.first_name == "Amazing"
    assert updated.password_hash == "$2b$04$hash"
    assert updated.updated_at >= user.updated_at


async def test_profile_update_writes_user_and_profile(storage):
    user, employer = await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
    updated = await storage.update_employer_profile(
        employer.id, {"bio": "Hiring engineers"}, {"company_name": "Acme GmbH"}
    )
    assert updated.user.bio == "Hiring engineers"
    assert updated.employer.company_name == "Acme GmbH"

    stored = await storage.get_employer(user.id)
    assert stored.user.bio == "Hiring engineers"
    assert stored.employer.company_name == "Acme GmbH"
    assert stored.user.password_hash == "$2b$04$hash"


async def test_profile_update_unknown_profile(storage):
    user, employer = await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
    assert await storage.update_job_seeker_profile(employer.id, {"bio": "x"}, {}) is None
    assert (await storage.get_user(user.id)).bio is None


async def test_failed_profile_update_leaves_user_unchanged():
    storage = DatabaseStorage(create_engine(make_settings()))
    await storage.create_tables()
    try:
        user, employer = await storage.create_user_with_profile(user_values(), EMPLOYER_PROFILE)
        with pytest.raises(ConflictError):
            await storage.update_employer_profile(
                employer.id, {"first_name": "Amazing"}, {"company_name": None}
            )
        stored = await storage.get_employer(user.id)
        assert stored.user.first_name == "Grace"
        assert stored.employer.company_name == "Acme"
    finally:
        await storage.close()


def test_every_table_has_uuid_key_and_timestamps():
    assert Base.metadata.sorted_tables
    for table in Base.metadata.sorted_tables:
        assert isinstance(table.c.id.type, Uuid)
        assert table.c.id.primary_key
        assert not table.c.created_at.nullable
        assert table.c.updated_at.nullable
