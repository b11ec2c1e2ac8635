import json
import uuid
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from factories import make_settings
from jobconnect.core.security import (
    Role,
    generate_session_token,
    get_password_hash,
    verify_password,
)
from jobconnect.core.sessions import (
    MemorySessionStore,
    RedisSessionStore,
    build_session_store,
)


def test_password_hash_round_trip():
    hashed = get_password_hash("secret123", rounds=4)
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_verify_password_with_missing_or_malformed_hash():
    assert not verify_password("secret123", "")
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_session_tokens_are_unique_and_opaque():
    tokens = {generate_session_token() for _ in range(100)}
    assert len(tokens) == 100
    assert all(len(t) >= 40 for t in tokens)


async def test_memory_store_create_get_destroy():
    store = MemorySessionStore(ttl_seconds=60)
    user_id = uuid.uuid4()

    token = await store.create(user_id, Role.EMPLOYER)
    session = await store.get(token)
    assert session.user_id == user_id
    assert session.user_role == Role.EMPLOYER

    await store.destroy(token)
    assert await store.get(token) is None
    # Destroying twice is harmless
    await store.destroy(token)


async def test_memory_store_unknown_token():
    store = MemorySessionStore(ttl_seconds=60)
    assert await store.get("nope") is None


async def test_memory_store_expired_session_is_dropped():
    store = MemorySessionStore(ttl_seconds=0)
    token = await store.create(uuid.uuid4(), Role.JOB_SEEKER)
    assert await store.get(token) is None
    assert len(store) == 0


def test_build_session_store_selects_backend():
    assert isinstance(build_session_store(make_settings(SESSION_BACKEND="memory")), MemorySessionStore)
    assert isinstance(build_session_store(make_settings(SESSION_BACKEND="redis")), RedisSessionStore)
    with pytest.raises(ValueError):
        build_session_store(make_settings(SESSION_BACKEND="cookie"))


def test_redis_store_requires_connect():
    store = RedisSessionStore(make_settings(SESSION_BACKEND="redis"))
    assert store.ttl_seconds == 7 * 24 * 60 * 60
    with pytest.raises(RuntimeError):
        store.client


@pytest.fixture
def redis_store():
    store = RedisSessionStore(make_settings(SESSION_BACKEND="redis"))
    store._client = AsyncMock()
    return store


async def test_redis_create_sets_payload_with_ttl(redis_store):
    user_id = uuid.uuid4()
    token = await redis_store.create(user_id, Role.EMPLOYER)

    redis_store._client.setex.assert_awaited_once()
    key, ttl, payload = redis_store._client.setex.await_args.args
    assert key == f"session:{token}"
    assert ttl == 7 * 24 * 60 * 60
    assert json.loads(payload) == {"user_id": str(user_id), "user_role": "employer"}


async def test_redis_get_reads_session(redis_store):
    user_id = uuid.uuid4()
    redis_store._client.get.return_value = json.dumps(
        {"user_id": str(user_id), "user_role": "job_seeker"}
    )

    data = await redis_store.get("abc")
    assert data.user_id == user_id
    assert data.user_role == Role.JOB_SEEKER
    redis_store._client.get.assert_awaited_once_with("session:abc")


async def test_redis_get_missing_session(redis_store):
    redis_store._client.get.return_value = None
    assert await redis_store.get("abc") is None
    redis_store._client.delete.assert_not_awaited()


@pytest.mark.parametrize("value", ["not json", json.dumps({"user_id": "nope"})])
async def test_redis_corrupted_session_is_dropped(redis_store, value):
    redis_store._client.get.return_value = value
    assert await redis_store.get("abc") is None
    redis_store._client.delete.assert_awaited_once_with("session:abc")


async def test_redis_destroy_deletes_key(redis_store):
    await redis_store.destroy("abc")
    redis_store._client.delete.assert_awaited_once_with("session:abc")


async def test_redis_retries_connection_errors(redis_store):
    redis_store._client.setex.side_effect = [RedisConnectionError("reset by peer"), True]

    token = await redis_store.create(uuid.uuid4(), Role.JOB_SEEKER)
    assert token
    assert redis_store._client.setex.await_count == 2


async def test_redis_gives_up_after_three_attempts(redis_store):
    redis_store._client.get.side_effect = RedisConnectionError("down")

    with pytest.raises(RedisConnectionError):
        await redis_store.get("abc")
    assert redis_store._client.get.await_count == 3
