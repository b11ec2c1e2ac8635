import pytest
from fastapi.testclient import TestClient

from factories import make_settings
from jobconnect.config import Settings
from jobconnect.core.sessions import MemorySessionStore
from jobconnect.main import create_app
from jobconnect.storage import MemoryStorage


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture(params=["memory", "database"])
def client(request, settings):
    """A client against a fresh app, once per storage backend."""
    session_store = MemorySessionStore(settings.SESSION_TTL_SECONDS)
    if request.param == "memory":
        app = create_app(settings, storage=MemoryStorage(), session_store=session_store)
    else:
        # SQLite in-memory database created on startup
        app = create_app(settings, session_store=session_store)

    with TestClient(app) as c:
        yield c
