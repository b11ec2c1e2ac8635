from fastapi.testclient import TestClient

from factories import make_settings, register_employer
from jobconnect.core.exceptions import NotFoundError
from jobconnect.core.sessions import MemorySessionStore
from jobconnect.main import create_app
from jobconnect.storage import MemoryStorage


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

    response = client.get("/")
    assert response.json()["status"] == "operational"


def test_unknown_route_has_message(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_malformed_path_id_is_a_validation_error(client):
    response = client.get("/api/jobs/not-a-uuid")
    assert response.status_code == 400
    body = response.json()
    assert body["errors"][0]["field"] == "job_id"


def test_malformed_json_body(client):
    register_employer(client)
    response = client.post(
        "/api/jobs", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "message" in response.json()


class BrokenStorage(MemoryStorage):
    async def list_jobs(self, search=None, location=None, employment_type=None):
        raise RuntimeError("connection to server at 10.0.0.5 failed")


def test_unexpected_errors_are_not_exposed():
    settings = make_settings()
    app = create_app(
        settings,
        storage=BrokenStorage(),
        session_store=MemorySessionStore(settings.SESSION_TTL_SECONDS),
    )
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/jobs")
    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred"}
    assert "10.0.0.5" not in response.text


def test_error_taxonomy_messages():
    assert NotFoundError().to_dict() == {"message": "Not found"}
    assert NotFoundError("Job not found").status_code == 404
