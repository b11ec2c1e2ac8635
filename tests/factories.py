"""Request payloads and HTTP helpers shared by the API tests."""

import itertools
from datetime import datetime, timedelta

from jobconnect.config import Settings

PASSWORD = "secret123"

_counter = itertools.count(1)


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "AUTO_CREATE_TABLES": True,
        "SESSION_BACKEND": "memory",
        "BCRYPT_ROUNDS": 4,
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "WARNING",
        "LOG_FORMAT": "console",
        "SENTRY_DSN": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def job_seeker_payload(**overrides) -> dict:
    n = next(_counter)
    payload = {
        "username": f"seeker{n}",
        "email": f"seeker{n}@mail.com",
        "password": PASSWORD,
        "confirm_password": PASSWORD,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "professional_title": "Backend Engineer",
        "skills": ["Python", "SQL"],
        "location": "Berlin",
    }
    payload.update(overrides)
    return payload


def employer_payload(**overrides) -> dict:
    n = next(_counter)
    payload = {
        "username": f"hr{n}",
        "email": f"hr{n}@acme.com",
        "password": PASSWORD,
        "confirm_password": PASSWORD,
        "first_name": "Grace",
        "last_name": "Hopper",
        "company_name": "Acme",
        "company_size": "51-200",
        "industry": "Software",
        "company_location": "Berlin",
    }
    payload.update(overrides)
    return payload


def job_payload(**overrides) -> dict:
    payload = {
        "title": "Backend Engineer",
        "description": "Build and run the APIs behind our hiring platform.",
        "employment_type": "full-time",
        "location": "Berlin",
        "salary_min": 4000,
        "salary_max": 6000,
        "required_skills": ["Python", "PostgreSQL"],
    }
    payload.update(overrides)
    return payload


def interview_payload(application_id: str, **overrides) -> dict:
    payload = {
        "application_id": application_id,
        "title": "Technical interview",
        "scheduled_at": (datetime.utcnow() + timedelta(days=3)).isoformat(),
        "duration": 60,
        "type": "video",
        "location": "https://meet.example.com/abc",
    }
    payload.update(overrides)
    return payload


def register_job_seeker(client, **overrides) -> dict:
    """Register a job seeker; the client is left logged in as them."""
    client.cookies.clear()
    payload = job_seeker_payload(**overrides)
    response = client.post("/api/auth/register/job-seeker", json=payload)
    assert response.status_code == 200, response.text
    return payload


def register_employer(client, **overrides) -> dict:
    """Register an employer; the client is left logged in as them."""
    client.cookies.clear()
    payload = employer_payload(**overrides)
    response = client.post("/api/auth/register/employer", json=payload)
    assert response.status_code == 200, response.text
    return payload


def login(client, account: dict):
    """Switch the client's session to ``account``."""
    client.cookies.clear()
    response = client.post(
        "/api/auth/login", json={"email": account["email"], "password": account["password"]}
    )
    assert response.status_code == 200, response.text
    return response


def post_job(client, **overrides) -> dict:
    response = client.post("/api/jobs", json=job_payload(**overrides))
    assert response.status_code == 200, response.text
    return response.json()


def apply(client, job_id: str, **overrides) -> dict:
    body = {"job_id": job_id, "cover_letter": "I would love to join."}
    body.update(overrides)
    response = client.post("/api/applications", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def current_user(client) -> dict:
    response = client.get("/api/auth/user")
    assert response.status_code == 200, response.text
    return response.json()


def hiring_setup(client):
    """Employer with one active job and a job seeker who applied to it.

    Returns ``(employer, job_seeker, job, application)``; the client is left
    logged in as the employer.
    """
    employer = register_employer(client)
    job = post_job(client)
    job_seeker = register_job_seeker(client)
    application = apply(client, job["id"])
    login(client, employer)
    return employer, job_seeker, job, application
