import uuid

from factories import (
    apply,
    job_payload,
    login,
    post_job,
    register_employer,
    register_job_seeker,
)


def listed_titles(client, **params):
    response = client.get("/api/jobs", params=params)
    assert response.status_code == 200
    return sorted(item["job"]["title"] for item in response.json())


def test_create_job(client):
    register_employer(client)
    job = post_job(client, benefits=["Remote budget"], is_urgent=True)
    assert job["status"] == "active"
    assert job["applications_count"] == 0
    assert job["views"] == 0
    assert job["benefits"] == ["Remote budget"]
    assert job["work_location"] == "onsite"
    assert job["currency"] == "USD"
    assert job["is_urgent"] is True


def test_job_listing_is_public_and_composed(client):
    employer = register_employer(client)
    job = post_job(client)
    client.cookies.clear()

    response = client.get("/api/jobs")
    assert response.status_code == 200
    [item] = response.json()
    assert item["job"]["id"] == job["id"]
    assert item["employer"]["employer"]["company_name"] == "Acme"
    assert item["employer"]["user"]["email"] == employer["email"]
    assert "password_hash" not in item["employer"]["user"]


def test_listing_only_returns_active_jobs(client):
    register_employer(client)
    post_job(client, title="Active role")
    for status in ("paused", "closed", "filled"):
        job = post_job(client, title=f"{status} role")
        response = client.put(f"/api/jobs/{job['id']}", json={"status": status})
        assert response.status_code == 200

    response = client.get("/api/jobs")
    assert [item["job"]["status"] for item in response.json()] == ["active"]
    assert listed_titles(client) == ["Active role"]


def test_listing_filters(client):
    register_employer(client)
    post_job(client, title="Python Developer", location="Berlin")
    post_job(client, title="Data Analyst", location="Munich", employment_type="part-time")
    post_job(
        client,
        title="Intern",
        description="Help the python team with tooling and tests.",
        location="Remote, EU",
        employment_type="internship",
    )

    assert listed_titles(client, search="python") == ["Intern", "Python Developer"]
    assert listed_titles(client, location="munich") == ["Data Analyst"]
    assert listed_titles(client, employmentType="internship") == ["Intern"]
    assert listed_titles(client, search="python", employmentType="full-time") == [
        "Python Developer"
    ]
    assert listed_titles(client, search="100%") == []


def test_listing_newest_first(client):
    register_employer(client)
    first = post_job(client, title="First")
    second = post_job(client, title="Second")

    ids = [item["job"]["id"] for item in client.get("/api/jobs").json()]
    assert ids == [second["id"], first["id"]]


def test_get_job(client):
    register_employer(client)
    job = post_job(client)

    response = client.get(f"/api/jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json()["job"]["title"] == "Backend Engineer"

    response = client.get(f"/api/jobs/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_my_jobs_includes_every_status(client):
    employer = register_employer(client)
    active = post_job(client)
    paused = post_job(client, title="Paused")
    client.put(f"/api/jobs/{paused['id']}", json={"status": "paused"})

    # Another employer's job is not included
    register_employer(client)
    post_job(client)

    login(client, employer)
    response = client.get("/api/jobs/employer/my-jobs")
    assert response.status_code == 200
    assert sorted(job["id"] for job in response.json()) == sorted([active["id"], paused["id"]])

    client.cookies.clear()
    response = client.get("/api/jobs/employer/my-jobs")
    assert response.status_code == 401


def test_create_job_requires_employer(client):
    response = client.post("/api/jobs", json=job_payload())
    assert response.status_code == 401

    register_job_seeker(client)
    response = client.post("/api/jobs", json=job_payload())
    assert response.status_code == 404
    assert response.json() == {"message": "Employer profile not found"}


def test_create_job_validation(client):
    register_employer(client)
    response = client.post("/api/jobs", json=job_payload(salary_min=9000, salary_max=100))
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "salary_max"

    response = client.get("/api/jobs/employer/my-jobs")
    assert response.json() == []


def test_partial_update(client):
    register_employer(client)
    job = post_job(client)

    response = client.put(
        f"/api/jobs/{job['id']}", json={"title": "Senior Backend Engineer", "salary_max": 8000}
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Senior Backend Engineer"
    assert updated["salary_max"] == 8000
    assert updated["salary_min"] == 4000
    assert updated["description"] == job["description"]
    assert updated["status"] == "active"


def test_update_keeps_salary_range_valid(client):
    register_employer(client)
    job = post_job(client, salary_min=4000, salary_max=6000)

    # Valid on its own, invalid against the stored maximum
    response = client.put(f"/api/jobs/{job['id']}", json={"salary_min": 7000})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "salary_max"

    response = client.get(f"/api/jobs/{job['id']}")
    assert response.json()["job"]["salary_min"] == 4000


def test_update_rejects_null_for_required_field(client):
    register_employer(client)
    job = post_job(client)

    response = client.put(f"/api/jobs/{job['id']}", json={"title": None})
    assert response.status_code == 400
    assert client.get(f"/api/jobs/{job['id']}").json()["job"]["title"] == job["title"]


def test_non_owner_cannot_update_or_delete(client):
    register_employer(client)
    job = post_job(client)

    register_employer(client)
    response = client.put(f"/api/jobs/{job['id']}", json={"title": "Hijacked"})
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found or unauthorized"}

    response = client.delete(f"/api/jobs/{job['id']}")
    assert response.status_code == 404

    response = client.get(f"/api/jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json()["job"]["title"] == job["title"]


def test_update_unknown_job_looks_the_same_as_foreign_job(client):
    register_employer(client)
    response = client.put(f"/api/jobs/{uuid.uuid4()}", json={"title": "Anything"})
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found or unauthorized"}


def test_delete_job_cascades(client):
    employer = register_employer(client)
    job = post_job(client)
    register_job_seeker(client)
    apply(client, job["id"])
    client.post("/api/saved-jobs", json={"job_id": job["id"]})

    login(client, employer)
    response = client.delete(f"/api/jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert client.get(f"/api/jobs/{job['id']}").status_code == 404
    assert client.get("/api/applications/employer").json() == []
