import uuid

from factories import post_job, register_employer, register_job_seeker


def saved_job_ids(client):
    response = client.get("/api/saved-jobs")
    assert response.status_code == 200
    return [item["job"]["job"]["id"] for item in response.json()]


def test_save_job_is_idempotent(client):
    register_employer(client)
    job = post_job(client)
    register_job_seeker(client)

    for _ in range(2):
        response = client.post("/api/saved-jobs", json={"job_id": job["id"], "notes": "apply Monday"})
        assert response.status_code == 200
        assert response.json() == {"success": True}

    response = client.get("/api/saved-jobs")
    [item] = response.json()
    assert item["saved_job"]["notes"] == "apply Monday"
    assert item["job"]["job"]["id"] == job["id"]
    assert item["job"]["employer"]["employer"]["company_name"] == "Acme"


def test_saved_jobs_newest_first(client):
    register_employer(client)
    first = post_job(client, title="First")
    second = post_job(client, title="Second")
    register_job_seeker(client)
    client.post("/api/saved-jobs", json={"job_id": first["id"]})
    client.post("/api/saved-jobs", json={"job_id": second["id"]})

    assert saved_job_ids(client) == [second["id"], first["id"]]


def test_unsave_job(client):
    register_employer(client)
    job = post_job(client)
    register_job_seeker(client)
    client.post("/api/saved-jobs", json={"job_id": job["id"]})

    response = client.delete(f"/api/saved-jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert saved_job_ids(client) == []

    # Removing a bookmark that does not exist still succeeds
    response = client.delete(f"/api/saved-jobs/{job['id']}")
    assert response.status_code == 200


def test_save_unknown_job(client):
    register_job_seeker(client)
    response = client.post("/api/saved-jobs", json={"job_id": str(uuid.uuid4())})
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_saved_jobs_are_per_job_seeker(client):
    register_employer(client)
    job = post_job(client)
    register_job_seeker(client)
    client.post("/api/saved-jobs", json={"job_id": job["id"]})

    register_job_seeker(client)
    assert saved_job_ids(client) == []


def test_saved_jobs_are_job_seeker_only(client):
    assert client.get("/api/saved-jobs").status_code == 401

    register_employer(client)
    response = client.get("/api/saved-jobs")
    assert response.status_code == 404
    assert response.json() == {"message": "Job seeker profile not found"}
