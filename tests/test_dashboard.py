from datetime import datetime, timedelta

from factories import (
    current_user,
    hiring_setup,
    interview_payload,
    login,
    post_job,
    register_employer,
    register_job_seeker,
)


def test_empty_job_seeker_dashboard(client):
    account = register_job_seeker(client)
    response = client.get("/api/dashboard/job-seeker")
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["user"]["email"] == account["email"]
    assert data["stats"] == {
        "total_applications": 0,
        "pending_applications": 0,
        "interviews_scheduled": 0,
        "saved_jobs_count": 0,
    }
    for key in (
        "recent_applications",
        "saved_jobs",
        "job_matches",
        "upcoming_interviews",
        "recent_conversations",
    ):
        assert data[key] == []


def test_job_seeker_dashboard(client):
    employer, seeker, job, application = hiring_setup(client)
    client.post("/api/interviews", json=interview_payload(application["id"]))
    past = (datetime.utcnow() - timedelta(days=1)).isoformat()
    client.post("/api/interviews", json=interview_payload(application["id"], scheduled_at=past))
    other_job = post_job(client, title="Platform Engineer")
    employer_user_id = current_user(client)["user"]["id"]

    login(client, seeker)
    client.post("/api/saved-jobs", json={"job_id": other_job["id"]})
    client.post("/api/messages", json={"receiver_id": employer_user_id, "content": "Thanks!"})

    data = client.get("/api/dashboard/job-seeker").json()
    assert data["stats"] == {
        "total_applications": 1,
        "pending_applications": 1,
        "interviews_scheduled": 2,
        "saved_jobs_count": 1,
    }
    assert data["recent_applications"][0]["application"]["id"] == application["id"]
    assert data["saved_jobs"][0]["job"]["job"]["title"] == "Platform Engineer"
    # Only the future interview is upcoming
    assert len(data["upcoming_interviews"]) == 1
    assert data["recent_conversations"][0]["message"]["content"] == "Thanks!"


def test_employer_dashboard(client):
    employer, seeker, job, application = hiring_setup(client)
    paused = post_job(client, title="Paused role")
    client.put(f"/api/jobs/{paused['id']}", json={"status": "paused"})
    interview = client.post("/api/interviews", json=interview_payload(application["id"])).json()
    client.put(f"/api/interviews/{interview['id']}", json={"status": "cancelled"})
    employer_id = current_user(client)["profile"]["id"]

    login(client, seeker)
    for rating in (4, 5):
        client.post(
            "/api/reviews",
            json={"employer_id": employer_id, "rating": rating, "title": "Nice"},
        )
    register_job_seeker(client)
    client.post(
        "/api/reviews", json={"employer_id": employer_id, "rating": 2, "title": "Meh"}
    )

    login(client, employer)
    response = client.get("/api/dashboard/employer")
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["employer"]["company_name"] == "Acme"
    assert data["stats"] == {
        "total_jobs": 2,
        "active_jobs": 1,
        "total_applications": 1,
        "interviews_scheduled": 0,
        "average_rating": 3.67,
    }
    assert [j["id"] for j in data["active_jobs"]] == [job["id"]]
    assert data["recent_applications"][0]["job_seeker"]["user"]["email"] == seeker["email"]
    assert data["upcoming_interviews"] == []
    assert len(data["company_reviews"]) == 3


def test_dashboards_are_role_specific(client):
    assert client.get("/api/dashboard/employer").status_code == 401

    register_job_seeker(client)
    response = client.get("/api/dashboard/employer")
    assert response.status_code == 404
    assert response.json() == {"message": "Employer profile not found"}

    register_employer(client)
    response = client.get("/api/dashboard/job-seeker")
    assert response.status_code == 404
    assert response.json() == {"message": "Job seeker profile not found"}
