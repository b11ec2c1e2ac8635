import uuid

from factories import register_job_seeker


def test_skill_catalog(client):
    register_job_seeker(client)
    for name in ("Python", "Go"):
        response = client.post("/api/skills", json={"name": name, "category": "language"})
        assert response.status_code == 200

    client.cookies.clear()
    response = client.get("/api/skills")
    assert response.status_code == 200
    assert [skill["name"] for skill in response.json()] == ["Go", "Python"]


def test_duplicate_skill(client):
    register_job_seeker(client)
    client.post("/api/skills", json={"name": "Python"})
    response = client.post("/api/skills", json={"name": "Python"})
    assert response.status_code == 409
    assert response.json() == {"message": "Skill already exists"}


def test_creating_skills_requires_session(client):
    response = client.post("/api/skills", json={"name": "Python"})
    assert response.status_code == 401


def test_user_skills(client):
    register_job_seeker(client)
    skill = client.post("/api/skills", json={"name": "Python"}).json()

    body = {"skill_id": skill["id"], "proficiency_level": "expert", "years_experience": 6}
    first = client.post("/api/skills/user", json=body)
    assert first.status_code == 200
    assert first.json()["proficiency_level"] == "expert"

    # Adding the same skill again returns the existing link
    second = client.post("/api/skills/user", json=body)
    assert second.json()["id"] == first.json()["id"]

    [item] = client.get("/api/skills/user").json()
    assert item["skill"]["name"] == "Python"
    assert item["user_skill"]["years_experience"] == 6


def test_add_unknown_user_skill(client):
    register_job_seeker(client)
    response = client.post("/api/skills/user", json={"skill_id": str(uuid.uuid4())})
    assert response.status_code == 404
    assert response.json() == {"message": "Skill not found"}
