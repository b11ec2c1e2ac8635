from factories import (
    PASSWORD,
    current_user,
    employer_payload,
    job_seeker_payload,
    login,
    register_employer,
    register_job_seeker,
)


def test_register_job_seeker_logs_in(client):
    payload = job_seeker_payload(bio="Backend developer", phone="+49 170 1234567")
    response = client.post("/api/auth/register/job-seeker", json=payload)
    assert response.status_code == 200
    assert response.json() == {"success": True, "role": "job_seeker"}

    set_cookie = response.headers["set-cookie"].lower()
    assert "jobconnect_session=" in set_cookie
    assert "httponly" in set_cookie
    assert "secure" not in set_cookie

    data = current_user(client)
    assert data["user"]["email"] == payload["email"]
    assert data["user"]["role"] == "job_seeker"
    assert data["user"]["bio"] == "Backend developer"
    assert "password_hash" not in data["user"]
    assert "password" not in data["user"]
    assert data["profile"]["professional_title"] == "Backend Engineer"
    assert data["profile"]["skills"] == ["Python", "SQL"]
    assert data["profile"]["user_id"] == data["user"]["id"]


def test_register_employer_logs_in(client):
    payload = employer_payload(
        website="https://acme.com", remote_policy="hybrid", bio="Hiring for Acme"
    )
    response = client.post("/api/auth/register/employer", json=payload)
    assert response.status_code == 200
    assert response.json() == {"success": True, "role": "employer"}

    data = current_user(client)
    assert data["user"]["role"] == "employer"
    assert data["user"]["bio"] == "Hiring for Acme"
    assert data["profile"]["company_name"] == "Acme"
    assert data["profile"]["website"] == "https://acme.com"
    assert data["profile"]["remote_policy"] == "hybrid"


def test_registration_then_login(client):
    account = register_job_seeker(client)
    client.post("/api/auth/logout")

    response = login(client, account)
    assert response.json() == {"success": True, "role": "job_seeker"}
    assert current_user(client)["user"]["last_login"] is not None


def test_duplicate_email_is_rejected(client):
    account = register_employer(client)
    client.cookies.clear()

    response = client.post(
        "/api/auth/register/job-seeker",
        json=job_seeker_payload(email=account["email"]),
    )
    assert response.status_code == 409
    assert response.json() == {"message": "User already exists"}

    # The original account is untouched and no second one was created
    login(client, account)
    assert current_user(client)["user"]["role"] == "employer"


def test_duplicate_username_is_rejected(client):
    account = register_job_seeker(client)
    client.cookies.clear()

    response = client.post(
        "/api/auth/register/employer",
        json=employer_payload(username=account["username"]),
    )
    assert response.status_code == 409
    assert response.json() == {"message": "Username already taken"}


def test_invalid_registration_lists_field_errors(client):
    response = client.post(
        "/api/auth/register/job-seeker",
        json=job_seeker_payload(confirm_password="nope", skills=[]),
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"].startswith("Validation failed")
    assert {e["field"] for e in body["errors"]} == {"confirm_password", "skills"}
    assert "set-cookie" not in response.headers


def test_wrong_password_gives_generic_error(client):
    account = register_job_seeker(client)
    client.cookies.clear()

    wrong_password = client.post(
        "/api/auth/login", json={"email": account["email"], "password": "wrong-password"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "nobody@mail.com", "password": PASSWORD}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_logout_ends_session(client):
    register_employer(client)
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    response = client.get("/api/auth/user")
    assert response.status_code == 401


def test_logout_revokes_token_server_side(client):
    register_job_seeker(client)
    token = client.cookies.get("jobconnect_session")
    client.post("/api/auth/logout")
    client.cookies.clear()

    response = client.get("/api/auth/user", headers={"Cookie": f"jobconnect_session={token}"})
    assert response.status_code == 401


def test_current_user_requires_session(client):
    response = client.get("/api/auth/user")
    assert response.status_code == 401
    assert response.json() == {"message": "Authentication required"}


def test_unknown_session_token(client):
    client.cookies.set("jobconnect_session", "forged-token")
    response = client.get("/api/auth/user")
    assert response.status_code == 401


def test_login_replaces_previous_session(client):
    account = register_job_seeker(client)
    old_token = client.cookies.get("jobconnect_session")

    # Log in again while presenting the old cookie
    response = client.post(
        "/api/auth/login", json={"email": account["email"], "password": account["password"]}
    )
    assert response.status_code == 200
    new_token = client.cookies.get("jobconnect_session")
    assert new_token != old_token

    client.cookies.clear()
    response = client.get("/api/auth/user", headers={"Cookie": f"jobconnect_session={old_token}"})
    assert response.status_code == 401
