"""
Tests for the sign-in and sign-out endpoints.
"""


def test_signin_success(client, registered_user, token_service):
    response = client.post(
        "/api/auth/signin",
        json={"email": registered_user["email"], "password": registered_user["password"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"] == {
        "id": registered_user["id"],
        "email": registered_user["email"],
        "fullName": registered_user["fullName"],
    }
    assert token_service.verify_token(data["token"]).user_id == registered_user["id"]


def test_signin_wrong_password(client, registered_user):
    response = client.post(
        "/api/auth/signin",
        json={"email": registered_user["email"], "password": "wrong_password_123"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid credentials"}


def test_signin_unknown_email(client, db):
    """Unknown email answers exactly like a wrong password."""
    response = client.post(
        "/api/auth/signin",
        json={"email": "nobody@example.com", "password": "somepassword123"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid credentials"}


def test_signin_missing_fields(client, db):
    response = client.post("/api/auth/signin", json={"email": "writer@example.com"})

    assert response.status_code == 400
    assert "error" in response.json()



def test_signin_malformed_email_looks_like_bad_credentials(client, registered_user):
    response = client.post("/api/auth/signin", json={"email": "not-an-email", "password": "testpass123"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid credentials"}


def test_signin_email_domain_case_insensitive(client, registered_user):
    response = client.post(
        "/api/auth/signin",
        json={"email": "writer@EXAMPLE.com", "password": registered_user["password"]}
    )

    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered_user["id"]


def test_signout(client):
    response = client.post("/api/auth/signout")

    assert response.status_code == 200
    assert response.json() == {"message": "Signed out successfully"}


def test_google_signin_stub(client):
    response = client.get("/api/auth/google")

    assert response.status_code == 501
    assert "not available" in response.json()["error"]
