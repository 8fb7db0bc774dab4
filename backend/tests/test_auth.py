"""API tests for registration, login and session resolution."""

from datetime import timedelta

from app.utils.auth import create_access_token, get_password_hash, verify_password


def test_password_hashing():
    hashed = get_password_hash("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_register_login_and_session(client):
    registered = client.post(
        "/api/auth/register",
        json={"email": "  New@Example.com ", "password": "longenough", "name": "New Student"},
    )
    assert registered.status_code == 201
    assert registered.json()["email"] == "new@example.com"

    login = client.post("/api/auth/login", json={"email": "new@example.com", "password": "longenough"})
    assert login.status_code == 200
    token = login.json()["accessToken"]
    assert login.json()["tokenType"] == "bearer"

    session = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})
    assert session.json()["user"]["email"] == "new@example.com"


def test_register_validation(client, user):
    assert client.post("/api/auth/register", json={"email": "a@b.c"}).status_code == 400
    short = client.post("/api/auth/register", json={"email": "a@b.c", "password": "short"})
    assert short.status_code == 400
    assert short.json() == {"error": "Password must be at least 8 characters"}

    duplicate = client.post(
        "/api/auth/register", json={"email": user.email, "password": "password123"}
    )
    assert duplicate.status_code == 409


def test_login_with_wrong_password(client, user):
    response = client.post("/api/auth/login", json={"email": user.email, "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_session_is_null_without_valid_token(client, user):
    assert client.get("/api/auth/session").json() is None
    assert client.get("/api/auth/session", headers={"Authorization": "Bearer garbage"}).json() is None

    expired = create_access_token({"sub": str(user.id)}, expires_delta=timedelta(minutes=-5))
    assert client.get("/api/auth/session", headers={"Authorization": f"Bearer {expired}"}).json() is None


def test_token_for_deleted_user_is_unauthorized(client, auth_headers, user, db_session):
    headers = auth_headers(user)
    db_session.delete(user)
    db_session.commit()

    response = client.get("/api/tutor/thread", headers=headers)
    assert response.status_code == 401
