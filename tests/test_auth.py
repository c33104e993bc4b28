"""
Tests de registro, login y perfil
"""
from app.enums.user_role import UserRole
from app.models.user import User


def _register(client, **overrides):
    payload = {
        "name": "Ana",
        "email": "ana@example.com",
        "password": "secret123",
    }
    payload.update(overrides)
    return client.post("/api/auth/register", json=payload)


def test_register_and_login(client, db):
    response = _register(client, role="tutor")
    assert response.status_code == 200
    user_id = response.json()["user_id"]

    user = db.get(User, user_id)
    assert user.role == UserRole.TUTOR
    assert user.hashed_password != "secret123"

    response = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["role"] == "tutor"
    assert "hashed_password" not in data["user"]

    response = client.get(
        "/api/auth/profile", headers={"Authorization": f"Bearer {data['token']}"}
    )
    assert response.status_code == 200
    assert response.json()["email"] == "ana@example.com"


def test_register_defaults_to_student(client, db):
    user_id = _register(client).json()["user_id"]
    assert db.get(User, user_id).role == UserRole.STUDENT


def test_register_duplicate_email(client):
    _register(client)
    response = _register(client, name="Otra")

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already exists"


def test_register_cannot_create_admin(client):
    response = _register(client, role="admin")
    assert response.status_code == 400


def test_register_missing_fields(client):
    response = _register(client, password="")
    assert response.status_code == 400
    assert response.json()["detail"] == "All fields are required"


def test_login_wrong_password(client):
    _register(client)
    response = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "wrong"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid credentials"


def test_login_inactive_user(client, db):
    user_id = _register(client).json()["user_id"]
    user = db.get(User, user_id)
    user.is_active = False
    db.commit()

    response = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "secret123"}
    )
    assert response.status_code == 400


def test_token_form_login(client):
    _register(client)
    response = client.post(
        "/api/auth/token",
        data={"username": "ana@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_update_profile(client, auth_headers, student):
    response = client.put(
        "/api/auth/update-profile",
        json={"contact": "555-1234", "gender": "Female", "occupation": "Graduate"},
        headers=auth_headers(student),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["contact"] == "555-1234"
    assert data["gender"] == "Female"
    assert data["occupation"] == "Graduate"
    assert data["role"] == "student"


def test_update_profile_rejects_unknown_gender(client, auth_headers, student):
    response = client.put(
        "/api/auth/update-profile",
        json={"gender": "Unknown"},
        headers=auth_headers(student),
    )
    assert response.status_code == 422


def test_deactivated_user_token_is_rejected(client, db, auth_headers, student):
    headers = auth_headers(student)
    student.is_active = False
    db.commit()

    response = client.get("/api/auth/profile", headers=headers)
    assert response.status_code == 401
