"""
Tests de reseñas y de las rutas de administración
"""
from app.enums.user_role import UserRole


def _review(client, headers, tutor, **overrides):
    payload = {"tutor_id": tutor.id, "rating": 5, "comment": "Great class"}
    payload.update(overrides)
    return client.post("/api/reviews/", json=payload, headers=headers)


def test_create_and_list_reviews(client, auth_headers, student, other_student, tutor):
    assert _review(client, auth_headers(student), tutor).status_code == 200
    assert _review(client, auth_headers(other_student), tutor, rating=3).status_code == 200

    mine = client.get("/api/reviews/tutor/me", headers=auth_headers(tutor)).json()
    assert len(mine) == 2

    public = client.get(f"/api/reviews/tutor/{tutor.id}").json()
    # Más nuevas primero
    assert [r["rating"] for r in public["reviews"]] == [3, 5]
    assert public["reviews"][1]["student"]["id"] == student.id


def test_review_missing_fields(client, auth_headers, student, tutor):
    response = _review(client, auth_headers(student), tutor, comment="")
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields"


def test_review_rating_bounds(client, auth_headers, student, tutor):
    assert _review(client, auth_headers(student), tutor, rating=6).status_code == 422
    assert _review(client, auth_headers(student), tutor, rating=0).status_code == 422


def test_review_unknown_tutor(client, auth_headers, student, other_student):
    response = _review(client, auth_headers(student), other_student)
    assert response.status_code == 404


def test_check_recording_review(client, auth_headers, student, tutor, sample_recording):
    headers = auth_headers(student)

    assert client.get("/api/reviews/check", headers=headers).json() == {"reviewed": False}
    response = client.get(
        "/api/reviews/check", params={"recording_id": sample_recording.id}, headers=headers
    )
    assert response.json() == {"reviewed": False}

    _review(client, headers, tutor, recording_id=sample_recording.id)

    response = client.get(
        "/api/reviews/check", params={"recording_id": sample_recording.id}, headers=headers
    )
    assert response.json() == {"reviewed": True}

    review = client.get(f"/api/reviews/tutor/{tutor.id}").json()["reviews"][0]
    assert review["recording"]["original_file_name"] == sample_recording.original_file_name


def test_admin_routes_require_admin(client, auth_headers, student):
    headers = auth_headers(student)
    assert client.get("/api/admin/users", headers=headers).status_code == 403
    assert client.put(f"/api/admin/toggle/{student.id}", headers=headers).status_code == 403
    assert (
        client.put(f"/api/admin/role/{student.id}", json={"role": "admin"}, headers=headers).status_code
        == 403
    )


def test_admin_list_users(client, auth_headers, admin, student, tutor):
    users = client.get("/api/admin/users", headers=auth_headers(admin)).json()
    assert {u["id"] for u in users} == {admin.id, student.id, tutor.id}


def test_admin_toggle_user(client, db, auth_headers, admin, student):
    response = client.put(f"/api/admin/toggle/{student.id}", headers=auth_headers(admin))
    assert response.status_code == 200
    assert response.json() == {"message": "User status updated", "is_active": False}

    db.refresh(student)
    assert student.is_active is False

    response = client.put("/api/admin/toggle/999", headers=auth_headers(admin))
    assert response.status_code == 404


def test_admin_change_role(client, db, auth_headers, admin, student):
    response = client.put(
        f"/api/admin/role/{student.id}", json={"role": "tutor"}, headers=auth_headers(admin)
    )
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "tutor"

    db.refresh(student)
    assert student.role == UserRole.TUTOR

    response = client.put(f"/api/admin/role/{student.id}", json={}, headers=auth_headers(admin))
    assert response.status_code == 400
