"""
Tests de los endpoints /api/bookings: cableado HTTP, autenticación y
formato de los errores del ciclo de vida.
"""
from sqlalchemy.exc import SQLAlchemyError

from app.enums.booking_status import BookingStatus, TutorStatus
from app.models.availability import Availability
from app.models.booking import Booking


def _create(client, headers, tutor, **overrides):
    payload = {
        "tutor_id": tutor.id,
        "subject": "Math",
        "date": "2024-01-01",
        "time": "10:00",
        "amount": 500,
    }
    payload.update(overrides)
    return client.post("/api/bookings/", json=payload, headers=headers)


def test_create_booking_endpoint(client, auth_headers, student, tutor):
    response = _create(client, auth_headers(student), tutor)

    assert response.status_code == 200
    data = response.json()
    assert data["student_id"] == student.id
    assert data["tutor_id"] == tutor.id
    assert data["status"] == "scheduled"
    assert data["tutor_status"] == "scheduled"
    assert data["payment_status"] == "paid"
    assert data["student"] == {"id": student.id, "name": student.name, "email": student.email}
    assert data["tutor"]["name"] == tutor.name


def test_create_booking_without_amount(client, db, auth_headers, student, tutor):
    payload = {
        "tutor_id": tutor.id,
        "subject": "Math",
        "date": "2024-01-01",
        "time": "10:00",
    }
    response = client.post("/api/bookings/", json=payload, headers=auth_headers(student))

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Missing required fields",
        "kind": "validation_error",
    }
    assert db.query(Booking).count() == 0


def test_create_booking_requires_token(client, tutor):
    response = _create(client, {}, tutor)
    assert response.status_code == 401


def test_create_booking_with_invalid_token(client, tutor):
    response = _create(client, {"Authorization": "Bearer not-a-token"}, tutor)
    assert response.status_code == 401


def test_accept_and_cancel_flow(client, db, auth_headers, student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(f"/api/bookings/accept/{booking_id}", headers=auth_headers(tutor))
    assert response.status_code == 200
    assert response.json()["message"] == "Booking accepted"

    booking = db.get(Booking, booking_id)
    db.refresh(booking)
    assert booking.tutor_status == TutorStatus.ACCEPTED
    assert booking.status == BookingStatus.SCHEDULED

    response = client.patch(f"/api/bookings/cancel/{booking_id}", headers=auth_headers(student))
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Booking cancelled"
    assert data["booking"]["status"] == "cancelled"
    assert data["booking"]["tutor_status"] == "declined"


def test_decline_endpoint(client, auth_headers, student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(f"/api/bookings/decline/{booking_id}", headers=auth_headers(tutor))

    assert response.status_code == 200
    assert response.json() == {"message": "Booking declined", "booking": None}


def test_accept_unknown_booking(client, auth_headers, tutor):
    response = client.patch("/api/bookings/accept/999", headers=auth_headers(tutor))

    assert response.status_code == 404
    assert response.json() == {"detail": "Booking not found", "kind": "not_found"}


def test_accept_with_ownership_setting(client, app, auth_headers, student, tutor, other_tutor):
    app.state.context.settings.require_tutor_ownership = True
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(
        f"/api/bookings/accept/{booking_id}", headers=auth_headers(other_tutor)
    )
    assert response.status_code == 403
    assert response.json()["kind"] == "forbidden"

    response = client.patch(f"/api/bookings/accept/{booking_id}", headers=auth_headers(tutor))
    assert response.status_code == 200


def test_reschedule_by_other_student(client, db, auth_headers, student, other_student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(
        f"/api/bookings/reschedule/{booking_id}",
        json={"date": "2024-02-02", "time": "11:00"},
        headers=auth_headers(other_student),
    )

    assert response.status_code == 403
    assert response.json() == {"detail": "Not allowed", "kind": "forbidden"}

    booking = db.get(Booking, booking_id)
    db.refresh(booking)
    assert booking.date == "2024-01-01"
    assert booking.time == "10:00"


def test_reschedule_without_time(client, auth_headers, student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(
        f"/api/bookings/reschedule/{booking_id}",
        json={"date": "2024-02-02"},
        headers=auth_headers(student),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Date & time required"


def test_reschedule_by_student(client, auth_headers, student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    response = client.patch(
        f"/api/bookings/reschedule/{booking_id}",
        json={"date": "2024-02-02", "time": "11:00"},
        headers=auth_headers(student),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Booking rescheduled"
    assert data["booking"]["date"] == "2024-02-02"
    assert data["booking"]["tutor_status"] == "scheduled"


def test_tutor_reschedule_endpoint(client, auth_headers, student, tutor):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]
    client.patch(f"/api/bookings/accept/{booking_id}", headers=auth_headers(tutor))

    response = client.patch(
        f"/api/bookings/tutor-reschedule/{booking_id}",
        json={"date": "2024-03-03", "time": "16:00"},
        headers=auth_headers(tutor),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Tutor rescheduled successfully"
    assert data["booking"]["time"] == "16:00"
    assert data["booking"]["tutor_status"] == "accepted"

    response = client.patch(
        f"/api/bookings/tutor-reschedule/{booking_id}",
        json={"date": "2024-03-03", "time": "16:00"},
        headers=auth_headers(student),
    )
    assert response.status_code == 403


def test_list_bookings(client, auth_headers, student, other_student, tutor):
    _create(client, auth_headers(student), tutor, date="2024-01-01")
    _create(client, auth_headers(student), tutor, date="2024-03-01")
    _create(client, auth_headers(other_student), tutor, date="2024-02-01")

    response = client.get("/api/bookings/student", headers=auth_headers(student))
    assert response.status_code == 200
    dates = [b["date"] for b in response.json()]
    assert dates == ["2024-03-01", "2024-01-01"]

    response = client.get("/api/bookings/tutor", headers=auth_headers(tutor))
    assert response.status_code == 200
    bookings = response.json()
    assert [b["date"] for b in bookings] == ["2024-03-01", "2024-02-01", "2024-01-01"]
    assert bookings[1]["student"]["id"] == other_student.id


def test_booking_availability_is_public(client, db, tutor):
    db.add(Availability(tutor_id=tutor.id, day="Monday", start_time="09:00", end_time="11:00"))
    db.commit()

    response = client.get(f"/api/bookings/availability/{tutor.id}")

    assert response.status_code == 200
    assert response.json() == [
        {"day": "Monday", "start_time": "09:00", "end_time": "11:00"}
    ]


def test_cancel_storage_failure_returns_500(client, db, auth_headers, student, tutor, monkeypatch):
    booking_id = _create(client, auth_headers(student), tutor).json()["id"]

    def failing_commit():
        raise SQLAlchemyError("db down")

    monkeypatch.setattr(db, "commit", failing_commit)

    response = client.patch(f"/api/bookings/cancel/{booking_id}", headers=auth_headers(student))

    assert response.status_code == 500
    assert response.json() == {
        "detail": "Failed to save booking",
        "kind": "persistence_error",
    }

    monkeypatch.undo()
    booking = db.get(Booking, booking_id)
    db.refresh(booking)
    assert booking.status == BookingStatus.SCHEDULED
    assert booking.tutor_status == TutorStatus.SCHEDULED
