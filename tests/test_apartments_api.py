MISSING_ID = "00000000-0000-4000-8000-000000000000"


def test_create_and_get_apartment(client, make_apartment):
    created = make_apartment("A101", owner_email="Owner@Example.com", cleaner_payout=200)

    assert created["owner_email"] == "owner@example.com"
    assert created["cleaner_payout"] == 200

    response = client.get(f"/apartments/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["apartment_number"] == "A101"


def test_duplicate_number_is_case_insensitive(client, make_apartment):
    make_apartment("a101")

    response = client.post("/apartments", json={"apartment_number": "A101", "owner_name": "Other"})
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "Apartment number already exists"}


def test_update_rejects_number_taken_by_another_apartment(client, make_apartment):
    make_apartment("A101")
    second = make_apartment("B202")

    response = client.put(f"/apartments/{second['id']}", json={"apartment_number": "a101"})
    assert response.status_code == 409

    # Keeping its own number is fine
    response = client.put(f"/apartments/{second['id']}", json={"apartment_number": "B202", "address": "1 Main St"})
    assert response.status_code == 200
    assert response.json()["data"]["address"] == "1 Main St"


def test_invalid_and_missing_ids(client):
    response = client.get("/apartments/not-a-uuid")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid apartment ID format"

    response = client.get(f"/apartments/{MISSING_ID}")
    assert response.status_code == 404
    assert response.json()["error"] == "Apartment not found"


def test_payout_must_fit_the_payout_column(client, make_apartment):
    for payout in ("12345678901.999", "1.005"):
        response = client.post(
            "/apartments",
            json={"apartment_number": "A101", "owner_name": "Alice", "cleaner_payout": payout},
        )
        assert response.status_code == 400
        assert response.json()["details"]["validation_errors"][0]["field"] == "cleaner_payout"

    apt = make_apartment("A101", cleaner_payout="200.50")
    response = client.put(f"/apartments/{apt['id']}", json={"cleaner_payout": "200.505"})
    assert response.status_code == 400


def test_negative_payout_is_rejected(client):
    response = client.post(
        "/apartments",
        json={"apartment_number": "A101", "owner_name": "Alice", "cleaner_payout": -5},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert body["details"]["validation_errors"][0]["field"] == "cleaner_payout"


def test_search_and_pagination(client, make_apartment):
    make_apartment("A101", owner_name="Alice")
    make_apartment("B202", owner_name="Bob", address="Harbour Road")
    make_apartment("C303", owner_name="Carol")

    response = client.get("/apartments", params={"search": "harbour"})
    assert [a["apartment_number"] for a in response.json()["data"]] == ["B202"]

    response = client.get("/apartments", params={"limit": 2, "offset": 0})
    body = response.json()
    assert [a["apartment_number"] for a in body["data"]] == ["A101", "B202"]
    assert body["pagination"] == {"total": 3, "limit": 2, "offset": 0, "hasMore": True}


def test_delete_blocked_until_sessions_are_removed(client, make_apartment, make_cleaner, make_session):
    apt = make_apartment("A101")
    cleaner = make_cleaner("Jane")
    sessions = [
        make_session(apt, cleaner, day)
        for day in ("2025-03-01", "2025-03-02", "2025-03-03")
    ]

    response = client.delete(f"/apartments/{apt['id']}")
    assert response.status_code == 409
    assert response.json()["details"] == {"sessionCount": 3}

    for session in sessions:
        assert client.delete(f"/cleaning-sessions/{session['id']}").status_code == 200

    response = client.delete(f"/apartments/{apt['id']}")
    assert response.status_code == 200
    assert client.get(f"/apartments/{apt['id']}").status_code == 404
