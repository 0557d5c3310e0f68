def test_create_list_and_search_cleaners(client, make_cleaner):
    make_cleaner("Jane", phone="555-0100")
    make_cleaner("Bob", email="bob@example.com")

    body = client.get("/cleaners").json()
    assert [c["name"] for c in body["data"]] == ["Bob", "Jane"]
    assert body["pagination"]["total"] == 2

    body = client.get("/cleaners", params={"search": "0100"}).json()
    assert [c["name"] for c in body["data"]] == ["Jane"]


def test_blank_name_is_rejected(client):
    response = client.post("/cleaners", json={"name": "   "})
    assert response.status_code == 400
    assert response.json()["details"]["validation_errors"][0]["field"] == "name"


def test_invalid_email_is_rejected(client):
    response = client.post("/cleaners", json={"name": "Jane", "email": "not-an-email"})
    assert response.status_code == 400


def test_delete_blocked_while_sessions_reference_cleaner(client, make_apartment, make_cleaner, make_session):
    apt = make_apartment("A101")
    jane = make_cleaner("Jane")
    session = make_session(apt, jane, "2025-03-01")

    response = client.delete(f"/cleaners/{jane['id']}")
    assert response.status_code == 409
    assert response.json()["details"] == {"sessionCount": 1}

    client.delete(f"/cleaning-sessions/{session['id']}")
    assert client.delete(f"/cleaners/{jane['id']}").status_code == 200


def test_rename_propagates_to_historic_sessions(client, make_apartment, make_cleaner, make_session):
    apt = make_apartment("A101")
    jane = make_cleaner("Jane")
    session = make_session(apt, jane, "2024-11-02")

    client.put(f"/cleaners/{jane['id']}", json={"name": "Jane Doe"})
    client.put(f"/apartments/{apt['id']}", json={"apartment_number": "A101-B"})

    data = client.get(f"/cleaning-sessions/{session['id']}").json()["data"]
    assert data["cleaner_name"] == "Jane Doe"
    assert data["apartment_number"] == "A101-B"
