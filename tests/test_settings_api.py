def test_default_fee_until_one_is_stored(client):
    response = client.get("/settings/welcome-pack")
    assert response.status_code == 200
    assert response.json()["data"] == {"fee": 0}


def test_set_fee(client):
    response = client.put("/settings/welcome-pack", json={"fee": 12.5})
    assert response.status_code == 200
    assert response.json()["data"] == {"fee": 12.5}

    assert client.get("/settings/welcome-pack").json()["data"] == {"fee": 12.5}


def test_negative_fee_is_rejected(client):
    response = client.put("/settings/welcome-pack", json={"fee": -1})
    assert response.status_code == 400


def test_fee_must_fit_the_price_column(client):
    for fee in ("12345678901.999", "0.125"):
        response = client.put("/settings/welcome-pack", json={"fee": fee})
        assert response.status_code == 400

    assert client.get("/settings/welcome-pack").json()["data"] == {"fee": 0}


def test_fee_change_does_not_reprice_existing_sessions(client, make_apartment, make_cleaner, make_session):
    apt = make_apartment("A101")
    jane = make_cleaner("Jane")
    client.put("/settings/welcome-pack", json={"fee": 50})
    session = make_session(apt, jane, "2025-03-05", price=100, include_welcome_pack=True)

    client.put("/settings/welcome-pack", json={"fee": 75})

    data = client.get(f"/cleaning-sessions/{session['id']}").json()["data"]
    assert data["price"] == 150


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
