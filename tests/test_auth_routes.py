from drinkwithme.models.selection_db.selection_db import Selection


def register(client, email="ana@example.com", password="s3cret-pass", name="Ana"):
    return client.post(
        "/auth/register",
        json={"email": email, "password": password, "name": name, "age": 27, "favorite_drink": "Arrack"},
    )


def test_register_creates_user_and_profile(client):
    response = register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ana@example.com"
    assert body["is_admin"] is False

    profile = client.get(f"/profiles/{body['id']}")
    assert profile.status_code == 200
    assert profile.json()["name"] == "Ana"
    assert profile.json()["favorite_drink"] == "Arrack"


def test_register_rejects_duplicate_email(client):
    register(client)

    response = register(client)

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_login_and_me(client):
    register(client)

    login = client.post("/auth/login", json={"email": "ana@example.com", "password": "s3cret-pass"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "ana@example.com"


def test_login_with_wrong_password(client):
    register(client)

    response = client.post("/auth/login", json={"email": "ana@example.com", "password": "nope-nope"})

    assert response.status_code == 401


def test_me_requires_valid_token(client):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_update_own_profile(client, make_user, auth_headers):
    user = make_user("Ana")

    response = client.put("/profiles/me", json={"bio": "Rooftops and gin"}, headers=auth_headers(user))

    assert response.status_code == 200
    assert response.json()["bio"] == "Rooftops and gin"
    assert response.json()["name"] == "Ana"


def test_delete_account_removes_selections(client, db, make_user, make_venue, select, auth_headers):
    user = make_user("Ana")
    headers = auth_headers(user)
    select(user, make_venue())

    response = client.delete("/auth/me", headers=headers)

    assert response.status_code == 200
    assert db.query(Selection).count() == 0
    assert client.get("/auth/me", headers=headers).status_code == 404
