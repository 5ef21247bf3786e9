import uuid


def swipe(client, headers, target, direction):
    return client.post(
        "/matching/swipes",
        json={"swiped_id": str(target.id), "direction": direction},
        headers=headers,
    )


def test_candidates_needs_selection(client, make_user, auth_headers):
    user = make_user("Ana")

    response = client.get("/matching/candidates", headers=auth_headers(user))

    assert response.status_code == 200
    assert response.json() == {"status": "needs_selection", "candidates": []}


def test_full_swipe_to_match_flow(client, make_user, make_venue, select, auth_headers):
    venue = make_venue("The Craft House")
    ana, ben = make_user("Ana"), make_user("Ben")
    select(ana, venue)
    select(ben, venue)

    pool = client.get("/matching/candidates", headers=auth_headers(ana)).json()
    assert pool["status"] == "ok"
    [candidate] = pool["candidates"]
    assert candidate["user_id"] == str(ben.id)
    assert candidate["match_count"] == 1
    assert candidate["shared_venues"] == [{"id": str(venue.id), "name": "The Craft House"}]

    first = swipe(client, auth_headers(ana), ben, "right").json()
    assert first == {"outcome": "recorded", "matched": False, "match_id": None}
    assert client.get("/matching/candidates", headers=auth_headers(ana)).json()["candidates"] == []

    second = swipe(client, auth_headers(ben), ana, "right").json()
    assert second["outcome"] == "matched"
    assert second["matched"] is True

    matches = client.get("/matching/matches", headers=auth_headers(ana)).json()
    assert [m["id"] for m in matches] == [second["match_id"]]
    assert matches[0]["shared_venue_id"] == str(venue.id)
    assert matches[0]["status"] == "accepted"


def test_swipe_validation(client, make_user, auth_headers):
    ana = make_user("Ana")
    ghost = uuid.uuid4()

    assert swipe(client, auth_headers(ana), ana, "right").status_code == 400
    missing = client.post(
        "/matching/swipes",
        json={"swiped_id": str(ghost), "direction": "right"},
        headers=auth_headers(ana),
    )
    assert missing.status_code == 404

    ben = make_user("Ben")
    assert swipe(client, auth_headers(ana), ben, "up").status_code == 422


def test_reset_left_swipes_route(client, make_user, make_venue, select, auth_headers):
    venue = make_venue()
    ana, ben = make_user("Ana"), make_user("Ben")
    select(ana, venue)
    select(ben, venue)
    swipe(client, auth_headers(ana), ben, "left")

    response = client.delete("/matching/swipes/left", headers=auth_headers(ana))

    assert response.json() == {"deleted": 1}
    candidates = client.get("/matching/candidates", headers=auth_headers(ana)).json()["candidates"]
    assert [c["user_id"] for c in candidates] == [str(ben.id)]


def test_matching_requires_auth(client):
    assert client.get("/matching/candidates").status_code == 401
