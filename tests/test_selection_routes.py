import uuid

from drinkwithme.services.venue_status import VenueStatus


def test_set_and_get_my_selections(client, make_user, make_venue, auth_headers):
    user = make_user("Ana")
    v1, v2 = make_venue("V1"), make_venue("V2")

    response = client.put(
        "/selections/me",
        json={"venue_ids": [str(v1.id), str(v2.id), str(v1.id)]},
        headers=auth_headers(user),
    )

    assert response.status_code == 200
    assert response.json()["venue_ids"] == [str(v1.id), str(v2.id)]

    mine = client.get("/selections/me", headers=auth_headers(user)).json()
    assert sorted(mine["venue_ids"]) == sorted([str(v1.id), str(v2.id)])


def test_selection_limit_enforced(client, make_user, make_venue, auth_headers):
    user = make_user("Ana")
    venues = [make_venue(f"V{i}") for i in range(4)]

    response = client.put(
        "/selections/me",
        json={"venue_ids": [str(v.id) for v in venues]},
        headers=auth_headers(user),
    )

    assert response.status_code == 400
    assert "At most 3" in response.json()["detail"]


def test_unknown_or_pending_venues_rejected(client, make_user, make_venue, auth_headers):
    user = make_user("Ana")
    pending = make_venue("Pending", status=VenueStatus.pending)

    for venue_id in (pending.id, uuid.uuid4()):
        response = client.put(
            "/selections/me",
            json={"venue_ids": [str(venue_id)]},
            headers=auth_headers(user),
        )
        assert response.status_code == 400


def test_clearing_selections(client, make_user, make_venue, select, auth_headers):
    user = make_user("Ana")
    select(user, make_venue())

    response = client.put("/selections/me", json={"venue_ids": []}, headers=auth_headers(user))

    assert response.json()["venue_ids"] == []
