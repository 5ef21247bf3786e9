from drinkwithme.services.venue_status import VenueStatus

BOOKING = {"date": "2026-11-06", "time": "19:30:00", "party_size": 4, "notes": "Window table"}


def test_reserve_and_owner_lists(client, make_user, make_venue, auth_headers):
    owner, guest = make_user("Owner"), make_user("Guest")
    venue = make_venue("Booked", owner_id=owner.id)

    created = client.post(f"/venues/{venue.id}/reservations", json=BOOKING, headers=auth_headers(guest))
    client.post(
        f"/venues/{venue.id}/reservations",
        json={"date": "2026-11-05", "time": "20:00:00"},
        headers=auth_headers(guest),
    )

    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "pending"
    assert body["party_size"] == 4
    assert body["user_id"] == str(guest.id)

    listed = client.get(f"/venues/{venue.id}/reservations", headers=auth_headers(owner))
    assert listed.status_code == 200
    assert [r["date"] for r in listed.json()] == ["2026-11-05", "2026-11-06"]
    assert listed.json()[0]["party_size"] == 2


def test_only_owner_lists_reservations(client, make_user, make_venue, auth_headers):
    owner, guest = make_user("Owner"), make_user("Guest")
    venue = make_venue("Private", owner_id=owner.id)

    assert client.get(f"/venues/{venue.id}/reservations", headers=auth_headers(guest)).status_code == 403


def test_reservation_needs_approved_venue_and_valid_party(client, make_user, make_venue, auth_headers):
    guest = make_user("Guest")
    pending = make_venue("Soon", status=VenueStatus.pending)
    open_venue = make_venue("Open")

    assert client.post(f"/venues/{pending.id}/reservations", json=BOOKING, headers=auth_headers(guest)).status_code == 404
    too_many = dict(BOOKING, party_size=50)
    assert client.post(f"/venues/{open_venue.id}/reservations", json=too_many, headers=auth_headers(guest)).status_code == 422
