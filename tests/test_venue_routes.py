from drinkwithme.core.security import make_user_admin
from drinkwithme.models.venue_db.seed_venues import seed_venues, venue_data
from drinkwithme.services.venue_status import VenueStatus

NEW_VENUE = {
    "name": "Arrack Attack",
    "address": "9 Beach Road, Negombo",
    "latitude": 7.2,
    "longitude": 79.84,
    "is_byob": True,
    "cuisine": "Seafood",
}


def test_list_only_approved_venues_by_rating(client, make_venue):
    make_venue("Low", rating=3.9)
    make_venue("High", rating=4.8)
    make_venue("Hidden", status=VenueStatus.pending, rating=5.0)

    response = client.get("/venues/")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [v["name"] for v in body["items"]] == ["High", "Low"]


def test_list_venues_filters(client, make_venue):
    make_venue("Byob Colombo", is_byob=True, rating=4.5, address="1 Galle Road, Colombo")
    make_venue("Bar Kandy", is_byob=False, rating=4.9, address="2 Lake Road, Kandy")

    byob = client.get("/venues/", params={"is_byob": True}).json()
    kandy = client.get("/venues/", params={"city": "kandy"}).json()
    rated = client.get("/venues/", params={"min_rating": 4.8}).json()

    assert [v["name"] for v in byob["items"]] == ["Byob Colombo"]
    assert [v["name"] for v in kandy["items"]] == ["Bar Kandy"]
    assert [v["name"] for v in rated["items"]] == ["Bar Kandy"]


def test_search_by_name_or_cuisine(client, make_venue):
    make_venue("Moonlight Terrace", cuisine="Mediterranean")
    make_venue("Spice Route", cuisine="Sri Lankan")

    assert [v["name"] for v in client.get("/venues/search", params={"q": "moon"}).json()] == ["Moonlight Terrace"]
    assert [v["name"] for v in client.get("/venues/search", params={"q": "lankan"}).json()] == ["Spice Route"]


def test_get_missing_venue(client):
    assert client.get("/venues/00000000-0000-0000-0000-000000000000").status_code == 404


def test_owner_submission_is_pending_until_approved(client, db, make_user, auth_headers):
    owner, admin = make_user("Owner"), make_user("Admin")
    make_user_admin(db, admin.id)

    created = client.post("/venues/", json=NEW_VENUE, headers=auth_headers(owner))
    assert created.status_code == 201
    venue = created.json()
    assert venue["status"] == "pending"
    assert venue["owner_id"] == str(owner.id)
    assert client.get("/venues/").json()["total"] == 0

    mine = client.get("/venues/mine", headers=auth_headers(owner)).json()
    assert [v["id"] for v in mine] == [venue["id"]]

    pending = client.get("/admin/venues", headers=auth_headers(admin)).json()
    assert [v["id"] for v in pending] == [venue["id"]]

    approved = client.put(f"/admin/venues/{venue['id']}/approve", headers=auth_headers(admin))
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
    assert approved.json()["approved_at"] is not None
    assert client.get("/venues/").json()["total"] == 1


def test_admin_can_reject(client, db, make_user, make_venue, auth_headers):
    admin = make_user("Admin", is_admin=True)
    venue = make_venue("Dodgy", status=VenueStatus.pending)

    response = client.put(f"/admin/venues/{venue.id}/reject", headers=auth_headers(admin))

    assert response.json()["status"] == "rejected"
    rejected = client.get("/admin/venues", params={"status": "rejected"}, headers=auth_headers(admin)).json()
    assert [v["name"] for v in rejected] == ["Dodgy"]


def test_admin_routes_require_admin(client, make_user, make_venue, auth_headers):
    user = make_user("Plain")
    venue = make_venue("Any", status=VenueStatus.pending)

    assert client.get("/admin/venues", headers=auth_headers(user)).status_code == 403
    assert client.put(f"/admin/venues/{venue.id}/approve", headers=auth_headers(user)).status_code == 403


def test_seed_venues_is_idempotent(db):
    assert seed_venues(db) == len(venue_data)
    assert seed_venues(db) == 0


def test_owner_can_update_own_venue(client, make_user, make_venue, auth_headers):
    owner = make_user("Owner")
    venue = make_venue("Old Name", owner_id=owner.id, cuisine="Fusion")

    response = client.put(f"/venues/{venue.id}", json={"name": "New Name", "price_range": 2}, headers=auth_headers(owner))

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "New Name"
    assert body["price_range"] == 2
    assert body["cuisine"] == "Fusion"


def test_only_owner_can_update_venue(client, make_user, make_venue, auth_headers):
    owner, stranger = make_user("Owner"), make_user("Stranger")
    venue = make_venue("Mine", owner_id=owner.id)

    forbidden = client.put(f"/venues/{venue.id}", json={"name": "Theirs"}, headers=auth_headers(stranger))
    missing = client.put(
        "/venues/00000000-0000-0000-0000-000000000000", json={"name": "Nowhere"}, headers=auth_headers(owner)
    )

    assert forbidden.status_code == 403
    assert missing.status_code == 404
    assert client.get(f"/venues/{venue.id}").json()["name"] == "Mine"
