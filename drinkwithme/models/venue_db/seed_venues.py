from sqlalchemy.orm import Session
from drinkwithme.core.database import SessionLocal
from drinkwithme.models.venue_db.venue_db import Venue
from drinkwithme.services.venue_status import VenueStatus


venue_data = [
    {
        "name": "The Golden Barrel",
        "description": "Upscale BYOB spot with gourmet fusion food in an industrial setting.",
        "is_byob": True,
        "address": "42 Galle Face Court, Colombo 03",
        "latitude": 6.9271,
        "longitude": 79.8612,
        "price_range": 3,
        "cuisine": "Fusion",
    },
    {
        "name": "Moonlight Terrace",
        "description": "Rooftop bar with city views and Mediterranean plates.",
        "is_byob": False,
        "address": "Level 25, WTC Tower, Colombo 01",
        "latitude": 6.9344,
        "longitude": 79.8428,
        "price_range": 4,
        "cuisine": "Mediterranean",
    },
    {
        "name": "Spice Route Kitchen",
        "description": "Sri Lankan food with a modern twist, BYOB friendly.",
        "is_byob": True,
        "address": "78 Duplication Road, Colombo 04",
        "latitude": 6.8947,
        "longitude": 79.8567,
        "price_range": 2,
        "cuisine": "Sri Lankan",
    },
    {
        "name": "Neon Nights Club & Lounge",
        "description": "Late night lounge with cocktails and a dance floor.",
        "is_byob": False,
        "address": "12 Marine Drive, Colombo 03",
        "latitude": 6.9189,
        "longitude": 79.8478,
        "price_range": 3,
        "cuisine": "Bar Food",
        "features": ["VIP Section", "Dance Floor", "Bottle Service", "Dress Code"],
    },
    {
        "name": "The Craft House",
        "description": "Brewery and gastropub with house-made craft beers.",
        "is_byob": False,
        "address": "34 Park Street, Colombo 02",
        "latitude": 6.9167,
        "longitude": 79.8636,
        "price_range": 2,
        "cuisine": "Pub Food",
    },
]


def seed_venues(db: Session) -> int:
    created = 0
    for data in venue_data:
        exists = db.query(Venue).filter(Venue.name == data["name"]).first()
        if not exists:
            db.add(Venue(**data, status=VenueStatus.approved.value))
            created += 1

    db.commit()
    return created


if __name__ == "__main__":
    session = SessionLocal()
    try:
        count = seed_venues(session)
    finally:
        session.close()
    print(f"✅ {count} venues seeded!")
