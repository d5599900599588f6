from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Union


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Hotel:
    id: int
    name: str
    location: str
    price: Union[int, float]
    amenities: List[str]
    description: str = ""
    rating: Optional[float] = None
    available_rooms: Optional[int] = None
    created_at: datetime = field(default_factory=utcnow)


SEED_HOTELS = (
    dict(
        id=1,
        name="Hotel Sunshine",
        location="Istanbul",
        description="A comfortable hotel in the heart of Istanbul.",
        price=100,
        amenities=["WiFi", "Breakfast", "Gym"],
        rating=4.5,
        available_rooms=10,
    ),
    dict(
        id=2,
        name="Seaside Resort",
        location="Antalya",
        description="Enjoy a relaxing seaside experience.",
        price=150,
        amenities=["Pool", "Beach Access", "Spa"],
        rating=4.7,
        available_rooms=5,
    ),
)


def seed_hotels() -> List[Hotel]:
    """Fresh copies of the startup records, stamped with the current time."""
    return [Hotel(**{**data, "amenities": list(data["amenities"])}) for data in SEED_HOTELS]
