from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from app.models.domain import Hotel

Number = Union[int, float]


class HotelCreate(BaseModel):
    # Required fields are enforced by HotelService.create_hotel.
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Number] = None
    amenities: Optional[List[str]] = None
    rating: Optional[Number] = None
    available_rooms: Optional[int] = None


class HotelUpdate(BaseModel):
    # Values are stored as sent; only falsy ones are skipped.
    name: Any = None
    location: Any = None
    description: Any = None
    price: Any = None
    amenities: Any = None
    rating: Any = None
    available_rooms: Any = None


class HotelSchema(BaseModel):
    id: int
    # Fields below may hold whatever an update stored.
    name: Any
    location: Any
    description: Any
    price: Any
    amenities: Any
    rating: Any = None
    available_rooms: Any = None
    created_at: datetime

    @classmethod
    def from_domain(cls, obj: Hotel) -> "HotelSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            location=obj.location,
            description=obj.description,
            price=obj.price,
            amenities=obj.amenities,
            rating=obj.rating,
            available_rooms=obj.available_rooms,
            created_at=obj.created_at,
        )


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    hotels: int
