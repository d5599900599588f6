import logging
import math
import re
from typing import List, Optional

from app.core.errors import HotelNotFoundError, MissingFieldsError
from app.models.domain import Hotel, utcnow
from app.models.schemas import HotelCreate, HotelSchema, HotelUpdate
from app.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "location", "price", "amenities")
UPDATABLE_FIELDS = (
    "name",
    "location",
    "description",
    "price",
    "amenities",
    "rating",
    "available_rooms",
)

_LEADING_INT = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")
_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_hotel_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment, ``None`` when there is none.

    A ``0x`` prefix reads the digits as hexadecimal.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    sign, hex_digits, digits = match.groups()
    value = int(hex_digits, 16) if hex_digits else int(digits)
    return -value if sign == "-" else value


def parse_price(raw: str) -> float:
    """Read the leading number of a query value; NaN when it has none.

    ``Infinity`` with an optional sign is read as an infinite bound.
    """
    match = _LEADING_FLOAT.match(raw)
    return float(match.group(1)) if match else math.nan


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class HotelService:
    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def list_hotels(self) -> List[HotelSchema]:
        hotels = sorted(
            self.repository.list_hotels(),
            key=lambda h: (h.created_at, h.id),
            reverse=True,
        )
        return [HotelSchema.from_domain(h) for h in hotels]

    def get_hotel(self, raw_id: str) -> HotelSchema:
        hotel_id = parse_hotel_id(raw_id)
        hotel = self.repository.get(hotel_id) if hotel_id is not None else None
        if not hotel:
            logger.debug("Hotel %r not found", raw_id)
            raise HotelNotFoundError()
        return HotelSchema.from_domain(hotel)

    def create_hotel(self, payload: Optional[HotelCreate]) -> HotelSchema:
        payload = payload or HotelCreate()
        if not all(getattr(payload, name) for name in REQUIRED_FIELDS):
            raise MissingFieldsError()
        hotel = self.repository.add(
            Hotel(
                id=0,
                name=payload.name,
                location=payload.location,
                description=payload.description or "",
                price=payload.price,
                amenities=payload.amenities,
                rating=payload.rating or None,
                available_rooms=payload.available_rooms or None,
                created_at=utcnow(),
            )
        )
        logger.info("Created hotel %d (%s)", hotel.id, hotel.name)
        return HotelSchema.from_domain(hotel)

    def update_hotel(self, raw_id: str, payload: Optional[HotelUpdate]) -> HotelSchema:
        sent = payload.model_dump(exclude_unset=True) if payload else {}
        # Falsy values (0, "", []) are skipped, same as absent ones.
        changes = {name: sent[name] for name in UPDATABLE_FIELDS if sent.get(name)}
        hotel_id = parse_hotel_id(raw_id)
        hotel = self.repository.update(hotel_id, changes) if hotel_id is not None else None
        if not hotel:
            logger.debug("Hotel %r not found", raw_id)
            raise HotelNotFoundError()
        logger.info("Updated hotel %d fields=%s", hotel.id, sorted(changes))
        return HotelSchema.from_domain(hotel)

    def delete_hotel(self, raw_id: str) -> HotelSchema:
        hotel_id = parse_hotel_id(raw_id)
        hotel = self.repository.delete(hotel_id) if hotel_id is not None else None
        if not hotel:
            logger.debug("Hotel %r not found", raw_id)
            raise HotelNotFoundError()
        logger.info("Deleted hotel %d (%s)", hotel.id, hotel.name)
        return HotelSchema.from_domain(hotel)

    def search_hotels(
        self,
        location: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
    ) -> List[HotelSchema]:
        result: List[Hotel] = self.repository.list_hotels()
        if location:
            needle = location.lower()
            result = [
                h
                for h in result
                if isinstance(h.location, str) and needle in h.location.lower()
            ]
        if min_price:
            low = parse_price(min_price)
            result = [h for h in result if _is_number(h.price) and h.price >= low]
        if max_price:
            high = parse_price(max_price)
            result = [h for h in result if _is_number(h.price) and h.price <= high]
        return [HotelSchema.from_domain(h) for h in result]
