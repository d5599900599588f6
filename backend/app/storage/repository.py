from __future__ import annotations

import copy
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from app.models.domain import Hotel, seed_hotels

logger = logging.getLogger(__name__)


class InMemoryRepository:
    """Process-local hotel store.

    Ids come from a counter that only moves forward, so an id freed by a
    delete is never handed out again. Every method holds the lock because
    FastAPI runs sync endpoints on a thread pool. Callers get copies, never
    the stored objects.
    """

    def __init__(self) -> None:
        self.hotels: List[Hotel] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "InMemoryRepository":
        repository = cls()
        repository.seed(seed_hotels())
        return repository

    def seed(self, hotels: Iterable[Hotel]) -> None:
        with self._lock:
            for hotel in hotels:
                self.hotels.append(copy.deepcopy(hotel))
                self._next_id = max(self._next_id, hotel.id + 1)
            logger.info("Seeded repository with %d hotels", len(self.hotels))

    def add(self, hotel: Hotel) -> Hotel:
        """Store ``hotel`` under the next id; its own ``id`` is ignored."""
        with self._lock:
            stored = replace(copy.deepcopy(hotel), id=self._next_id)
            self._next_id += 1
            self.hotels.append(stored)
            return copy.deepcopy(stored)

    def get(self, hotel_id: int) -> Optional[Hotel]:
        with self._lock:
            hotel = self._find(hotel_id)
            return copy.deepcopy(hotel) if hotel else None

    def list_hotels(self) -> List[Hotel]:
        with self._lock:
            return copy.deepcopy(self.hotels)

    def update(self, hotel_id: int, changes: Dict[str, Any]) -> Optional[Hotel]:
        with self._lock:
            hotel = self._find(hotel_id)
            if hotel is None:
                return None
            for key, value in changes.items():
                setattr(hotel, key, copy.deepcopy(value))
            return copy.deepcopy(hotel)

    def delete(self, hotel_id: int) -> Optional[Hotel]:
        with self._lock:
            for index, hotel in enumerate(self.hotels):
                if hotel.id == hotel_id:
                    return self.hotels.pop(index)
            return None

    def count(self) -> int:
        with self._lock:
            return len(self.hotels)

    def _find(self, hotel_id: int) -> Optional[Hotel]:
        for hotel in self.hotels:
            if hotel.id == hotel_id:
                return hotel
        return None
