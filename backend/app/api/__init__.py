from fastapi import Depends, HTTPException
from starlette.requests import Request

from app.services.hotel_service import HotelService
from app.storage.repository import InMemoryRepository


def get_repository(request: Request) -> InMemoryRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Repository not initialized")
    return repository


def get_hotel_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> HotelService:
    return HotelService(repository=repository)
