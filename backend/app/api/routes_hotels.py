from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api import get_hotel_service
from app.models.schemas import ErrorResponse, HotelCreate, HotelSchema, HotelUpdate
from app.services.hotel_service import HotelService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/hotels", response_model=List[HotelSchema])
def list_hotels(service: HotelService = Depends(get_hotel_service)) -> List[HotelSchema]:
    """All hotels, most recently created first."""
    return service.list_hotels()


# Registered ahead of /hotels/{hotel_id}, which would otherwise capture "search".
@router.get("/hotels/search", response_model=List[HotelSchema])
def search_hotels(
    location: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    service: HotelService = Depends(get_hotel_service),
) -> List[HotelSchema]:
    return service.search_hotels(
        location=location, min_price=min_price, max_price=max_price
    )


@router.get("/hotels/{hotel_id}", response_model=HotelSchema, responses=NOT_FOUND)
def get_hotel(
    hotel_id: str, service: HotelService = Depends(get_hotel_service)
) -> HotelSchema:
    return service.get_hotel(hotel_id)


@router.post(
    "/hotels",
    response_model=HotelSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_hotel(
    payload: Optional[HotelCreate] = None,
    service: HotelService = Depends(get_hotel_service),
) -> HotelSchema:
    return service.create_hotel(payload)


@router.put("/hotels/{hotel_id}", response_model=HotelSchema, responses=NOT_FOUND)
def update_hotel(
    hotel_id: str,
    body: Any = Body(None),
    service: HotelService = Depends(get_hotel_service),
) -> HotelSchema:
    # Any JSON is accepted; a body that is not an object changes nothing.
    payload = HotelUpdate.model_validate(body) if isinstance(body, dict) else None
    return service.update_hotel(hotel_id, payload)


@router.delete("/hotels/{hotel_id}", response_model=HotelSchema, responses=NOT_FOUND)
def delete_hotel(
    hotel_id: str, service: HotelService = Depends(get_hotel_service)
) -> HotelSchema:
    return service.delete_hotel(hotel_id)
