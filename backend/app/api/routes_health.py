from fastapi import APIRouter, Depends

from app.api import get_repository
from app.models.schemas import HealthResponse
from app.storage.repository import InMemoryRepository

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def healthcheck(
    repository: InMemoryRepository = Depends(get_repository),
) -> HealthResponse:
    return HealthResponse(status="ok", hotels=repository.count())
