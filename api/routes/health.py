from datetime import UTC, datetime

from fastapi import APIRouter

from api.schemas import HealthResponse

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Simple health check')
async def health_check() -> HealthResponse:
	return HealthResponse(status='ok', timestamp=datetime.now(UTC))
