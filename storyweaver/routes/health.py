"""
Health Check Routes
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from storyweaver.dependencies import get_completion_provider
from storyweaver.models import HealthResponse
from storyweaver.services.completion_service import CompletionProvider

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(provider: CompletionProvider = Depends(get_completion_provider)):
    """Health check endpoint"""
    services_status = {}

    try:
        await provider.check_connection()
        services_status["completion_service"] = "healthy"
    except Exception as e:
        services_status["completion_service"] = f"unhealthy: {str(e)}"

    overall_status = "healthy" if all(status == "healthy" for status in services_status.values()) else "unhealthy"

    return HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        services=services_status
    )
