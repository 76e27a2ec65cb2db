from fastapi import APIRouter

from api.schemas import HealthResponse

router = APIRouter()

SERVICE_NAME = "document-compliance-api"
SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)
