import os

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from imageshop.database.session import get_db
from imageshop.deps import get_file_storage_service
from imageshop.schemas.health import HealthCheckResponse
from imageshop.services.file_storage_service import FileStorageService
from imageshop.config import settings
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    db: Session = Depends(get_db),
    file_storage: FileStorageService = Depends(get_file_storage_service),
) -> HealthCheckResponse:
    """Health check endpoint."""
    response = HealthCheckResponse(
        app_name=settings.APP_NAME, environment=settings.ENVIRONMENT
    )

    try:
        db.execute(text("SELECT 1"))
        response.database = "connected"
    except Exception as e:
        logger.error(f"Health check database error: {str(e)}")
        response.status = "degraded"
        response.database = "disconnected"

    upload_path = file_storage.upload_path
    # 아직 업로드가 없으면 상위 디렉터리 기준
    probe = upload_path if upload_path.exists() else upload_path.parent
    response.upload_path_writable = os.access(probe, os.W_OK)
    return response
