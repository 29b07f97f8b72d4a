from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """서비스 상태 - DB 연결 확인 결과 포함"""

    status: str = "healthy"
    app_name: str = ""
    environment: str = ""
    database: str = "unknown"
    upload_path_writable: bool = False
