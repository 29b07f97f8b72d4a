from fastapi import HTTPException, status
from typing import Optional, Dict, Any


class BaseAPIException(HTTPException):
    """API 오류 베이스

    하위 클래스는 ``http_status``/``code``/``default_message`` 만 정의하고,
    응답 본문은 공통 에러 envelope 로 만들어진다.
    """

    http_status: int = status.HTTP_400_BAD_REQUEST
    code: str = "ERROR_001"
    default_message: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = self.code
        self.message = message or self.default_message
        self.details = details or {}

        super().__init__(
            status_code=self.http_status,
            detail={
                "success": False,
                "error": {
                    "code": self.error_code,
                    "message": self.message,
                    "details": self.details,
                },
            },
        )

    def __str__(self) -> str:
        return self.message


class AuthenticationError(BaseAPIException):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_001"
    default_message = "Authentication failed"


class AuthorizationError(BaseAPIException):
    http_status = status.HTTP_403_FORBIDDEN
    code = "AUTH_002"
    default_message = "Access forbidden"


class ValidationError(BaseAPIException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "VALIDATION_001"
    default_message = "Validation failed"


class NotFoundError(BaseAPIException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND_001"
    default_message = "Resource not found"


class ConflictError(BaseAPIException):
    http_status = status.HTTP_409_CONFLICT
    code = "CONFLICT_001"
    default_message = "Resource conflict"


class InternalServerError(BaseAPIException):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_001"
    default_message = "Internal server error"


# 도메인 오류


class InsufficientBalanceError(BaseAPIException):
    """코인 잔액이 상품 가격보다 적음"""

    http_status = status.HTTP_400_BAD_REQUEST
    code = "BALANCE_001"
    default_message = "Insufficient coin balance"

    def __init__(self, coin: int, price: int):
        super().__init__(
            details={"coin": coin, "price": price, "shortfall": price - coin}
        )


class DuplicatePurchaseError(ConflictError):
    code = "PURCHASE_001"
    default_message = "Item already purchased"

    def __init__(self, item_id: int):
        super().__init__(
            f"Item {item_id} already purchased", details={"item_id": item_id}
        )


class ItemSoldError(ConflictError):
    """구매 기록이 있는 상품은 삭제 불가"""

    code = "ITEM_001"
    default_message = "Item has been purchased"

    def __init__(self, item_id: int):
        super().__init__(
            f"Item {item_id} has been purchased and cannot be removed",
            details={"item_id": item_id},
        )


class FileStorageError(Exception):
    """업로드 디렉터리 읽기/쓰기 실패 (HTTP 응답으로 직접 노출하지 않음)"""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"{file_name}: {reason}")
