from typing import Any
from urllib.parse import quote
from fastapi import APIRouter, Depends, Query, Response, status

from imageshop.core.auth_middleware import require_member
from imageshop.core.exceptions import FileStorageError, NotFoundError
from imageshop.deps import get_file_storage_service, get_user_item_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.file_storage_service import (
    FileStorageService,
    get_format_name,
    get_media_type,
)
from imageshop.services.user_item_service import UserItemService
import logging

router = APIRouter(prefix="/useritem", tags=["useritem"])
logger = logging.getLogger(__name__)


@router.get("/list", response_model=BaseResponse)
def list_user_items(
    current_member: MemberSchema = Depends(require_member),
    user_item_service: UserItemService = Depends(get_user_item_service),
) -> Any:
    """내가 구매한 상품 목록"""
    user_items = user_item_service.list(current_member)
    return BaseResponse(
        success=True,
        data={
            "user_items": [user_item.model_dump(mode="json") for user_item in user_items],
            "count": len(user_items),
        },
    )


@router.get("/read", response_model=BaseResponse)
def read(
    user_item_no: int = Query(..., alias="userItemNo"),
    current_member: MemberSchema = Depends(require_member),
    user_item_service: UserItemService = Depends(get_user_item_service),
) -> Any:
    user_item = user_item_service.read(current_member, user_item_no)
    return BaseResponse(success=True, data=user_item.model_dump(mode="json"))


@router.get("/download")
def download(
    user_item_no: int = Query(..., alias="userItemNo"),
    current_member: MemberSchema = Depends(require_member),
    user_item_service: UserItemService = Depends(get_user_item_service),
    file_storage: FileStorageService = Depends(get_file_storage_service),
) -> Response:
    """구매한 원본 이미지 다운로드"""
    user_item = user_item_service.read(current_member, user_item_no)
    if not user_item.picture_url:
        raise NotFoundError(f"Picture not found for user item: {user_item_no}")

    try:
        data = file_storage.load_file(user_item.picture_url)
    except FileStorageError as e:
        logger.error(f"Download failed for user item {user_item_no}: {e.reason}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    # 저장 시 붙인 uuid 접두어 제거
    original_name = user_item.picture_url.split("_", 1)[-1]
    headers = {
        "Content-Disposition": f"attachment; filename*=UTF-8''{quote(original_name)}"
    }
    media_type = get_media_type(get_format_name(original_name)) or "application/octet-stream"
    return Response(content=data, media_type=media_type, headers=headers)
