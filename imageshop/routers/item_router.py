"""
상품 API 라우터

등록/수정/삭제는 관리자 전용이며 multipart 폼(itemName, price, description,
picture, preview)을 받는다. 구매는 회원 전용이다.
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from imageshop.core.auth_middleware import require_admin, require_member
from imageshop.core.exceptions import FileStorageError
from imageshop.core.policy import Action
from imageshop.deps import get_file_storage_service, get_item_service, get_user_item_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.file_storage_service import (
    FileStorageService,
    get_format_name,
    get_media_type,
)
from imageshop.services.item_service import ItemService, UploadedFile
from imageshop.services.user_item_service import UserItemService
import logging

router = APIRouter(prefix="/item", tags=["item"])
logger = logging.getLogger(__name__)


def _read_upload(upload: Optional[UploadFile]) -> Optional[UploadedFile]:
    if upload is None:
        return None
    data = upload.file.read()
    return UploadedFile(filename=upload.filename or "", data=data)


@router.get("/register", response_model=BaseResponse)
def register_form(
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    form = item_service.register_form(current_member)
    return BaseResponse(success=True, data=form.model_dump())


@router.post("/register", response_model=BaseResponse)
def register(
    item_name: str = Form(..., alias="itemName", min_length=1, max_length=50),
    price: int = Form(..., ge=0),
    description: Optional[str] = Form(None, max_length=250),
    picture: UploadFile = File(...),
    preview: UploadFile = File(...),
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    """상품 등록 - 원본 이미지와 미리보기 이미지를 모두 저장"""
    picture_file = _read_upload(picture)
    preview_file = _read_upload(preview)

    item = item_service.register(
        current_member,
        item_name=item_name,
        price=price,
        description=description,
        picture=picture_file,
        preview=preview_file,
    )
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "item": item.model_dump(mode="json")},
        meta={"redirect": "/item/list"},
    )


@router.get("/list", response_model=BaseResponse)
def list_items(
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    items = item_service.list()
    return BaseResponse(
        success=True,
        data={
            "items": [item.model_dump(mode="json") for item in items],
            "count": len(items),
        },
    )


@router.get("/read", response_model=BaseResponse)
def read(
    item_id: int = Query(..., alias="itemId"),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    item = item_service.read(item_id)
    return BaseResponse(success=True, data=item.model_dump(mode="json"))


@router.get("/modify", response_model=BaseResponse)
def modify_form(
    item_id: int = Query(..., alias="itemId"),
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    item = item_service.read_for_admin(current_member, item_id, Action.ITEM_MODIFY)
    return BaseResponse(success=True, data=item.model_dump(mode="json"))


@router.post("/modify", response_model=BaseResponse)
def modify(
    item_id: int = Form(..., alias="itemId"),
    item_name: str = Form(..., alias="itemName", min_length=1, max_length=50),
    price: int = Form(..., ge=0),
    description: Optional[str] = Form(None, max_length=250),
    picture: Optional[UploadFile] = File(None),
    preview: Optional[UploadFile] = File(None),
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    """상품 수정 - 파일을 보내지 않으면 기존 파일 유지"""
    picture_file = _read_upload(picture)
    preview_file = _read_upload(preview)

    item = item_service.modify(
        current_member,
        item_id,
        item_name=item_name,
        price=price,
        description=description,
        picture=picture_file,
        preview=preview_file,
    )
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "item": item.model_dump(mode="json")},
        meta={"redirect": "/item/list"},
    )


@router.get("/remove", response_model=BaseResponse)
def remove_form(
    item_id: int = Query(..., alias="itemId"),
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    item = item_service.read_for_admin(current_member, item_id, Action.ITEM_REMOVE)
    return BaseResponse(success=True, data=item.model_dump(mode="json"))


@router.post("/remove", response_model=BaseResponse)
def remove(
    item_id: int = Query(..., alias="itemId"),
    current_member: MemberSchema = Depends(require_admin),
    item_service: ItemService = Depends(get_item_service),
) -> Any:
    item_service.remove(current_member, item_id)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "item_id": item_id},
        meta={"redirect": "/item/list"},
    )


@router.post("/buy", response_model=BaseResponse)
def buy(
    item_id: int = Query(..., alias="itemId"),
    current_member: MemberSchema = Depends(require_member),
    item_service: ItemService = Depends(get_item_service),
    user_item_service: UserItemService = Depends(get_user_item_service),
) -> Any:
    """상품 구매 - 코인 차감 후 구매 완료 페이지로 안내"""
    item = item_service.read(item_id)
    result = user_item_service.register(current_member, item)
    return BaseResponse(
        success=True,
        data=result.model_dump(),
        meta={"redirect": "/item/success"},
    )


@router.get("/success", response_model=BaseResponse)
def success() -> Any:
    return BaseResponse(success=True, data={"page": "item/success"})


@router.get("/display")
def display(
    item_id: int = Query(..., alias="itemId"),
    item_service: ItemService = Depends(get_item_service),
    file_storage: FileStorageService = Depends(get_file_storage_service),
) -> Response:
    """미리보기 이미지 - 알 수 없는 확장자는 Content-Type 없이 반환"""
    file_name = item_service.get_preview(item_id)

    try:
        data = file_storage.load_file(file_name)
    except FileStorageError as e:
        logger.error(f"Display failed for item {item_id}: {e.reason}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    media_type = get_media_type(get_format_name(file_name))
    return Response(content=data, media_type=media_type)
