from typing import List, Optional
from sqlalchemy.orm import Session

from imageshop.config import Settings
from imageshop.core.exceptions import FileStorageError, ItemSoldError, NotFoundError, ValidationError
from imageshop.core.policy import Action, authorize
from imageshop.repositories.item_repository import ItemRepository
from imageshop.repositories.user_item_repository import UserItemRepository
from imageshop.schemas.item import Item as ItemSchema, ItemForm
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.file_storage_service import FileStorageService
import logging

logger = logging.getLogger(__name__)


class UploadedFile:
    """라우터에서 읽어 온 업로드 파일 (이름 + 내용)"""

    def __init__(self, filename: str, data: bytes):
        self.filename = filename
        self.data = data

    @property
    def is_empty(self) -> bool:
        return not self.filename or len(self.data) == 0


class ItemService:
    """상품 관리 - 등록/수정/삭제는 관리자 전용"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.item_repo = ItemRepository(db)
        self.user_item_repo = UserItemRepository(db)
        self.file_storage = FileStorageService(settings)
        self.settings = settings

    def register_form(self, actor: MemberSchema) -> ItemForm:
        authorize(actor, Action.ITEM_CREATE)
        return ItemForm()

    def register(
        self,
        actor: MemberSchema,
        item_name: str,
        price: int,
        description: Optional[str],
        picture: UploadedFile,
        preview: UploadedFile,
    ) -> ItemSchema:
        """파일 두 개를 저장한 뒤 상품 등록"""
        authorize(actor, Action.ITEM_CREATE)
        if picture.is_empty or preview.is_empty:
            raise ValidationError("Both picture and preview files are required")

        stored: List[str] = []
        try:
            stored.append(self.file_storage.upload_file(picture.filename, picture.data))
            stored.append(self.file_storage.upload_file(preview.filename, preview.data))
            item = self.item_repo.create(
                item_name=item_name,
                price=price,
                description=description,
                picture_url=stored[0],
                preview_url=stored[1],
            )
        except Exception:
            self._discard_uploads(stored)
            raise
        if not item:
            raise ValidationError("Failed to register item")
        logger.info(f"Item {item.item_id} registered by {actor.user_id}")
        return item

    def list(self) -> List[ItemSchema]:
        return self.item_repo.list_items()

    def read(self, item_id: int) -> ItemSchema:
        item = self.item_repo.get_by_id(item_id)
        if not item:
            raise NotFoundError(f"Item not found: {item_id}")
        return item

    def read_for_admin(self, actor: MemberSchema, item_id: int, action: Action) -> ItemSchema:
        """수정/삭제 화면용 조회"""
        authorize(actor, action)
        return self.read(item_id)

    def modify(
        self,
        actor: MemberSchema,
        item_id: int,
        item_name: str,
        price: int,
        description: Optional[str],
        picture: Optional[UploadedFile] = None,
        preview: Optional[UploadedFile] = None,
    ) -> ItemSchema:
        """상품 수정 - 비어 있는 파일은 기존 파일을 유지"""
        authorize(actor, Action.ITEM_MODIFY)
        self.read(item_id)

        update_fields = {
            "item_name": item_name,
            "price": price,
            "description": description,
        }
        stored: List[str] = []
        try:
            if picture is not None and not picture.is_empty:
                update_fields["picture_url"] = self.file_storage.upload_file(
                    picture.filename, picture.data
                )
                stored.append(update_fields["picture_url"])
            if preview is not None and not preview.is_empty:
                update_fields["preview_url"] = self.file_storage.upload_file(
                    preview.filename, preview.data
                )
                stored.append(update_fields["preview_url"])
            updated = self.item_repo.update(item_id, **update_fields)
        except Exception:
            self._discard_uploads(stored)
            raise
        if not updated:
            raise NotFoundError(f"Item not found: {item_id}")
        logger.info(f"Item {item_id} modified by {actor.user_id}")
        return updated

    def remove(self, actor: MemberSchema, item_id: int) -> None:
        """상품 삭제 - 이미 판매된 상품은 구매 기록 보존을 위해 거부"""
        authorize(actor, Action.ITEM_REMOVE)
        self.read(item_id)
        if self.user_item_repo.is_item_sold(item_id):
            raise ItemSoldError(item_id)

        self.item_repo.delete(item_id)
        logger.info(f"Item {item_id} removed by {actor.user_id}")

    def _discard_uploads(self, stored_names: List[str]) -> None:
        """DB 반영에 실패한 업로드 파일 정리"""
        for name in stored_names:
            try:
                self.file_storage.delete_file(name)
            except FileStorageError as e:
                logger.warning(f"Failed to discard upload {name}: {e.reason}")

    def get_preview(self, item_id: int) -> str:
        """미리보기 파일명"""
        preview = self.item_repo.get_preview(item_id)
        if not preview:
            raise NotFoundError(f"Preview not found for item: {item_id}")
        return preview
