from typing import Optional, List
from sqlalchemy.orm import Session

from imageshop.models.item import Item as ItemModel
from imageshop.models.user_item import UserItem as UserItemModel
from imageshop.schemas.user_item import UserItem as UserItemSchema, UserItemDetail
from imageshop.repositories.base import BaseRepository


class UserItemRepository(BaseRepository[UserItemModel, UserItemSchema]):
    """구매 기록 리포지토리 - 생성 후 수정하지 않음"""

    def __init__(self, db: Session):
        super().__init__(UserItemModel, UserItemSchema, db)

    def _to_detail(self, user_item: UserItemModel, item: Optional[ItemModel]) -> UserItemDetail:
        return UserItemDetail(
            user_item_no=user_item.user_item_no,
            user_no=user_item.user_no,
            item_id=user_item.item_id,
            created_at=user_item.created_at,
            item_name=item.item_name if item else None,
            price=item.price if item else None,
            picture_url=item.picture_url if item else None,
            preview_url=item.preview_url if item else None,
        )

    def _detail_query(self):
        return self.db.query(self.model_class, ItemModel).outerjoin(
            ItemModel, ItemModel.item_id == self.model_class.item_id
        )

    def record_purchase(
        self, user_no: int, item_id: int, commit: bool = True
    ) -> Optional[UserItemSchema]:
        return self.create(commit=commit, user_no=user_no, item_id=item_id)

    def has_purchased(self, user_no: int, item_id: int) -> bool:
        return self.exists(filters={"user_no": user_no, "item_id": item_id})

    def is_item_sold(self, item_id: int) -> bool:
        return self.exists(filters={"item_id": item_id})

    def list_by_member(self, user_no: int) -> List[UserItemDetail]:
        """회원의 구매 목록 + 상품 정보 (최신 구매순)"""
        self._ensure_clean_session()
        rows = (
            self._detail_query()
            .filter(self.model_class.user_no == user_no)
            .order_by(self.model_class.user_item_no.desc())
            .all()
        )
        return [self._to_detail(user_item, item) for user_item, item in rows]

    def get_detail(self, user_item_no: int) -> Optional[UserItemDetail]:
        self._ensure_clean_session()
        row = (
            self._detail_query()
            .filter(self.model_class.user_item_no == user_item_no)
            .first()
        )
        if row is None:
            return None
        user_item, item = row
        return self._to_detail(user_item, item)
