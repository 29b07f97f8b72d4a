from typing import Optional, List
from sqlalchemy.orm import Session

from imageshop.models.item import Item as ItemModel
from imageshop.schemas.item import Item as ItemSchema
from imageshop.repositories.base import BaseRepository


class ItemRepository(BaseRepository[ItemModel, ItemSchema]):
    """상품 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(ItemModel, ItemSchema, db)

    def list_items(self) -> List[ItemSchema]:
        """전체 상품 (최신 등록순)"""
        return self.find_all(order_by="item_id", descending=True)

    def get_preview(self, item_id: int) -> Optional[str]:
        """미리보기 파일명만 조회"""
        return (
            self.db.query(self.model_class.preview_url)
            .filter(self.model_class.item_id == item_id)
            .scalar()
        )
