from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserItem(BaseModel):
    user_item_no: int
    user_no: int
    item_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserItemDetail(UserItem):
    """구매 기록 + 상품 정보"""

    item_name: Optional[str] = None
    price: Optional[int] = None
    picture_url: Optional[str] = None
    preview_url: Optional[str] = None
