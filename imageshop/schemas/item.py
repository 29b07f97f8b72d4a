from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class Item(BaseModel):
    item_id: int
    item_name: str
    price: int
    description: Optional[str] = None
    picture_url: Optional[str] = None
    preview_url: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ItemForm(BaseModel):
    """등록/수정 화면에 내려주는 빈 폼"""

    item_id: Optional[int] = None
    item_name: str = ""
    price: int = 0
    description: str = ""


class PurchaseResult(BaseModel):
    user_item_no: int
    item_id: int
    price: int
    coin_after: int
    message: str = Field(..., description="구매 완료 메시지")
