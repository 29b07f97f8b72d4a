from typing import Optional

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from imageshop.models.base import BaseModel, BigIntPK


class Item(BaseModel):
    """판매 이미지 상품

    picture_url / preview_url 에는 업로드 디렉터리에 저장된 파일명
    (``<uuid>_<원본파일명>``)이 들어간다.
    """

    __tablename__ = "items"

    item_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    item_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    picture_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    preview_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self):
        return f"<Item(item_id={self.item_id}, item_name={self.item_name}, price={self.price})>"
