from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from imageshop.models.base import BaseModel, BigIntPK


class Board(BaseModel):
    """회원 게시글 - created_at / updated_at 이 등록일 / 수정일"""

    __tablename__ = "boards"

    board_no: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    writer: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    def __repr__(self):
        return f"<Board(board_no={self.board_no}, writer={self.writer})>"
