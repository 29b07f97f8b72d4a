from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import PrimaryKeyConstraint

from imageshop.models.base import BaseModel


class CodeGroup(BaseModel):
    """공통 코드 그룹 (예: A01 = 직업)"""

    __tablename__ = "code_groups"

    group_code: Mapped[str] = mapped_column(String(3), primary_key=True)
    group_name: Mapped[str] = mapped_column(String(30), nullable=False)
    use_yn: Mapped[str] = mapped_column(String(1), default="Y", nullable=False)


class CodeDetail(BaseModel):
    """공통 코드 상세 - 선택 목록의 한 항목"""

    __tablename__ = "code_details"
    __table_args__ = (
        PrimaryKeyConstraint("group_code", "code_value", name="pk_code_details"),
    )

    group_code: Mapped[str] = mapped_column(
        String(3), ForeignKey("code_groups.group_code", ondelete="CASCADE"), nullable=False
    )
    code_value: Mapped[str] = mapped_column(String(3), nullable=False)
    code_name: Mapped[str] = mapped_column(String(30), nullable=False)
    sort_seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    use_yn: Mapped[str] = mapped_column(String(1), default="Y", nullable=False)
