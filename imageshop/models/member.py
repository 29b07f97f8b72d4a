from datetime import datetime
from enum import Enum
from typing import Optional, Union

from sqlalchemy import BigInteger, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from imageshop.models.base import BaseModel, BigIntPK


class MemberRole(str, Enum):
    """회원 역할 정의"""

    MEMBER = "MEMBER"  # 일반 회원
    ADMIN = "ADMIN"  # 관리자

    @classmethod
    def get_hierarchy_level(cls, role: Union[str, "MemberRole"]) -> int:
        """역할의 계층 레벨을 반환 (숫자가 높을수록 높은 권한)"""
        if isinstance(role, cls):
            role = role.value

        hierarchy = {
            cls.MEMBER.value: 1,
            cls.ADMIN.value: 2,
        }
        return hierarchy.get(str(role), 0)

    @classmethod
    def has_permission(
        cls, member_role: Union[str, "MemberRole"], required_role: Union[str, "MemberRole"]
    ) -> bool:
        """회원 역할이 요구되는 역할 이상인지 확인"""
        return cls.get_hierarchy_level(member_role) >= cls.get_hierarchy_level(
            required_role
        )

    @classmethod
    def is_admin(cls, role: Union[str, "MemberRole"]) -> bool:
        if isinstance(role, cls):
            role = role.value
        return role == cls.ADMIN.value


class Member(BaseModel):
    __tablename__ = "members"
    __table_args__ = (Index("idx_members_user_id", "user_id"),)

    user_no: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    user_pw: Mapped[str] = mapped_column(Text, nullable=False)  # bcrypt hash
    user_name: Mapped[str] = mapped_column(String(100), nullable=False)
    job: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    coin: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), default=MemberRole.MEMBER.value, nullable=False
    )
    last_login_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    last_login_ip: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self):
        return f"<Member(user_no={self.user_no}, user_id={self.user_id}, role={self.role})>"

    @property
    def is_admin(self) -> bool:
        return MemberRole.is_admin(str(self.role))
