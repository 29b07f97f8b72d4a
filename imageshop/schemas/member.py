from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from imageshop.models.member import MemberRole


class Member(BaseModel):
    user_no: int
    user_id: str
    user_name: str
    job: Optional[str] = None
    coin: int = 0
    enabled: bool = True
    role: MemberRole = MemberRole.MEMBER
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    last_login_ip: Optional[str] = None

    class Config:
        from_attributes = True

    @property
    def is_admin(self) -> bool:
        return MemberRole.is_admin(self.role)


class MemberCreate(BaseModel):
    user_id: str = Field(..., min_length=3, max_length=50, alias="userId")
    user_pw: str = Field(..., min_length=4, max_length=72, alias="userPw")
    user_name: str = Field(..., min_length=1, max_length=100, alias="userName")
    job: Optional[str] = Field(None, max_length=3)

    class Config:
        populate_by_name = True

    @field_validator("user_id")
    @classmethod
    def user_id_must_not_contain_spaces(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("User id cannot contain whitespace")
        return v

    @field_validator("user_pw")
    @classmethod
    def user_pw_must_fit_bcrypt(cls, v: str) -> str:
        # bcrypt 는 72바이트까지만 처리 (한글은 글자당 3바이트)
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password cannot be longer than 72 bytes")
        return v


class MemberUpdate(BaseModel):
    """관리자용 회원 정보 수정"""

    user_no: int = Field(..., gt=0)
    user_name: Optional[str] = Field(None, min_length=1, max_length=100)
    job: Optional[str] = Field(None, max_length=3)
    role: Optional[MemberRole] = None
    enabled: Optional[bool] = None
