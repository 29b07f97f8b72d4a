from pydantic import BaseModel, Field
from typing import Optional


class Error(BaseModel):
    code: str
    message: str
    details: Optional[dict] = None


class BaseResponse(BaseModel):
    success: bool = True
    data: Optional[dict] = None
    error: Optional[Error] = None
    meta: Optional[dict] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    user_id: Optional[str] = None
    user_no: Optional[int] = None


class LoginRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=50, alias="userId")
    user_pw: str = Field(..., min_length=1, alias="userPw")

    class Config:
        populate_by_name = True
