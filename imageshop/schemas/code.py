from pydantic import BaseModel, Field
from typing import Optional


class CodeGroup(BaseModel):
    group_code: str
    group_name: str
    use_yn: str = "Y"

    class Config:
        from_attributes = True


class CodeGroupCreate(BaseModel):
    group_code: str = Field(..., min_length=1, max_length=3)
    group_name: str = Field(..., min_length=1, max_length=30)
    use_yn: str = Field("Y", pattern="^[YN]$")


class CodeGroupUpdate(BaseModel):
    group_code: str = Field(..., min_length=1, max_length=3)
    group_name: Optional[str] = Field(None, min_length=1, max_length=30)
    use_yn: Optional[str] = Field(None, pattern="^[YN]$")


class CodeDetail(BaseModel):
    group_code: str
    code_value: str
    code_name: str
    sort_seq: int
    use_yn: str = "Y"

    class Config:
        from_attributes = True


class CodeDetailCreate(BaseModel):
    group_code: str = Field(..., min_length=1, max_length=3)
    code_value: str = Field(..., min_length=1, max_length=3)
    code_name: str = Field(..., min_length=1, max_length=30)
    use_yn: str = Field("Y", pattern="^[YN]$")


class CodeDetailUpdate(BaseModel):
    group_code: str = Field(..., min_length=1, max_length=3)
    code_value: str = Field(..., min_length=1, max_length=3)
    code_name: Optional[str] = Field(None, min_length=1, max_length=30)
    sort_seq: Optional[int] = Field(None, ge=0)
    use_yn: Optional[str] = Field(None, pattern="^[YN]$")
