from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class Board(BaseModel):
    board_no: int
    title: str
    content: str
    writer: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BoardCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field("", max_length=10000)

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        if v.strip() == "":
            raise ValueError("Title cannot be empty")
        return v


class BoardUpdate(BoardCreate):
    board_no: int = Field(..., gt=0)


class BoardForm(BaseModel):
    title: str = ""
    content: str = ""
    writer: str
