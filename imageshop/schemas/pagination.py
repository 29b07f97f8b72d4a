import math
from enum import Enum
from pydantic import BaseModel, Field
from typing import Generic, TypeVar, Optional, List

T = TypeVar('T')


class SearchType(str, Enum):
    """게시판 검색 조건"""
    NONE = "n"
    TITLE = "t"
    CONTENT = "c"
    WRITER = "w"
    TITLE_CONTENT = "tc"
    CONTENT_WRITER = "cw"
    TITLE_CONTENT_WRITER = "tcw"

    @property
    def fields(self) -> List[str]:
        mapping = {"t": "title", "c": "content", "w": "writer"}
        return [mapping[ch] for ch in self.value if ch in mapping]


class CodeLabelValue(BaseModel):
    """선택 목록 항목"""
    value: str
    label: str


SEARCH_TYPE_OPTIONS: List[CodeLabelValue] = [
    CodeLabelValue(value="n", label="---"),
    CodeLabelValue(value="t", label="Title"),
    CodeLabelValue(value="c", label="Content"),
    CodeLabelValue(value="w", label="Writer"),
    CodeLabelValue(value="tc", label="Title OR Content"),
    CodeLabelValue(value="cw", label="Content OR Writer"),
    CodeLabelValue(value="tcw", label="Title OR Content OR Writer"),
]


class PageRequest(BaseModel):
    """페이지 요청 파라미터"""
    page: int = Field(1, ge=1, description="페이지 번호 (1부터)")
    size_per_page: Optional[int] = Field(None, ge=1, description="페이지당 항목 수 (없으면 설정 기본값)")
    search_type: SearchType = SearchType.NONE
    keyword: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size_per_page

    @property
    def has_keyword(self) -> bool:
        return (
            self.search_type != SearchType.NONE
            and self.keyword is not None
            and self.keyword.strip() != ""
        )


class Pagination(BaseModel):
    """페이지 네비게이션 정보"""
    page: int
    size_per_page: int
    total_count: int
    total_pages: int
    start_page: int
    end_page: int
    prev: bool
    next: bool
    page_list: List[int]

    @classmethod
    def build(
        cls, page: int, size_per_page: int, total_count: int, block_size: int = 10
    ) -> "Pagination":
        total_pages = max(1, math.ceil(total_count / size_per_page))
        end_page = math.ceil(page / block_size) * block_size
        start_page = end_page - block_size + 1
        end_page = min(end_page, total_pages)
        start_page = min(start_page, end_page)
        return cls(
            page=page,
            size_per_page=size_per_page,
            total_count=total_count,
            total_pages=total_pages,
            start_page=start_page,
            end_page=end_page,
            prev=start_page > 1,
            next=end_page < total_pages,
            page_list=list(range(start_page, end_page + 1)),
        )


class Page(BaseModel, Generic[T]):
    """목록 + 페이지 정보"""
    content: List[T]
    pagination: Pagination
