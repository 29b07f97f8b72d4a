from typing import List, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session

from imageshop.models.board import Board as BoardModel
from imageshop.schemas.board import Board as BoardSchema
from imageshop.schemas.pagination import PageRequest
from imageshop.repositories.base import BaseRepository


class BoardRepository(BaseRepository[BoardModel, BoardSchema]):
    """게시판 리포지토리 - 검색 + 페이징"""

    def __init__(self, db: Session):
        super().__init__(BoardModel, BoardSchema, db)

    def _search_query(self, page_request: PageRequest):
        query = self.db.query(self.model_class)
        if not page_request.has_keyword:
            return query

        pattern = f"%{page_request.keyword.strip()}%"
        conditions = [
            getattr(self.model_class, field).ilike(pattern)
            for field in page_request.search_type.fields
        ]
        return query.filter(or_(*conditions))

    def search(self, page_request: PageRequest) -> Tuple[List[BoardSchema], int]:
        """검색 조건에 맞는 게시글 한 페이지와 전체 건수 (최신 글 먼저)"""
        self._ensure_clean_session()
        query = self._search_query(page_request)
        total_count = query.count()

        model_instances = (
            query.order_by(self.model_class.board_no.desc())
            .offset(page_request.offset)
            .limit(page_request.size_per_page)
            .all()
        )
        return self._to_schemas(model_instances), total_count
