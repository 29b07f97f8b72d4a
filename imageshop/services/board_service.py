from sqlalchemy.orm import Session

from imageshop.config import Settings
from imageshop.core.exceptions import NotFoundError, ValidationError
from imageshop.core.policy import Action, authorize
from imageshop.repositories.board_repository import BoardRepository
from imageshop.schemas.board import Board as BoardSchema, BoardCreate, BoardForm, BoardUpdate
from imageshop.schemas.member import Member as MemberSchema
from imageshop.schemas.pagination import Page, PageRequest, Pagination
import logging

logger = logging.getLogger(__name__)


class BoardService:
    """게시판 CRUD"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.board_repo = BoardRepository(db)
        self.settings = settings

    def register_form(self, actor: MemberSchema) -> BoardForm:
        authorize(actor, Action.BOARD_CREATE)
        return BoardForm(writer=actor.user_id)

    def register(self, actor: MemberSchema, data: BoardCreate) -> BoardSchema:
        """게시글 등록 - 작성자는 항상 요청한 회원"""
        authorize(actor, Action.BOARD_CREATE)
        board = self.board_repo.create(
            title=data.title, content=data.content, writer=actor.user_id
        )
        if not board:
            raise ValidationError("Failed to register board")
        logger.info(f"Board {board.board_no} registered by {actor.user_id}")
        return board

    def list(self, page_request: PageRequest) -> Page[BoardSchema]:
        """검색 + 페이징 목록"""
        size_per_page = page_request.size_per_page or self.settings.DEFAULT_PAGE_SIZE
        size_per_page = min(size_per_page, self.settings.MAX_PAGE_SIZE)
        if size_per_page != page_request.size_per_page:
            page_request = page_request.model_copy(update={"size_per_page": size_per_page})

        boards, total_count = self.board_repo.search(page_request)
        pagination = Pagination.build(
            page=page_request.page,
            size_per_page=page_request.size_per_page,
            total_count=total_count,
            block_size=self.settings.PAGE_BLOCK_SIZE,
        )
        return Page[BoardSchema](content=boards, pagination=pagination)

    def read(self, board_no: int) -> BoardSchema:
        board = self.board_repo.get_by_id(board_no)
        if not board:
            raise NotFoundError(f"Board not found: {board_no}")
        return board

    def modify(self, actor: MemberSchema, data: BoardUpdate) -> BoardSchema:
        """작성자 본인 또는 관리자만 수정 가능"""
        existing = self.read(data.board_no)
        authorize(actor, Action.BOARD_MODIFY, owner=existing.writer)

        updated = self.board_repo.update(
            data.board_no, title=data.title, content=data.content
        )
        if not updated:
            raise NotFoundError(f"Board not found: {data.board_no}")
        logger.info(f"Board {data.board_no} modified by {actor.user_id}")
        return updated

    def remove(self, actor: MemberSchema, board_no: int) -> None:
        """작성자 본인 또는 관리자만 삭제 가능"""
        existing = self.read(board_no)
        authorize(actor, Action.BOARD_REMOVE, owner=existing.writer)

        self.board_repo.delete(board_no)
        logger.info(f"Board {board_no} removed by {actor.user_id}")
