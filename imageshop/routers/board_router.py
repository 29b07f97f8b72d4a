"""
게시판 API 라우터

- GET  /board/register: 등록 폼 (작성자 미리 채움, 회원)
- POST /board/register: 게시글 등록 (회원)
- GET  /board/list: 검색 + 페이징 목록
- GET  /board/read: 게시글 조회
- GET  /board/modify: 수정 폼 (회원)
- POST /board/modify: 게시글 수정 (작성자 본인 또는 관리자)
- POST /board/remove: 게시글 삭제 (작성자 본인 또는 관리자)
"""

from typing import Any, Optional
from fastapi import APIRouter, Depends, Query

from imageshop.core.auth_middleware import require_member
from imageshop.deps import get_board_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.board import BoardCreate, BoardUpdate
from imageshop.schemas.member import Member as MemberSchema
from imageshop.schemas.pagination import PageRequest, SEARCH_TYPE_OPTIONS, SearchType
from imageshop.services.board_service import BoardService
import logging

router = APIRouter(prefix="/board", tags=["board"])
logger = logging.getLogger(__name__)


def page_request_params(
    page: int = Query(1, ge=1),
    size_per_page: Optional[int] = Query(None, ge=1, alias="sizePerPage"),
    search_type: SearchType = Query(SearchType.NONE, alias="searchType"),
    keyword: Optional[str] = Query(None, max_length=100),
) -> PageRequest:
    return PageRequest(
        page=page, size_per_page=size_per_page, search_type=search_type, keyword=keyword
    )


def _page_meta(page_request: PageRequest) -> dict:
    # 수정/삭제 후 목록으로 돌아갈 때 검색 조건 유지용
    return {
        "page": page_request.page,
        "sizePerPage": page_request.size_per_page,
        "searchType": page_request.search_type.value,
        "keyword": page_request.keyword,
    }


@router.get("/register", response_model=BaseResponse)
def register_form(
    current_member: MemberSchema = Depends(require_member),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    """등록 폼 - 작성자를 현재 회원으로 채워서 반환"""
    form = board_service.register_form(current_member)
    return BaseResponse(success=True, data=form.model_dump())


@router.post("/register", response_model=BaseResponse)
def register(
    board: BoardCreate,
    current_member: MemberSchema = Depends(require_member),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    created = board_service.register(current_member, board)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "board": created.model_dump(mode="json")},
        meta={"redirect": "/board/list"},
    )


@router.get("/list", response_model=BaseResponse)
def list_boards(
    page_request: PageRequest = Depends(page_request_params),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    page = board_service.list(page_request)
    return BaseResponse(
        success=True,
        data={
            "boards": [board.model_dump(mode="json") for board in page.content],
            "pagination": page.pagination.model_dump(),
        },
        meta={
            "pgrq": _page_meta(
                page_request.model_copy(
                    update={"size_per_page": page.pagination.size_per_page}
                )
            ),
            "searchTypeCodeValueList": [
                option.model_dump() for option in SEARCH_TYPE_OPTIONS
            ],
        },
    )


@router.get("/read", response_model=BaseResponse)
def read(
    board_no: int = Query(..., alias="boardNo"),
    page_request: PageRequest = Depends(page_request_params),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    board = board_service.read(board_no)
    return BaseResponse(
        success=True,
        data=board.model_dump(mode="json"),
        meta={"pgrq": _page_meta(page_request)},
    )


@router.get("/modify", response_model=BaseResponse)
def modify_form(
    board_no: int = Query(..., alias="boardNo"),
    page_request: PageRequest = Depends(page_request_params),
    current_member: MemberSchema = Depends(require_member),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    board = board_service.read(board_no)
    return BaseResponse(
        success=True,
        data=board.model_dump(mode="json"),
        meta={"pgrq": _page_meta(page_request)},
    )


@router.post("/modify", response_model=BaseResponse)
def modify(
    board: BoardUpdate,
    page_request: PageRequest = Depends(page_request_params),
    current_member: MemberSchema = Depends(require_member),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    updated = board_service.modify(current_member, board)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "board": updated.model_dump(mode="json")},
        meta={"redirect": "/board/list", "pgrq": _page_meta(page_request)},
    )


@router.post("/remove", response_model=BaseResponse)
def remove(
    board_no: int = Query(..., alias="boardNo"),
    page_request: PageRequest = Depends(page_request_params),
    current_member: MemberSchema = Depends(require_member),
    board_service: BoardService = Depends(get_board_service),
) -> Any:
    board_service.remove(current_member, board_no)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "board_no": board_no},
        meta={"redirect": "/board/list", "pgrq": _page_meta(page_request)},
    )
