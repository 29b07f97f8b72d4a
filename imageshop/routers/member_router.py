from typing import Any
from fastapi import APIRouter, Depends, Query

from imageshop.core.auth_middleware import get_current_active_member, require_admin
from imageshop.deps import get_code_service, get_member_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.member import Member as MemberSchema, MemberCreate, MemberUpdate
from imageshop.services.code_service import CodeService
from imageshop.services.member_service import MemberService
import logging

router = APIRouter(prefix="/user", tags=["user"])
logger = logging.getLogger(__name__)

# 직업 코드 그룹
JOB_CODE_GROUP = "A01"


def _member_data(member: MemberSchema) -> dict:
    data = member.model_dump(mode="json")
    data["is_admin"] = member.is_admin
    return data


@router.get("/register", response_model=BaseResponse)
def register_form(
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    """가입 폼 - 직업 선택 목록 포함"""
    job_list = code_service.get_code_list(JOB_CODE_GROUP)
    return BaseResponse(
        success=True,
        data={"jobList": [code.model_dump() for code in job_list]},
    )


@router.post("/register", response_model=BaseResponse)
def register(
    member: MemberCreate,
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    created = member_service.register(member)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "user_no": created.user_no, "user_id": created.user_id},
    )


@router.post("/setup", response_model=BaseResponse)
def setup_admin(
    member: MemberCreate,
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    """최초 관리자 생성 (회원 테이블이 비어 있을 때만)"""
    created = member_service.setup_admin(member)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "user_no": created.user_no, "user_id": created.user_id},
    )


@router.get("/me", response_model=BaseResponse)
def me(
    current_member: MemberSchema = Depends(get_current_active_member),
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    """현재 회원 정보 - 코인은 DB에서 다시 읽음"""
    member = member_service.read(current_member.user_no)
    return BaseResponse(success=True, data=_member_data(member))


@router.get("/list", response_model=BaseResponse)
def list_members(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_member: MemberSchema = Depends(require_admin),
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    members = member_service.list(current_member, limit=limit, offset=offset)
    return BaseResponse(
        success=True,
        data={
            "members": [_member_data(member) for member in members],
            "count": len(members),
        },
        meta={"limit": limit, "offset": offset},
    )


@router.get("/read", response_model=BaseResponse)
def read(
    user_no: int = Query(..., alias="userNo"),
    current_member: MemberSchema = Depends(require_admin),
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    member = member_service.read(user_no)
    return BaseResponse(success=True, data=_member_data(member))


@router.post("/modify", response_model=BaseResponse)
def modify(
    update_data: MemberUpdate,
    current_member: MemberSchema = Depends(require_admin),
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    updated = member_service.modify(current_member, update_data)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "member": _member_data(updated)},
        meta={"redirect": "/user/list"},
    )


@router.post("/remove", response_model=BaseResponse)
def remove(
    user_no: int = Query(..., alias="userNo"),
    current_member: MemberSchema = Depends(require_admin),
    member_service: MemberService = Depends(get_member_service),
) -> Any:
    member_service.remove(current_member, user_no)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "user_no": user_no},
        meta={"redirect": "/user/list"},
    )
