"""
공통 코드 API 라우터

- /code: 화면 선택 목록용 조회 (누구나)
- /codegroup, /codedetail: 관리자 전용 관리
"""

from typing import Any
from fastapi import APIRouter, Depends, Query

from imageshop.core.auth_middleware import require_admin
from imageshop.deps import get_code_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.code import (
    CodeDetailCreate,
    CodeDetailUpdate,
    CodeGroupCreate,
    CodeGroupUpdate,
)
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.code_service import CodeService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/code", tags=["code"])
group_router = APIRouter(prefix="/codegroup", tags=["code"])
detail_router = APIRouter(prefix="/codedetail", tags=["code"])


@router.get("/groups", response_model=BaseResponse)
def code_groups(
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    codes = code_service.get_code_group_list()
    return BaseResponse(success=True, data={"codes": [c.model_dump() for c in codes]})


@router.get("/list", response_model=BaseResponse)
def code_list(
    group_code: str = Query(..., alias="groupCode"),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    codes = code_service.get_code_list(group_code)
    return BaseResponse(success=True, data={"codes": [c.model_dump() for c in codes]})


# 코드 그룹


@group_router.post("/register", response_model=BaseResponse)
def register_group(
    data: CodeGroupCreate,
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    group = code_service.register_group(current_member, data)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "code_group": group.model_dump()},
        meta={"redirect": "/codegroup/list"},
    )


@group_router.get("/list", response_model=BaseResponse)
def list_groups(
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    groups = code_service.list_groups(current_member)
    return BaseResponse(
        success=True,
        data={"code_groups": [g.model_dump() for g in groups], "count": len(groups)},
    )


@group_router.get("/read", response_model=BaseResponse)
def read_group(
    group_code: str = Query(..., alias="groupCode"),
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    group = code_service.read_group(current_member, group_code)
    return BaseResponse(success=True, data=group.model_dump())


@group_router.post("/modify", response_model=BaseResponse)
def modify_group(
    data: CodeGroupUpdate,
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    group = code_service.modify_group(current_member, data)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "code_group": group.model_dump()},
        meta={"redirect": "/codegroup/list"},
    )


@group_router.post("/remove", response_model=BaseResponse)
def remove_group(
    group_code: str = Query(..., alias="groupCode"),
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    code_service.remove_group(current_member, group_code)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "group_code": group_code},
        meta={"redirect": "/codegroup/list"},
    )


# 코드 상세


@detail_router.post("/register", response_model=BaseResponse)
def register_detail(
    data: CodeDetailCreate,
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    detail = code_service.register_detail(current_member, data)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "code_detail": detail.model_dump()},
        meta={"redirect": "/codedetail/list"},
    )


@detail_router.get("/list", response_model=BaseResponse)
def list_details(
    group_code: str = Query(..., alias="groupCode"),
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    details = code_service.list_details(current_member, group_code)
    return BaseResponse(
        success=True,
        data={"code_details": [d.model_dump() for d in details], "count": len(details)},
    )


@detail_router.get("/read", response_model=BaseResponse)
def read_detail(
    group_code: str = Query(..., alias="groupCode"),
    code_value: str = Query(..., alias="codeValue"),
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    detail = code_service.read_detail(current_member, group_code, code_value)
    return BaseResponse(success=True, data=detail.model_dump())


@detail_router.post("/modify", response_model=BaseResponse)
def modify_detail(
    data: CodeDetailUpdate,
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    detail = code_service.modify_detail(current_member, data)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "code_detail": detail.model_dump()},
        meta={"redirect": "/codedetail/list"},
    )


@detail_router.post("/remove", response_model=BaseResponse)
def remove_detail(
    group_code: str = Query(..., alias="groupCode"),
    code_value: str = Query(..., alias="codeValue"),
    current_member: MemberSchema = Depends(require_admin),
    code_service: CodeService = Depends(get_code_service),
) -> Any:
    code_service.remove_detail(current_member, group_code, code_value)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", "group_code": group_code, "code_value": code_value},
        meta={"redirect": "/codedetail/list"},
    )
