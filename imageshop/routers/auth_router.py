from typing import Any
from fastapi import APIRouter, Depends, Request

from imageshop.core.auth_middleware import get_current_active_member, security
from imageshop.core.net_utils import get_client_ip
from imageshop.core.exceptions import AuthenticationError
from imageshop.deps import get_auth_service
from imageshop.schemas.auth import BaseResponse, LoginRequest
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.auth_service import AuthService
from fastapi.security import HTTPAuthorizationCredentials
import logging

router = APIRouter(prefix="/auth", tags=["authentication"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=BaseResponse)
def login(
    request: Request,
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> Any:
    """아이디/비밀번호 로그인 - 접속 IP를 마지막 로그인 정보로 기록"""
    client_ip = get_client_ip(request)
    token = auth_service.login(credentials, client_ip)
    return BaseResponse(success=True, data=token.model_dump())


@router.post("/refresh", response_model=BaseResponse)
def refresh(
    current_member: MemberSchema = Depends(get_current_active_member),
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> Any:
    """토큰 갱신"""
    token = auth_service.refresh_token(credentials.credentials)
    if not token:
        raise AuthenticationError("Token refresh failed")
    return BaseResponse(success=True, data=token.model_dump())
