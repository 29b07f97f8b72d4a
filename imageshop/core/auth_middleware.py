from typing import Optional
from fastapi import HTTPException, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from imageshop.deps import get_auth_service
from imageshop.models.member import MemberRole
from imageshop.services.auth_service import AuthService
from imageshop.schemas.member import Member as MemberSchema

# JWT Bearer 토큰 스킴
security = HTTPBearer(auto_error=False)


def get_current_member(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> MemberSchema:
    """필수 회원 인증 - 유효한 토큰이 필요함"""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    member = auth_service.get_current_member(credentials.credentials)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return member


def get_current_active_member(
    current_member: MemberSchema = Depends(get_current_member),
) -> MemberSchema:
    """활성 회원만 허용"""
    if not current_member.enabled:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user account",
        )
    return current_member


def require_role(required_role: MemberRole):
    """특정 역할 이상의 권한이 필요한 엔드포인트용 의존성 팩토리"""

    def _require_role(
        current_member: MemberSchema = Depends(get_current_active_member),
    ) -> MemberSchema:
        if not MemberRole.has_permission(current_member.role, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{required_role.value}' or higher required",
            )
        return current_member

    return _require_role


require_member = require_role(MemberRole.MEMBER)
require_admin = require_role(MemberRole.ADMIN)
