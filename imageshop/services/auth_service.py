from typing import Optional
from sqlalchemy.orm import Session
from jose import JWTError

from imageshop.config import Settings
from imageshop.core.security import create_access_token, decode_access_token, verify_password
from imageshop.core.exceptions import AuthenticationError
from imageshop.repositories.member_repository import MemberRepository
from imageshop.schemas.auth import LoginRequest, Token, TokenData
from imageshop.schemas.member import Member as MemberSchema
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 담당하는 서비스"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.settings = settings

    def login(self, credentials: LoginRequest, client_ip: Optional[str] = None) -> Token:
        """아이디/비밀번호 확인 후 JWT 발급"""
        password_hash = self.member_repo.get_password_hash(credentials.user_id)
        if not password_hash or not verify_password(credentials.user_pw, password_hash):
            logger.warning(f"Login failed for {credentials.user_id} from {client_ip}")
            raise AuthenticationError("Invalid user id or password")

        member = self.member_repo.get_by_user_id(credentials.user_id)
        if not member or not member.enabled:
            raise AuthenticationError("Member account is disabled")

        self.member_repo.update_last_login(member.user_no, client_ip)
        logger.info(f"Member {member.user_id} logged in from {client_ip}")

        access_token = create_access_token(
            data={"sub": member.user_id, "user_no": member.user_no}
        )
        return Token(access_token=access_token, token_type="bearer")

    def verify_token(self, token: str) -> Optional[TokenData]:
        """JWT 토큰 검증"""
        try:
            payload = decode_access_token(token)
            user_id_val = payload.get("sub")
            user_no_val = payload.get("user_no")

            if not isinstance(user_id_val, str) or not isinstance(user_no_val, int):
                return None

            return TokenData(user_id=user_id_val, user_no=user_no_val)
        except JWTError:
            return None

    def get_current_member(self, token: str) -> Optional[MemberSchema]:
        """토큰으로 현재 회원 조회"""
        token_data = self.verify_token(token)
        if not token_data or not token_data.user_no:
            return None

        member = self.member_repo.get_by_id(token_data.user_no)
        if not member or member.user_id != token_data.user_id:
            return None

        return member

    def refresh_token(self, current_token: str) -> Optional[Token]:
        """토큰 갱신"""
        member = self.get_current_member(current_token)
        if not member or not member.enabled:
            return None

        access_token = create_access_token(
            data={"sub": member.user_id, "user_no": member.user_no}
        )
        return Token(access_token=access_token, token_type="bearer")
