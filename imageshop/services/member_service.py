from typing import List
from sqlalchemy.orm import Session

from imageshop.repositories.member_repository import MemberRepository
from imageshop.core.exceptions import ConflictError, NotFoundError, ValidationError
from imageshop.core.policy import Action, authorize
from imageshop.core.security import hash_password
from imageshop.config import Settings
from imageshop.models.member import MemberRole
from imageshop.schemas.member import (
    Member as MemberSchema,
    MemberCreate,
    MemberUpdate,
)
import logging

logger = logging.getLogger(__name__)


class MemberService:
    """회원 관련 비즈니스 로직을 담당하는 서비스"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.settings = settings

    def register(self, data: MemberCreate) -> MemberSchema:
        """일반 회원 가입"""
        return self._create(data, MemberRole.MEMBER)

    def setup_admin(self, data: MemberCreate) -> MemberSchema:
        """최초 관리자 생성 - 회원이 한 명도 없을 때만 가능"""
        if self.member_repo.count() > 0:
            raise ConflictError("Administrator setup is only available on an empty member table")
        return self._create(data, MemberRole.ADMIN)

    def _create(self, data: MemberCreate, role: MemberRole) -> MemberSchema:
        if self.member_repo.user_id_exists(data.user_id):
            raise ConflictError(f"User id already taken: {data.user_id}")

        member = self.member_repo.create_member(
            user_id=data.user_id,
            password_hash=hash_password(data.user_pw),
            user_name=data.user_name,
            job=data.job,
            role=role,
        )
        if not member:
            raise ValidationError("Failed to register member")

        logger.info(f"Registered member {member.user_id} (user_no={member.user_no}, role={role.value})")
        return member

    def read(self, user_no: int) -> MemberSchema:
        member = self.member_repo.get_by_id(user_no)
        if not member:
            raise NotFoundError(f"Member not found: {user_no}")
        return member

    def list(self, actor: MemberSchema, limit: int = 50, offset: int = 0) -> List[MemberSchema]:
        authorize(actor, Action.MEMBER_LIST)
        if limit > 100:  # 최대 제한
            limit = 100
        return self.member_repo.list_members(limit=limit, offset=offset)

    def modify(self, actor: MemberSchema, update_data: MemberUpdate) -> MemberSchema:
        """관리자 회원 정보 수정"""
        authorize(actor, Action.MEMBER_MODIFY)
        self.read(update_data.user_no)

        update_fields = {}
        if update_data.user_name is not None:
            update_fields["user_name"] = update_data.user_name
        if update_data.job is not None:
            update_fields["job"] = update_data.job
        if update_data.role is not None:
            update_fields["role"] = update_data.role.value
        if update_data.enabled is not None:
            update_fields["enabled"] = update_data.enabled

        updated = self.member_repo.update(update_data.user_no, **update_fields)
        if not updated:
            raise ValidationError("Failed to update member")

        logger.info(f"Member {updated.user_no} modified by {actor.user_id}: {sorted(update_fields)}")
        return updated

    def remove(self, actor: MemberSchema, user_no: int) -> None:
        authorize(actor, Action.MEMBER_REMOVE)
        if actor.user_no == user_no:
            raise ValidationError("Administrators cannot remove themselves")
        self.read(user_no)
        self.member_repo.delete(user_no)
        logger.info(f"Member {user_no} removed by {actor.user_id}")
