from typing import List
from sqlalchemy.orm import Session

from imageshop.core.exceptions import ConflictError, NotFoundError
from imageshop.core.policy import Action, authorize
from imageshop.repositories.code_repository import CodeDetailRepository, CodeGroupRepository
from imageshop.schemas.code import (
    CodeDetail,
    CodeDetailCreate,
    CodeDetailUpdate,
    CodeGroup,
    CodeGroupCreate,
    CodeGroupUpdate,
)
from imageshop.schemas.member import Member as MemberSchema
from imageshop.schemas.pagination import CodeLabelValue
import logging

logger = logging.getLogger(__name__)


class CodeService:
    """공통 코드 - 선택 목록 조회와 관리자 관리"""

    def __init__(self, db: Session):
        self.db = db
        self.group_repo = CodeGroupRepository(db)
        self.detail_repo = CodeDetailRepository(db)

    # 선택 목록

    def get_code_group_list(self) -> List[CodeLabelValue]:
        return [
            CodeLabelValue(value=group.group_code, label=group.group_name)
            for group in self.group_repo.list_groups(only_used=True)
        ]

    def get_code_list(self, group_code: str) -> List[CodeLabelValue]:
        return [
            CodeLabelValue(value=detail.code_value, label=detail.code_name)
            for detail in self.detail_repo.list_by_group(group_code, only_used=True)
        ]

    # 코드 그룹

    def register_group(self, actor: MemberSchema, data: CodeGroupCreate) -> CodeGroup:
        authorize(actor, Action.CODE_MANAGE)
        if self.group_repo.exists({"group_code": data.group_code}):
            raise ConflictError(f"Code group already exists: {data.group_code}")
        group = self.group_repo.create(**data.model_dump())
        logger.info(f"Code group {data.group_code} registered by {actor.user_id}")
        return group

    def list_groups(self, actor: MemberSchema) -> List[CodeGroup]:
        authorize(actor, Action.CODE_MANAGE)
        return self.group_repo.list_groups()

    def read_group(self, actor: MemberSchema, group_code: str) -> CodeGroup:
        authorize(actor, Action.CODE_MANAGE)
        group = self.group_repo.get_by_id(group_code)
        if not group:
            raise NotFoundError(f"Code group not found: {group_code}")
        return group

    def modify_group(self, actor: MemberSchema, data: CodeGroupUpdate) -> CodeGroup:
        self.read_group(actor, data.group_code)
        update_fields = data.model_dump(exclude={"group_code"}, exclude_none=True)
        return self.group_repo.update(data.group_code, **update_fields)

    def remove_group(self, actor: MemberSchema, group_code: str) -> None:
        self.read_group(actor, group_code)
        if self.detail_repo.count({"group_code": group_code}) > 0:
            raise ConflictError(f"Code group {group_code} still has code details")
        self.group_repo.delete(group_code)
        logger.info(f"Code group {group_code} removed by {actor.user_id}")

    # 코드 상세

    def register_detail(self, actor: MemberSchema, data: CodeDetailCreate) -> CodeDetail:
        self.read_group(actor, data.group_code)
        if self.detail_repo.get_detail(data.group_code, data.code_value):
            raise ConflictError(
                f"Code detail already exists: {data.group_code}/{data.code_value}"
            )
        return self.detail_repo.create(
            sort_seq=self.detail_repo.next_sort_seq(data.group_code),
            **data.model_dump(),
        )

    def list_details(self, actor: MemberSchema, group_code: str) -> List[CodeDetail]:
        authorize(actor, Action.CODE_MANAGE)
        return self.detail_repo.list_by_group(group_code)

    def read_detail(self, actor: MemberSchema, group_code: str, code_value: str) -> CodeDetail:
        authorize(actor, Action.CODE_MANAGE)
        detail = self.detail_repo.get_detail(group_code, code_value)
        if not detail:
            raise NotFoundError(f"Code detail not found: {group_code}/{code_value}")
        return detail

    def modify_detail(self, actor: MemberSchema, data: CodeDetailUpdate) -> CodeDetail:
        self.read_detail(actor, data.group_code, data.code_value)
        update_fields = data.model_dump(
            exclude={"group_code", "code_value"}, exclude_none=True
        )
        return self.detail_repo.update_detail(data.group_code, data.code_value, **update_fields)

    def remove_detail(self, actor: MemberSchema, group_code: str, code_value: str) -> None:
        self.read_detail(actor, group_code, code_value)
        self.detail_repo.delete_detail(group_code, code_value)
