"""
권한 정책

라우트마다 흩어진 역할/작성자 검사를 하나의 정책 테이블로 모은다.
서비스는 보호된 작업을 실행하기 전에 ``authorize()`` 를 호출한다.

규칙:
- ``role``: 요구 역할 (계층 비교, ADMIN 은 MEMBER 를 포함)
- ``owner_or``: 지정되면 리소스 작성자 본인(+ ``role``) 이거나 이 역할이어야 함
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from imageshop.core.exceptions import AuthorizationError
from imageshop.models.member import MemberRole

logger = logging.getLogger(__name__)


class Action(str, Enum):
    BOARD_CREATE = "board:create"
    BOARD_MODIFY = "board:modify"
    BOARD_REMOVE = "board:remove"
    ITEM_CREATE = "item:create"
    ITEM_MODIFY = "item:modify"
    ITEM_REMOVE = "item:remove"
    ITEM_BUY = "item:buy"
    COIN_CHARGE = "coin:charge"
    USERITEM_READ = "useritem:read"
    MEMBER_LIST = "member:list"
    MEMBER_MODIFY = "member:modify"
    MEMBER_REMOVE = "member:remove"
    CODE_MANAGE = "code:manage"


@dataclass(frozen=True)
class Rule:
    role: MemberRole
    owner_or: Optional[MemberRole] = None


POLICY: Dict[Action, Rule] = {
    Action.BOARD_CREATE: Rule(MemberRole.MEMBER),
    Action.BOARD_MODIFY: Rule(MemberRole.MEMBER, owner_or=MemberRole.ADMIN),
    Action.BOARD_REMOVE: Rule(MemberRole.MEMBER, owner_or=MemberRole.ADMIN),
    Action.ITEM_CREATE: Rule(MemberRole.ADMIN),
    Action.ITEM_MODIFY: Rule(MemberRole.ADMIN),
    Action.ITEM_REMOVE: Rule(MemberRole.ADMIN),
    Action.ITEM_BUY: Rule(MemberRole.MEMBER),
    Action.COIN_CHARGE: Rule(MemberRole.MEMBER),
    Action.USERITEM_READ: Rule(MemberRole.MEMBER, owner_or=MemberRole.ADMIN),
    Action.MEMBER_LIST: Rule(MemberRole.ADMIN),
    Action.MEMBER_MODIFY: Rule(MemberRole.ADMIN),
    Action.MEMBER_REMOVE: Rule(MemberRole.ADMIN),
    Action.CODE_MANAGE: Rule(MemberRole.ADMIN),
}


def is_allowed(actor: Any, action: Action, owner: Optional[str] = None) -> bool:
    """actor(회원 스키마)가 action 을 수행할 수 있는지 평가

    owner 는 리소스 작성자의 user_id 이다. owner_or 규칙이 있는 작업에서
    owner 가 주어지지 않으면 본인 조건은 충족되지 않은 것으로 본다.
    """
    if actor is None or not getattr(actor, "enabled", False):
        return False

    rule = POLICY[action]
    role = getattr(actor, "role", None)
    if not MemberRole.has_permission(role, rule.role):
        return False

    if rule.owner_or is None:
        return True

    if owner is not None and getattr(actor, "user_id", None) == owner:
        return True
    return MemberRole.has_permission(role, rule.owner_or)


def authorize(actor: Any, action: Action, owner: Optional[str] = None) -> None:
    """권한이 없으면 AuthorizationError"""
    if not is_allowed(actor, action, owner):
        actor_id = getattr(actor, "user_id", None)
        logger.warning(f"Access denied: {actor_id} -> {action.value} (owner={owner})")
        raise AuthorizationError(
            f"Not allowed to perform {action.value}",
            details={"action": action.value},
        )
