import pytest

from imageshop.core.exceptions import AuthorizationError
from imageshop.core.policy import Action, authorize, is_allowed
from imageshop.models.member import MemberRole
from imageshop.schemas.member import Member


def make_member(user_id="alice", role=MemberRole.MEMBER, enabled=True):
    return Member(user_no=1, user_id=user_id, user_name=user_id, role=role, enabled=enabled)


class TestPolicy:
    def test_member_can_create_board(self):
        assert is_allowed(make_member(), Action.BOARD_CREATE)

    def test_owner_can_modify_own_board(self):
        assert is_allowed(make_member("alice"), Action.BOARD_MODIFY, owner="alice")

    def test_non_owner_member_cannot_modify_board(self):
        assert not is_allowed(make_member("bob"), Action.BOARD_MODIFY, owner="alice")

    def test_admin_can_modify_any_board(self):
        admin = make_member("root", MemberRole.ADMIN)
        assert is_allowed(admin, Action.BOARD_MODIFY, owner="alice")
        assert is_allowed(admin, Action.BOARD_REMOVE, owner="alice")

    def test_owner_missing_is_not_owner(self):
        assert not is_allowed(make_member("alice"), Action.USERITEM_READ, owner=None)

    @pytest.mark.parametrize(
        "action",
        [Action.ITEM_CREATE, Action.ITEM_MODIFY, Action.ITEM_REMOVE, Action.MEMBER_LIST, Action.CODE_MANAGE],
    )
    def test_admin_only_actions(self, action):
        assert not is_allowed(make_member(), action)
        assert is_allowed(make_member("root", MemberRole.ADMIN), action)

    def test_admin_can_buy(self):
        assert is_allowed(make_member("root", MemberRole.ADMIN), Action.ITEM_BUY)

    def test_disabled_member_is_denied(self):
        assert not is_allowed(make_member(enabled=False), Action.ITEM_BUY)

    def test_anonymous_is_denied(self):
        assert not is_allowed(None, Action.BOARD_CREATE)

    def test_authorize_raises_forbidden(self):
        with pytest.raises(AuthorizationError) as exc_info:
            authorize(make_member("bob"), Action.BOARD_REMOVE, owner="alice")
        assert exc_info.value.status_code == 403
        assert exc_info.value.details == {"action": "board:remove"}
