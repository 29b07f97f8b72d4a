import pytest
from unittest.mock import patch

from imageshop.core.exceptions import ConflictError, InsufficientBalanceError, NotFoundError, AuthorizationError
from imageshop.models.coin import PayCoin
from imageshop.models.user_item import UserItem
from imageshop.repositories.item_repository import ItemRepository
from imageshop.repositories.member_repository import MemberRepository
from imageshop.services.user_item_service import UserItemService


@pytest.fixture
def service(db_session, test_settings):
    return UserItemService(db_session, test_settings)


@pytest.fixture
def item(db_session):
    return ItemRepository(db_session).create(
        item_name="Sunset",
        price=300,
        description="orange sky",
        picture_url="11111111-1111-1111-1111-111111111111_sunset.png",
        preview_url="22222222-2222-2222-2222-222222222222_sunset_preview.png",
    )


@pytest.fixture
def expensive_item(db_session):
    return ItemRepository(db_session).create(
        item_name="Gold", price=5000, picture_url="p_gold.png", preview_url="v_gold.png"
    )


class TestPurchase:
    def test_purchase_deducts_coin_and_records(self, service, db_session, member, item):
        result = service.register(member, item)

        assert result.coin_after == 700
        assert result.price == 300
        assert result.message == "구매가 완료되었습니다."
        assert MemberRepository(db_session).get_coin(member.user_no) == 700

        user_items = db_session.query(UserItem).filter(UserItem.user_no == member.user_no).all()
        assert [ui.item_id for ui in user_items] == [item.item_id]
        pays = db_session.query(PayCoin).filter(PayCoin.user_no == member.user_no).all()
        assert [(p.item_id, p.amount) for p in pays] == [(item.item_id, 300)]

    def test_insufficient_balance_leaves_state_unchanged(
        self, service, db_session, member, expensive_item
    ):
        with pytest.raises(InsufficientBalanceError) as exc_info:
            service.register(member, expensive_item)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["shortfall"] == 4000
        assert MemberRepository(db_session).get_coin(member.user_no) == 1000
        assert db_session.query(UserItem).count() == 0
        assert db_session.query(PayCoin).count() == 0

    def test_duplicate_purchase_is_rejected(self, service, db_session, member, item):
        service.register(member, item)

        with pytest.raises(ConflictError):
            service.register(member, item)

        assert MemberRepository(db_session).get_coin(member.user_no) == 700
        assert db_session.query(UserItem).count() == 1
        assert db_session.query(PayCoin).count() == 1

    def test_exact_balance_is_enough(self, service, db_session, other_member, item):
        MemberRepository(db_session).change_coin(other_member.user_no, 300)

        result = service.register(other_member, item)

        assert result.coin_after == 0

    def test_list_includes_item_details(self, service, member, item):
        service.register(member, item)

        user_items = service.list(member)

        assert len(user_items) == 1
        assert user_items[0].item_name == "Sunset"
        assert user_items[0].picture_url == item.picture_url

    def test_read_by_owner_and_admin(self, service, member, admin, item):
        purchase = service.register(member, item)

        assert service.read(member, purchase.user_item_no).item_id == item.item_id
        assert service.read(admin, purchase.user_item_no).item_id == item.item_id

    def test_read_by_other_member_is_forbidden(self, service, member, other_member, item):
        purchase = service.register(member, item)

        with pytest.raises(AuthorizationError):
            service.read(other_member, purchase.user_item_no)

    def test_read_missing(self, service, member):
        with pytest.raises(NotFoundError):
            service.read(member, 12345)

    def test_failure_mid_transaction_rolls_back_coin(self, service, db_session, member, item):
        with patch.object(service.pay_repo, "record", side_effect=RuntimeError("db down")):
            with pytest.raises(RuntimeError):
                service.register(member, item)

        assert MemberRepository(db_session).get_coin(member.user_no) == 1000
        assert db_session.query(UserItem).count() == 0
