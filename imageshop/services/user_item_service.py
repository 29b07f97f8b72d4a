from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from imageshop.config import Settings
from imageshop.core.exceptions import DuplicatePurchaseError, InsufficientBalanceError, NotFoundError
from imageshop.core.policy import Action, authorize
from imageshop.repositories.coin_repository import PayCoinRepository
from imageshop.repositories.member_repository import MemberRepository
from imageshop.repositories.user_item_repository import UserItemRepository
from imageshop.schemas.item import Item as ItemSchema, PurchaseResult
from imageshop.schemas.member import Member as MemberSchema
from imageshop.schemas.user_item import UserItemDetail
import logging

logger = logging.getLogger(__name__)


class UserItemService:
    """상품 구매와 구매 목록"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.user_item_repo = UserItemRepository(db)
        self.pay_repo = PayCoinRepository(db)
        self.settings = settings

    def register(self, member: MemberSchema, item: ItemSchema) -> PurchaseResult:
        """구매 처리

        1. 중복 구매 확인
        2. 최신 잔액으로 잔액 부족 확인
        3. 코인 차감 + 사용 내역 + 구매 기록을 한 트랜잭션으로 저장
        """
        authorize(member, Action.ITEM_BUY)

        if self.user_item_repo.has_purchased(member.user_no, item.item_id):
            raise DuplicatePurchaseError(item.item_id)

        coin = self.member_repo.get_coin(member.user_no)
        if coin < item.price:
            raise InsufficientBalanceError(coin, item.price)

        try:
            updated = self.member_repo.change_coin(member.user_no, -item.price, commit=False)
            if not updated:
                raise NotFoundError(f"Member not found: {member.user_no}")
            if updated.coin < 0:
                raise InsufficientBalanceError(coin, item.price)
            self.pay_repo.record(member.user_no, item.item_id, item.price, commit=False)
            user_item = self.user_item_repo.record_purchase(
                member.user_no, item.item_id, commit=False
            )
            self.db.commit()
        except IntegrityError:
            # 동시 구매 요청이 유니크 제약에 걸린 경우
            self.db.rollback()
            raise DuplicatePurchaseError(item.item_id)
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Member {member.user_id} bought item {item.item_id} for {item.price} (balance={updated.coin})"
        )
        return PurchaseResult(
            user_item_no=user_item.user_item_no,
            item_id=item.item_id,
            price=item.price,
            coin_after=updated.coin,
            message=self.settings.PURCHASE_COMPLETE_MESSAGE,
        )

    def list(self, member: MemberSchema) -> List[UserItemDetail]:
        return self.user_item_repo.list_by_member(member.user_no)

    def read(self, actor: MemberSchema, user_item_no: int) -> UserItemDetail:
        """구매자 본인 또는 관리자만 조회"""
        user_item = self.user_item_repo.get_detail(user_item_no)
        if not user_item:
            raise NotFoundError(f"User item not found: {user_item_no}")

        owner = self.member_repo.get_by_id(user_item.user_no)
        authorize(actor, Action.USERITEM_READ, owner=owner.user_id if owner else None)
        return user_item
