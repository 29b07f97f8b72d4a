from sqlalchemy.orm import Session

from imageshop.core.exceptions import NotFoundError
from imageshop.core.policy import Action, authorize
from imageshop.repositories.coin_repository import ChargeCoinRepository, PayCoinRepository
from imageshop.repositories.member_repository import MemberRepository
from imageshop.schemas.coin import (
    ChargeCoinRequest,
    ChargeCoinResult,
    ChargeHistory,
    CoinBalanceResponse,
    PayHistory,
)
from imageshop.schemas.member import Member as MemberSchema
import logging

logger = logging.getLogger(__name__)


class CoinService:
    """코인 충전 및 이력 조회"""

    def __init__(self, db: Session):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.charge_repo = ChargeCoinRepository(db)
        self.pay_repo = PayCoinRepository(db)

    def get_balance(self, member: MemberSchema) -> CoinBalanceResponse:
        return CoinBalanceResponse(
            user_no=member.user_no, coin=self.member_repo.get_coin(member.user_no)
        )

    def charge(self, actor: MemberSchema, request: ChargeCoinRequest) -> ChargeCoinResult:
        """코인 충전 - 잔액 증가와 충전 내역을 한 트랜잭션으로 기록"""
        authorize(actor, Action.COIN_CHARGE)
        try:
            updated = self.member_repo.change_coin(actor.user_no, request.amount, commit=False)
            if not updated:
                raise NotFoundError(f"Member not found: {actor.user_no}")
            history = self.charge_repo.record(actor.user_no, request.amount, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Member {actor.user_id} charged {request.amount} coins (balance={updated.coin})"
        )
        return ChargeCoinResult(
            history_no=history.history_no, amount=request.amount, coin_after=updated.coin
        )

    def charge_history(self, member: MemberSchema, limit: int = 50, offset: int = 0) -> ChargeHistory:
        if limit > 100:
            limit = 100
        entries = self.charge_repo.list_by_member(member.user_no, limit=limit, offset=offset)
        return ChargeHistory(entries=entries, count=len(entries))

    def pay_history(self, member: MemberSchema, limit: int = 50, offset: int = 0) -> PayHistory:
        if limit > 100:
            limit = 100
        entries = self.pay_repo.list_by_member(member.user_no, limit=limit, offset=offset)
        return PayHistory(entries=entries, count=len(entries))
