"""
코인 이력 리포지토리

충전/사용 내역은 추가만 가능하며, 실제 잔액 변경은 MemberRepository.change_coin 이
같은 세션에서 수행한다.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from imageshop.models.coin import ChargeCoin as ChargeCoinModel, PayCoin as PayCoinModel
from imageshop.schemas.coin import ChargeCoin as ChargeCoinSchema, PayCoin as PayCoinSchema
from imageshop.repositories.base import BaseRepository


class ChargeCoinRepository(BaseRepository[ChargeCoinModel, ChargeCoinSchema]):
    def __init__(self, db: Session):
        super().__init__(ChargeCoinModel, ChargeCoinSchema, db)

    def record(self, user_no: int, amount: int, commit: bool = True) -> Optional[ChargeCoinSchema]:
        return self.create(commit=commit, user_no=user_no, amount=amount)

    def list_by_member(self, user_no: int, limit: int = 50, offset: int = 0) -> List[ChargeCoinSchema]:
        return self.find_all(
            filters={"user_no": user_no},
            order_by="history_no",
            descending=True,
            limit=limit,
            offset=offset,
        )


class PayCoinRepository(BaseRepository[PayCoinModel, PayCoinSchema]):
    def __init__(self, db: Session):
        super().__init__(PayCoinModel, PayCoinSchema, db)

    def record(
        self, user_no: int, item_id: int, amount: int, commit: bool = True
    ) -> Optional[PayCoinSchema]:
        return self.create(commit=commit, user_no=user_no, item_id=item_id, amount=amount)

    def list_by_member(self, user_no: int, limit: int = 50, offset: int = 0) -> List[PayCoinSchema]:
        return self.find_all(
            filters={"user_no": user_no},
            order_by="history_no",
            descending=True,
            limit=limit,
            offset=offset,
        )
