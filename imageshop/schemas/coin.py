from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


class ChargeCoinRequest(BaseModel):
    """코인 충전 요청"""

    amount: int = Field(..., gt=0, le=1_000_000, description="충전 금액")


class ChargeCoin(BaseModel):
    history_no: int
    user_no: int
    amount: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PayCoin(BaseModel):
    history_no: int
    user_no: int
    item_id: Optional[int] = None
    amount: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CoinBalanceResponse(BaseModel):
    user_no: int
    coin: int


class ChargeCoinResult(BaseModel):
    history_no: int
    amount: int
    coin_after: int


class ChargeHistory(BaseModel):
    entries: List[ChargeCoin]
    count: int


class PayHistory(BaseModel):
    entries: List[PayCoin]
    count: int
