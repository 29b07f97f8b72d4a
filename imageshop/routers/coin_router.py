from typing import Any
from fastapi import APIRouter, Depends, Query

from imageshop.core.auth_middleware import require_member
from imageshop.deps import get_coin_service
from imageshop.schemas.auth import BaseResponse
from imageshop.schemas.coin import ChargeCoinRequest
from imageshop.schemas.member import Member as MemberSchema
from imageshop.services.coin_service import CoinService
import logging

router = APIRouter(prefix="/coin", tags=["coin"])
logger = logging.getLogger(__name__)


@router.get("/balance", response_model=BaseResponse)
def balance(
    current_member: MemberSchema = Depends(require_member),
    coin_service: CoinService = Depends(get_coin_service),
) -> Any:
    result = coin_service.get_balance(current_member)
    return BaseResponse(success=True, data=result.model_dump())


@router.post("/charge", response_model=BaseResponse)
def charge(
    request: ChargeCoinRequest,
    current_member: MemberSchema = Depends(require_member),
    coin_service: CoinService = Depends(get_coin_service),
) -> Any:
    """코인 충전"""
    result = coin_service.charge(current_member, request)
    return BaseResponse(
        success=True,
        data={"msg": "SUCCESS", **result.model_dump()},
        meta={"redirect": "/coin/list"},
    )


@router.get("/list", response_model=BaseResponse)
def charge_list(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_member: MemberSchema = Depends(require_member),
    coin_service: CoinService = Depends(get_coin_service),
) -> Any:
    """충전 내역 (최신순)"""
    history = coin_service.charge_history(current_member, limit=limit, offset=offset)
    return BaseResponse(
        success=True,
        data=history.model_dump(mode="json"),
        meta={"limit": limit, "offset": offset},
    )


@router.get("/pay-list", response_model=BaseResponse)
def pay_list(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_member: MemberSchema = Depends(require_member),
    coin_service: CoinService = Depends(get_coin_service),
) -> Any:
    """사용 내역 (최신순)"""
    history = coin_service.pay_history(current_member, limit=limit, offset=offset)
    return BaseResponse(
        success=True,
        data=history.model_dump(mode="json"),
        meta={"limit": limit, "offset": offset},
    )
