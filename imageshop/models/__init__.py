# 모든 모델을 임포트하여 Base.metadata 에 등록

from .base import Base, BaseModel
from .member import Member, MemberRole
from .item import Item
from .board import Board
from .user_item import UserItem
from .coin import ChargeCoin, PayCoin
from .code import CodeGroup, CodeDetail

__all__ = [
    "Base",
    "BaseModel",
    "Member",
    "MemberRole",
    "Item",
    "Board",
    "UserItem",
    "ChargeCoin",
    "PayCoin",
    "CodeGroup",
    "CodeDetail",
]
