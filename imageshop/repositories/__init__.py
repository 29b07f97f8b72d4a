# Repository layer - Data access with Pydantic responses

from .base import BaseRepository
from .member_repository import MemberRepository
from .board_repository import BoardRepository
from .item_repository import ItemRepository
from .user_item_repository import UserItemRepository
from .coin_repository import ChargeCoinRepository, PayCoinRepository
from .code_repository import CodeGroupRepository, CodeDetailRepository

__all__ = [
    "BaseRepository",
    "MemberRepository",
    "BoardRepository",
    "ItemRepository",
    "UserItemRepository",
    "ChargeCoinRepository",
    "PayCoinRepository",
    "CodeGroupRepository",
    "CodeDetailRepository",
]
