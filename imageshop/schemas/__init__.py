from .auth import BaseResponse, Error, Token, TokenData, LoginRequest
from .member import Member, MemberCreate, MemberUpdate
from .item import Item, PurchaseResult
from .board import Board, BoardCreate, BoardUpdate
from .pagination import Page, PageRequest, Pagination, SearchType, CodeLabelValue
