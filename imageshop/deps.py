from typing import Callable

from dependency_injector.wiring import Provider, inject
from fastapi import Depends
from sqlalchemy.orm import Session

from imageshop.containers import Container
from imageshop.database.session import get_db

# Services
from imageshop.services.auth_service import AuthService
from imageshop.services.member_service import MemberService
from imageshop.services.board_service import BoardService
from imageshop.services.item_service import ItemService
from imageshop.services.user_item_service import UserItemService
from imageshop.services.coin_service import CoinService
from imageshop.services.code_service import CodeService
from imageshop.services.file_storage_service import FileStorageService


@inject
def get_auth_service(
    db: Session = Depends(get_db),
    factory: Callable[..., AuthService] = Depends(Provider[Container.services.auth_service]),
) -> AuthService:
    return factory(db=db)


@inject
def get_member_service(
    db: Session = Depends(get_db),
    factory: Callable[..., MemberService] = Depends(Provider[Container.services.member_service]),
) -> MemberService:
    return factory(db=db)


@inject
def get_board_service(
    db: Session = Depends(get_db),
    factory: Callable[..., BoardService] = Depends(Provider[Container.services.board_service]),
) -> BoardService:
    return factory(db=db)


@inject
def get_item_service(
    db: Session = Depends(get_db),
    factory: Callable[..., ItemService] = Depends(Provider[Container.services.item_service]),
) -> ItemService:
    return factory(db=db)


@inject
def get_user_item_service(
    db: Session = Depends(get_db),
    factory: Callable[..., UserItemService] = Depends(Provider[Container.services.user_item_service]),
) -> UserItemService:
    return factory(db=db)


@inject
def get_coin_service(
    db: Session = Depends(get_db),
    factory: Callable[..., CoinService] = Depends(Provider[Container.services.coin_service]),
) -> CoinService:
    return factory(db=db)


@inject
def get_code_service(
    db: Session = Depends(get_db),
    factory: Callable[..., CodeService] = Depends(Provider[Container.services.code_service]),
) -> CodeService:
    return factory(db=db)


@inject
def get_file_storage_service(
    factory: Callable[..., FileStorageService] = Depends(Provider[Container.services.file_storage_service]),
) -> FileStorageService:
    return factory()
