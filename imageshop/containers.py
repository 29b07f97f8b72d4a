from dependency_injector import containers, providers

from imageshop.services.auth_service import AuthService
from imageshop.services.member_service import MemberService
from imageshop.services.board_service import BoardService
from imageshop.services.item_service import ItemService
from imageshop.services.user_item_service import UserItemService
from imageshop.services.coin_service import CoinService
from imageshop.services.code_service import CodeService
from imageshop.services.file_storage_service import FileStorageService
from imageshop.config import Settings


class ConfigModule(containers.DeclarativeContainer):
    """Application configuration."""

    config = providers.Singleton(Settings)


class ServiceModule(containers.DeclarativeContainer):
    """Service layer dependencies.

    DB 세션은 요청마다 ``deps.get_db`` 가 열고 닫으므로, 서비스 팩토리는
    호출 시점에 ``db`` 인자를 받는다.
    """

    config = providers.DependenciesContainer()

    auth_service = providers.Factory(AuthService, settings=config.config)
    member_service = providers.Factory(MemberService, settings=config.config)
    board_service = providers.Factory(BoardService, settings=config.config)
    item_service = providers.Factory(ItemService, settings=config.config)
    user_item_service = providers.Factory(UserItemService, settings=config.config)
    coin_service = providers.Factory(CoinService)
    code_service = providers.Factory(CodeService)
    file_storage_service = providers.Factory(FileStorageService, settings=config.config)


class Container(containers.DeclarativeContainer):
    """Application container."""

    wiring_config = containers.WiringConfiguration(
        modules=["imageshop.deps"],
    )

    config = providers.Container(ConfigModule)
    services = providers.Container(ServiceModule, config=config)
