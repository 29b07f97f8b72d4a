import logging
from dotenv import load_dotenv
from fastapi import FastAPI
from mangum import Mangum
from starlette.middleware.cors import CORSMiddleware

from imageshop import containers
from imageshop.config import settings
from imageshop.core.exception_handlers import register_exception_handlers
from imageshop.core.logging_middleware import LoggingMiddleware
from imageshop.logging_config import setup_logging
from imageshop.routers import (
    auth_router,
    board_router,
    code_router,
    coin_router,
    health_router,
    item_router,
    member_router,
    user_item_router,
)

load_dotenv("imageshop/.env")
setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION)
    app.container = containers.Container()  # type: ignore

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    @app.get("/")
    def hello() -> dict:
        return {"message": f"{settings.APP_NAME} is running"}

    app.include_router(health_router.router)
    app.include_router(auth_router.router)
    app.include_router(member_router.router)
    app.include_router(board_router.router)
    app.include_router(item_router.router)
    app.include_router(coin_router.router)
    app.include_router(user_item_router.router)
    app.include_router(code_router.router)
    app.include_router(code_router.group_router)
    app.include_router(code_router.detail_router)

    logger.info(f"{settings.APP_NAME} started (environment={settings.ENVIRONMENT})")
    return app


app = create_app()

handler = Mangum(app)
