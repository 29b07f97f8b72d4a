import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# 앱 임포트 전에 DB를 SQLite 메모리로 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from imageshop.config import Settings
from imageshop.core.security import hash_password
from imageshop.models import Base
from imageshop.models.member import MemberRole
from imageshop.repositories.member_repository import MemberRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(
        autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
    )
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        DATABASE_URL="sqlite://",
        UPLOAD_PATH=str(tmp_path / "upload"),
        SECRET_KEY="test-secret",
    )


def _create_member(db_session, user_id: str, role: MemberRole, coin: int = 0):
    repo = MemberRepository(db_session)
    member = repo.create_member(
        user_id=user_id,
        password_hash=hash_password("secret123"),
        user_name=user_id.title(),
        role=role,
    )
    if coin:
        member = repo.change_coin(member.user_no, coin)
    return member


@pytest.fixture
def member(db_session):
    return _create_member(db_session, "alice", MemberRole.MEMBER, coin=1000)


@pytest.fixture
def other_member(db_session):
    return _create_member(db_session, "bob", MemberRole.MEMBER)


@pytest.fixture
def admin(db_session):
    return _create_member(db_session, "admin", MemberRole.ADMIN)


@pytest.fixture
def app(db_session, test_settings):
    """요청마다 테스트 세션/설정을 쓰도록 의존성을 교체한 앱"""
    from imageshop import deps
    from imageshop.database.session import get_db
    from imageshop.main import app
    from imageshop.services.auth_service import AuthService
    from imageshop.services.board_service import BoardService
    from imageshop.services.code_service import CodeService
    from imageshop.services.coin_service import CoinService
    from imageshop.services.file_storage_service import FileStorageService
    from imageshop.services.item_service import ItemService
    from imageshop.services.member_service import MemberService
    from imageshop.services.user_item_service import UserItemService

    def override_get_db():
        yield db_session

    overrides = {
        get_db: override_get_db,
        deps.get_auth_service: lambda: AuthService(db_session, test_settings),
        deps.get_member_service: lambda: MemberService(db_session, test_settings),
        deps.get_board_service: lambda: BoardService(db_session, test_settings),
        deps.get_item_service: lambda: ItemService(db_session, test_settings),
        deps.get_user_item_service: lambda: UserItemService(db_session, test_settings),
        deps.get_coin_service: lambda: CoinService(db_session),
        deps.get_code_service: lambda: CodeService(db_session),
        deps.get_file_storage_service: lambda: FileStorageService(test_settings),
    }
    app.dependency_overrides.update(overrides)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def login_as(app):
    """인증 의존성을 주어진 회원으로 고정"""
    from imageshop.core import auth_middleware

    def _login_as(member):
        app.dependency_overrides[auth_middleware.get_current_member] = lambda: member

    return _login_as
