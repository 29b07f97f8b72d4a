import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from imageshop.schemas.board import Board
from imageshop.schemas.pagination import Page, Pagination


@pytest.fixture
def alice_board(client, login_as, member):
    login_as(member)
    res = client.post("/board/register", json={"title": "Alice post", "content": "hi"})
    assert res.status_code == 200
    return res.json()["data"]["board"]


class TestBoardRouter:
    def test_register_form_prefills_writer(self, client, login_as, member):
        login_as(member)
        res = client.get("/board/register")
        assert res.json()["data"]["writer"] == "alice"

    def test_register_ignores_client_writer(self, client, login_as, member):
        login_as(member)
        res = client.post(
            "/board/register", json={"title": "t", "content": "c", "writer": "mallory"}
        )
        assert res.json()["data"]["board"]["writer"] == "alice"

    def test_register_requires_login(self, client):
        res = client.post("/board/register", json={"title": "t", "content": "c"})
        assert res.status_code == 401
        assert res.json()["success"] is False

    def test_non_owner_modify_is_forbidden(self, client, login_as, alice_board, other_member):
        login_as(other_member)

        res = client.post(
            "/board/modify",
            json={"board_no": alice_board["board_no"], "title": "hacked", "content": "x"},
        )

        assert res.status_code == 403
        assert res.json()["error"]["code"] == "AUTH_002"
        read = client.get("/board/read", params={"boardNo": alice_board["board_no"]})
        assert read.json()["data"]["title"] == "Alice post"

    def test_admin_can_remove(self, client, login_as, alice_board, admin):
        login_as(admin)

        res = client.post("/board/remove", params={"boardNo": alice_board["board_no"]})

        assert res.status_code == 200
        assert res.json()["meta"]["redirect"] == "/board/list"

    def test_list_with_search(self, client, login_as, member):
        login_as(member)
        for title in ["apple pie", "banana", "Apple juice"]:
            client.post("/board/register", json={"title": title, "content": "-"})

        res = client.get(
            "/board/list",
            params={"page": 1, "sizePerPage": 10, "searchType": "t", "keyword": "apple"},
        )

        body = res.json()
        assert res.status_code == 200
        assert [b["title"] for b in body["data"]["boards"]] == ["Apple juice", "apple pie"]
        assert body["data"]["pagination"]["total_count"] == 2
        assert body["meta"]["pgrq"]["searchType"] == "t"
        assert len(body["meta"]["searchTypeCodeValueList"]) == 7

    def test_list_uses_configured_default_page_size(
        self, app, client, login_as, member, db_session, test_settings
    ):
        from imageshop import deps
        from imageshop.services.board_service import BoardService

        login_as(member)
        for i in range(5):
            client.post("/board/register", json={"title": f"post {i}", "content": "-"})

        settings = test_settings.model_copy(update={"DEFAULT_PAGE_SIZE": 3})
        app.dependency_overrides[deps.get_board_service] = lambda: BoardService(db_session, settings)
        res = client.get("/board/list")

        body = res.json()
        assert res.status_code == 200
        assert body["data"]["pagination"]["size_per_page"] == 3
        assert len(body["data"]["boards"]) == 3
        assert body["meta"]["pgrq"]["sizePerPage"] == 3

    def test_invalid_search_type(self, client):
        res = client.get("/board/list", params={"searchType": "xyz"})
        assert res.status_code == 422
        assert res.json()["error"]["code"] == "VALIDATION_001"


class FakeBoardService:
    def __init__(self, db=None):
        pass

    def list(self, page_request):
        board = Board(board_no=7, title="stub", content="stub", writer="stub")
        return Page[Board](
            content=[board],
            pagination=Pagination.build(page_request.page, page_request.size_per_page or 10, 1),
        )


def test_board_service_provider_override():
    from imageshop import deps
    from imageshop.main import app

    container = app.container  # type: ignore
    container.services.board_service.override(providers.Factory(FakeBoardService))
    app.dependency_overrides[deps.get_db] = lambda: None
    try:
        res = TestClient(app).get("/board/list")
        assert res.status_code == 200
        assert res.json()["data"]["boards"][0]["board_no"] == 7
    finally:
        container.services.board_service.reset_override()
        app.dependency_overrides.clear()
