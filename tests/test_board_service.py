import pytest

from imageshop.core.exceptions import AuthorizationError, NotFoundError
from imageshop.schemas.board import BoardCreate, BoardUpdate
from imageshop.schemas.pagination import PageRequest, SearchType
from imageshop.services.board_service import BoardService


@pytest.fixture
def board_service(db_session, test_settings):
    return BoardService(db_session, test_settings)


@pytest.fixture
def boards(board_service, member, other_member):
    created = []
    created.append(board_service.register(member, BoardCreate(title="Hello world", content="first post")))
    created.append(board_service.register(member, BoardCreate(title="Second", content="nothing special")))
    created.append(board_service.register(other_member, BoardCreate(title="Bob writes", content="hello again")))
    return created


class TestBoardService:
    def test_register_forces_writer(self, board_service, member):
        board = board_service.register(member, BoardCreate(title="t", content="c"))
        assert board.writer == "alice"
        assert board.board_no > 0

    def test_register_form_prefills_writer(self, board_service, member):
        assert board_service.register_form(member).writer == "alice"

    def test_list_without_keyword_returns_all_newest_first(self, board_service, boards):
        page = board_service.list(PageRequest(page=1, size_per_page=10))

        assert page.pagination.total_count == 3
        assert [b.board_no for b in page.content] == sorted(
            [b.board_no for b in boards], reverse=True
        )

    def test_list_respects_page_size(self, board_service, boards):
        first = board_service.list(PageRequest(page=1, size_per_page=2))
        second = board_service.list(PageRequest(page=2, size_per_page=2))

        assert len(first.content) == 2
        assert len(second.content) == 1
        assert first.pagination.total_pages == 2
        assert first.pagination.next is False

    def test_search_title_or_content_case_insensitive(self, board_service, boards):
        page = board_service.list(
            PageRequest(search_type=SearchType.TITLE_CONTENT, keyword="HELLO")
        )
        titles = {b.title for b in page.content}
        assert titles == {"Hello world", "Bob writes"}

    def test_search_title_only(self, board_service, boards):
        page = board_service.list(PageRequest(search_type=SearchType.TITLE, keyword="hello"))
        assert [b.title for b in page.content] == ["Hello world"]

    def test_search_writer(self, board_service, boards):
        page = board_service.list(PageRequest(search_type=SearchType.WRITER, keyword="bob"))
        assert [b.writer for b in page.content] == ["bob"]

    def test_none_search_type_ignores_keyword(self, board_service, boards):
        page = board_service.list(PageRequest(search_type=SearchType.NONE, keyword="zzz"))
        assert page.pagination.total_count == 3

    def test_page_size_is_capped(self, board_service, boards, test_settings):
        page = board_service.list(PageRequest(size_per_page=10_000))
        assert page.pagination.size_per_page == test_settings.MAX_PAGE_SIZE

    def test_page_size_defaults_to_setting(self, db_session, boards, test_settings):
        settings = test_settings.model_copy(update={"DEFAULT_PAGE_SIZE": 2})
        page = BoardService(db_session, settings).list(PageRequest())

        assert page.pagination.size_per_page == 2
        assert len(page.content) == 2
        assert page.pagination.total_pages == 2

    def test_owner_can_modify(self, board_service, boards, member):
        target = boards[0]
        updated = board_service.modify(
            member, BoardUpdate(board_no=target.board_no, title="Edited", content="c")
        )
        assert updated.title == "Edited"
        assert updated.writer == "alice"

    def test_non_owner_cannot_modify(self, board_service, boards, other_member):
        target = boards[0]
        with pytest.raises(AuthorizationError):
            board_service.modify(
                other_member, BoardUpdate(board_no=target.board_no, title="x", content="y")
            )
        assert board_service.read(target.board_no).title == "Hello world"

    def test_admin_can_remove_any_board(self, board_service, boards, admin):
        board_service.remove(admin, boards[0].board_no)
        with pytest.raises(NotFoundError):
            board_service.read(boards[0].board_no)

    def test_non_owner_cannot_remove(self, board_service, boards, member):
        with pytest.raises(AuthorizationError):
            board_service.remove(member, boards[2].board_no)

    def test_read_missing_board(self, board_service):
        with pytest.raises(NotFoundError):
            board_service.read(999)
