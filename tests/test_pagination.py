from imageshop.schemas.pagination import PageRequest, Pagination, SearchType


class TestSearchType:
    def test_fields(self):
        assert SearchType.NONE.fields == []
        assert SearchType.TITLE.fields == ["title"]
        assert SearchType.TITLE_CONTENT.fields == ["title", "content"]
        assert SearchType.CONTENT_WRITER.fields == ["content", "writer"]
        assert SearchType.TITLE_CONTENT_WRITER.fields == ["title", "content", "writer"]


class TestPageRequest:
    def test_offset(self):
        assert PageRequest(page=1, size_per_page=10).offset == 0
        assert PageRequest(page=3, size_per_page=10).offset == 20

    def test_has_keyword(self):
        assert not PageRequest(search_type=SearchType.NONE, keyword="x").has_keyword
        assert not PageRequest(search_type=SearchType.TITLE, keyword="  ").has_keyword
        assert not PageRequest(search_type=SearchType.TITLE).has_keyword
        assert PageRequest(search_type=SearchType.TITLE, keyword="x").has_keyword


class TestPagination:
    def test_empty_result_has_single_page(self):
        p = Pagination.build(page=1, size_per_page=10, total_count=0)
        assert p.total_pages == 1
        assert p.page_list == [1]
        assert p.prev is False and p.next is False

    def test_first_block(self):
        p = Pagination.build(page=3, size_per_page=10, total_count=250)
        assert p.total_pages == 25
        assert (p.start_page, p.end_page) == (1, 10)
        assert p.prev is False
        assert p.next is True

    def test_middle_block(self):
        p = Pagination.build(page=11, size_per_page=10, total_count=250)
        assert (p.start_page, p.end_page) == (11, 20)
        assert p.prev is True
        assert p.next is True

    def test_last_block_is_truncated(self):
        p = Pagination.build(page=21, size_per_page=10, total_count=250)
        assert (p.start_page, p.end_page) == (21, 25)
        assert p.page_list == [21, 22, 23, 24, 25]
        assert p.next is False
