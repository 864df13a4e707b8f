import pytest

from blogapi.core.exceptions import InvalidSortField
from blogapi.core.text import make_slug, like_pattern
from blogapi.models.post import Post
from blogapi.storage.query_builder import ListParams, PageResult, sort_allow_list, resolve_sort


class TestListParams:

    def test_defaults(self):
        params = ListParams()
        assert params.page == 1
        assert params.limit == 10
        assert params.sort_by == "id"
        assert params.offset == 0

    def test_offset(self):
        assert ListParams(page=3, limit=4).offset == 8


class TestPageResult:

    def test_total_pages_rounds_up(self):
        assert PageResult(rows=[], count=9, page=1, limit=4).total_pages == 3

    def test_total_pages_exact(self):
        assert PageResult(rows=[], count=8, page=1, limit=4).total_pages == 2

    def test_total_pages_empty(self):
        assert PageResult(rows=[], count=0, page=1, limit=10).total_pages == 0


class TestSortAllowList:

    def test_snake_and_camel_keys(self):
        allowed = sort_allow_list(Post.id, Post.read_time)
        assert set(allowed) == {"id", "read_time", "readTime"}
        assert resolve_sort(allowed, "readTime") is allowed["read_time"]

    def test_unknown_field_rejected(self):
        allowed = sort_allow_list(Post.id)
        with pytest.raises(InvalidSortField) as exc_info:
            resolve_sort(allowed, "password")
        assert exc_info.value.field == "password"
        assert exc_info.value.allowed == ["id"]


class TestText:

    def test_make_slug(self):
        assert make_slug("Hello World!") == "hello-world"

    def test_make_slug_lowercases(self):
        assert make_slug("FastAPI Tips") == "fastapi-tips"

    def test_make_slug_empty(self):
        assert make_slug("") == ""

    def test_like_pattern_escapes_wildcards(self):
        assert like_pattern("50%_off") == "%50\\%\\_off%"

    def test_like_pattern_plain(self):
        assert like_pattern("bar") == "%bar%"
