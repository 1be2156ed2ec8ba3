import pytest

from modules.pagination.service import build_page_meta, offset_for, paginate


class TestPageMeta:
    @pytest.mark.parametrize(
        "page,has_next,has_previous",
        [
            (1, True, False),
            (2, True, True),
            (3, False, True),
        ],
    )
    def test_fifteen_items_by_five(self, page, has_next, has_previous):
        meta = build_page_meta(total_items=15, limit=5, page=page)

        assert meta.total_pages == 3
        assert meta.current_page == page
        assert meta.items_per_page == 5
        assert meta.has_next_page is has_next
        assert meta.has_previous_page is has_previous

    def test_partial_last_page(self):
        assert build_page_meta(total_items=11, limit=5, page=1).total_pages == 3

    def test_page_past_the_end_is_not_clamped(self):
        meta = build_page_meta(total_items=15, limit=5, page=4)

        assert meta.current_page == 4
        assert meta.total_pages == 3
        assert meta.has_next_page is False
        assert meta.has_previous_page is True

    def test_empty_listing(self):
        meta = build_page_meta(total_items=0, limit=10, page=1)

        assert meta.total_pages == 0
        assert meta.has_next_page is False
        assert meta.has_previous_page is False

    @pytest.mark.parametrize("limit,page", [(0, 1), (5, 0), (-1, 1)])
    def test_bounds(self, limit, page):
        with pytest.raises(ValueError):
            build_page_meta(total_items=5, limit=limit, page=page)


class TestOffsets:
    @pytest.mark.parametrize("limit,page,offset", [(10, 1, 0), (10, 2, 10), (5, 4, 15)])
    def test_offset_for(self, limit, page, offset):
        assert offset_for(limit, page) == offset

    def test_paginate(self):
        page = paginate(["a", "b"], total_items=7, limit=2, page=2)
        assert page.data == ["a", "b"]
        assert page.meta.total_pages == 4
        assert page.meta.has_next_page is True
