"""
Unit Tests for ArtworkPage Model
"""

import pytest

from artwork_browser.core.models import Artwork, ArtworkPage, PAGE_SIZE


class TestArtworkPage:
    """Tests for ArtworkPage dataclass."""

    def test_init_when_valid_then_ids_in_record_order(self):
        page = ArtworkPage(page_number=1, records=(Artwork(id=9), Artwork(id=3)), total_count=2)
        assert page.ids == (9, 3)

    def test_init_when_default_page_size_then_twelve(self):
        page = ArtworkPage(page_number=1, records=(), total_count=0)
        assert page.page_size == PAGE_SIZE == 12

    def test_init_when_page_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="page_number"):
            ArtworkPage(page_number=0, records=(), total_count=0)

    def test_init_when_negative_total_then_raises_error(self):
        with pytest.raises(ValueError, match="total_count"):
            ArtworkPage(page_number=1, records=(), total_count=-1)

    def test_init_when_zero_page_size_then_raises_error(self):
        with pytest.raises(ValueError, match="page_size"):
            ArtworkPage(page_number=1, records=(), total_count=0, page_size=0)

    def test_init_when_duplicate_ids_then_raises_error(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ArtworkPage(page_number=1, records=(Artwork(id=1), Artwork(id=1)), total_count=2)

    @pytest.mark.parametrize(
        "total, expected",
        [(0, 0), (1, 1), (12, 1), (13, 2), (30, 3), (129000, 10750)],
    )
    def test_total_pages_when_total_given_then_rounds_up(self, total, expected):
        page = ArtworkPage(page_number=1, records=(), total_count=total)
        assert page.total_pages == expected

    def test_is_empty_when_no_records_then_true(self):
        assert ArtworkPage(page_number=4, records=(), total_count=30).is_empty

    def test_contains_when_id_on_page_then_true(self, make_page):
        page = make_page(2, 30)
        assert page.contains(13)
        assert not page.contains(1)

    def test_make_page_when_last_page_then_partial(self, make_page):
        page = make_page(3, 30)
        assert page.ids == tuple(range(25, 31))
