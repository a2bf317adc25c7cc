"""Tests for page selection."""

import pytest

from svgcrop.errors import OutOfRangeError
from svgcrop.pages import select_page


class TestSelectPage:
    def test_default_is_first_page(self):
        assert select_page(["a", "b"]) == "a"

    def test_one_based(self):
        assert select_page(["a", "b", "c"], 3) == "c"

    def test_past_end(self):
        with pytest.raises(OutOfRangeError) as excinfo:
            select_page(["a"], 2)
        message = str(excinfo.value)
        assert "2" in message
        assert "1" in message

    def test_reports_page_count(self):
        with pytest.raises(OutOfRangeError, match="Page 7 .* 3 pages"):
            select_page(["a", "b", "c"], 7)

    @pytest.mark.parametrize("number", [0, -1])
    def test_below_one(self, number):
        with pytest.raises(OutOfRangeError):
            select_page(["a"], number)

    def test_empty_document(self):
        with pytest.raises(OutOfRangeError, match="0 pages"):
            select_page([], 1)

    @pytest.mark.parametrize("number", [True, 1.0, "1"])
    def test_non_integer(self, number):
        with pytest.raises(OutOfRangeError):
            select_page(["a"], number)
