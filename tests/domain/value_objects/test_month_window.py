"""Unit tests for MonthWindow value object."""

from datetime import datetime

import pytest
from domain.value_objects import MonthWindow


class TestMonthWindow:
    """Test UTC calendar month windows."""

    def test_containing_mid_month(self):
        """Test the window around a mid-month instant."""
        window = MonthWindow.containing(datetime(2024, 5, 15, 12, 30))
        assert window.start == datetime(2024, 5, 1)
        assert window.end == datetime(2024, 6, 1)

    def test_december_rolls_into_next_year(self):
        """Test that December ends at the start of next January."""
        window = MonthWindow.containing(datetime(2024, 12, 31, 23, 59))
        assert window.start == datetime(2024, 12, 1)
        assert window.end == datetime(2025, 1, 1)

    def test_window_is_half_open(self):
        """Test that the start is inside the window and the end is not."""
        window = MonthWindow.containing(datetime(2024, 2, 10))
        assert datetime(2024, 2, 1) in window
        assert datetime(2024, 2, 29, 23, 59, 59) in window
        assert datetime(2024, 3, 1) not in window
        assert datetime(2024, 1, 31, 23, 59, 59) not in window

    def test_inverted_bounds_raise_error(self):
        """Test that an end before the start raises ValueError."""
        with pytest.raises(ValueError):
            MonthWindow(start=datetime(2024, 6, 1), end=datetime(2024, 5, 1))

    def test_str(self):
        """Test the string form of the window."""
        assert str(MonthWindow.containing(datetime(2024, 5, 15))) == "2024-05"
