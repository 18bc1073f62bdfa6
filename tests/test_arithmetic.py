"""Tests for arithmetic helpers."""

from utilkit.arithmetic import add_number, subtract_number


class TestArithmetic:
    """Tests for add_number and subtract_number."""

    def test_add(self):
        assert add_number(1, 2) == 3
        assert add_number(-1, 5) == 4

    def test_subtract(self):
        assert subtract_number(5, 2) == 3
        assert subtract_number(10, -5) == 15

    def test_floats(self):
        assert add_number(0.5, 0.25) == 0.75
