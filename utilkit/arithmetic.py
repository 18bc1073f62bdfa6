"""Arithmetic helpers."""

Number = int | float


def add_number(a: Number, b: Number) -> Number:
    """Return the sum of a and b."""
    return a + b


def subtract_number(a: Number, b: Number) -> Number:
    """Return a minus b."""
    return a - b
