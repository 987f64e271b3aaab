"""Tests for half-up rounding."""

import pytest

from ridefuel.core.rounding import round_half_up


@pytest.mark.parametrize(
    "value, ndigits, expected",
    [
        (52.5, 0, 53.0),
        (2.5, 0, 3.0),
        (0.5, 0, 1.0),
        (52.4, 0, 52.0),
        (0.25, 1, 0.3),
        (18.75, 1, 18.8),
        (3.333, 1, 3.3),
    ],
)
def test_halves_round_up(value: float, ndigits: int, expected: float) -> None:
    """Halves go up where Python's round would go to the even neighbour."""
    assert round_half_up(value, ndigits) == pytest.approx(expected)


def test_whole_numbers_are_unchanged() -> None:
    """Values already on the grid pass through."""
    assert round_half_up(60.0) == 60.0
    assert round_half_up(1.5, 1) == pytest.approx(1.5)
