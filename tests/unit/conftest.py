"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from netvent import Table, map_table

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def shoot_input() -> str:
    """Envelope text for a "shoot" event, with every comment style.

    Returns:
        The commented envelope text.
    """
    return (
        "// comments can also be like this\n"
        '"shoot" // event name\n'
        "x 0 // int\n"
        "y 0.1 // float\n"
        'player_name "this person" // string\n'
        "gun_active true // bool"
    )


@pytest.fixture
def make_rectangle() -> "Callable[[int, int, int, int], Table]":
    """Factory fixture for map-mode rectangle tables.

    Returns:
        A callable taking x, y, width and height and returning a Table.

    Example:
        def test_rect(make_rectangle) -> None:
            rect = make_rectangle(10, 20, 100, 50)
            assert rect["width"].as_int() == 100
    """

    def create_rectangle(x: int, y: int, width: int, height: int) -> Table:
        return map_table(x=x, y=y, width=width, height=height)

    return create_rectangle
