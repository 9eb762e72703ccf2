"""Shared board fixtures for the best-move tests."""

import pytest

from bestmove.logic import BLACK, WHITE, Board


@pytest.fixture
def opening_board() -> Board:
    """4x4 board with the standard Othello centre, BLACK to move."""
    return Board.from_strings(
        [
            "    ",
            " BW ",
            " WB ",
            "    ",
        ],
        BLACK,
        title="Opening",
    )


@pytest.fixture
def single_capture_board() -> Board:
    """One row where only the right-hand cell captures, in one direction."""
    return Board.from_strings(["BW "], BLACK, title="Single")


@pytest.fixture
def white_board() -> Board:
    """5x5 position with WHITE to move and several capturing lines."""
    return Board.from_strings(
        [
            "W    ",
            " B   ",
            " BBW ",
            "  W  ",
            "     ",
        ],
        WHITE,
        title="White to move",
    )
