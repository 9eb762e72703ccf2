"""Tests for reading boards from text."""

import io

import pytest

from bestmove.logic import BLACK, EMPTY, WHITE, Board
from bestmove.reader import BoardFormatError, iter_boards, parse_header, read_board

TWO_BOARDS = """\
First
4 4 B
    
 BW 
 WB 
    

Second
3 1 w
BW 
"""


def lines(text):
    return iter(io.StringIO(text))


class TestParseHeader:
    def test_parses_size_and_mover(self):
        assert parse_header("8 6 B\n") == (8, 6, BLACK)
        assert parse_header("  3\t2 w ") == (3, 2, WHITE)

    @pytest.mark.parametrize("line", ["", "4 4", "4 4 B extra", "x 4 B", "4 4 X"])
    def test_rejects_malformed(self, line):
        with pytest.raises(BoardFormatError):
            parse_header(line)


class TestReadBoard:
    def test_reads_title_size_and_cells(self):
        board = read_board(lines(TWO_BOARDS))
        assert board == Board.from_strings(["    ", " BW ", " WB ", "    "], BLACK, title="First")

    def test_keeps_trailing_spaces_as_empty_cells(self):
        board = read_board(lines("T\n3 1 W\n  B\n"))
        assert board.cells == [[EMPTY, EMPTY, BLACK]]

    def test_pads_short_rows_and_ignores_extra_characters(self):
        board = read_board(lines("T\n3 2 B\nW\nBWBWB\n"))
        assert board.cells == [[WHITE, EMPTY, EMPTY], [BLACK, WHITE, BLACK]]

    def test_end_of_input(self):
        assert read_board(lines("")) is None
        assert read_board(lines("\n\n")) is None

    def test_missing_header(self):
        with pytest.raises(BoardFormatError):
            read_board(lines("Title only\n"))

    def test_truncated_rows(self):
        with pytest.raises(BoardFormatError, match="1 of 3 rows"):
            read_board(lines("T\n3 3 B\nBW \n"))

    @pytest.mark.parametrize("header", ["0 3 B", "3 0 B", "26 3 B", "3 26 W"])
    def test_size_out_of_range(self, header):
        with pytest.raises(BoardFormatError, match="out of range"):
            read_board(lines(f"T\n{header}\n"))


class TestIterBoards:
    def test_reads_every_board(self):
        boards = list(iter_boards(io.StringIO(TWO_BOARDS)))
        assert [b.title for b in boards] == ["First", "Second"]
        assert boards[1].to_move == WHITE
        assert boards[1].cells == [[BLACK, WHITE, EMPTY]]

    def test_stops_at_malformed_board(self):
        it = iter_boards(io.StringIO(TWO_BOARDS.replace("3 1 w", "3 1")))
        assert next(it).title == "First"
        with pytest.raises(BoardFormatError):
            next(it)
