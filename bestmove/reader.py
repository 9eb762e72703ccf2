"""
テキスト入力から盤面を読み込む。

入力形式（1 局面分）
- 1 行目: タイトル（そのまま保持）
- 2 行目: 列数 行数 手番（'B' または 'W'、空白区切り）
- 以降 `行数` 行: 各文字がセル（'B'=黒, 'W'=白, それ以外=空き）

局面の前の空行は読み飛ばすので、局面どうしは空行で区切ってよい。
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from .logic import BLACK, WHITE, Board, cell_from_char, validate

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """入力テキストが盤面として解釈できない。"""


def _strip_newline(line: str) -> str:
    # 行末の空白はセル（空きマス）なので改行だけ落とす
    return line.rstrip("\r\n")


def parse_header(line: str) -> Tuple[int, int, int]:
    """ヘッダ行 "列数 行数 手番" を (columns, rows, player) に変換する。"""
    parts = line.split()
    if len(parts) != 3:
        raise BoardFormatError(f"Expected '<columns> <rows> <B|W>', got {line.strip()!r}")
    try:
        columns, rows = int(parts[0]), int(parts[1])
    except ValueError:
        raise BoardFormatError(f"Board size must be integers, got {line.strip()!r}") from None
    mover = parts[2].upper()
    if mover not in ("B", "W"):
        raise BoardFormatError(f"Player to move must be 'B' or 'W', got {parts[2]!r}")
    return columns, rows, BLACK if mover == "B" else WHITE


def read_board(lines: Iterator[str]) -> Optional[Board]:
    """行イテレータから 1 局面を読み込む。入力終端なら None。

    形式の誤りは `BoardFormatError`。
    """
    title = None
    for line in lines:
        if line.strip():
            title = _strip_newline(line)
            break
    if title is None:
        return None

    header = next(lines, None)
    if header is None:
        raise BoardFormatError(f"Missing size line after title {title!r}")
    columns, rows, player = parse_header(header)

    board = Board.empty(columns, rows, player, title)
    if not validate(board):
        logger.debug("Board %r has out-of-range size %dx%d", title, columns, rows)
        raise BoardFormatError(f"Board size {columns}x{rows} is out of range for {title!r}")

    for r in range(rows):
        line = next(lines, None)
        if line is None:
            raise BoardFormatError(f"Board {title!r} ended after {r} of {rows} rows")
        for c, ch in enumerate(_strip_newline(line)[:columns]):
            board.cells[r][c] = cell_from_char(ch)
    logger.debug("Read board %r (%dx%d)", title, columns, rows)
    return board


def iter_boards(lines: Iterable[str]) -> Iterator[Board]:
    """入力が尽きるまで局面を順に返す。"""
    it = iter(lines)
    while True:
        board = read_board(it)
        if board is None:
            return
        yield board
