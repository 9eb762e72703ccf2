"""
リバーシ（オセロ）の最善手探索で使う盤面とルールの中核。

役割
- 盤面表現（任意サイズ、最大 25x25）と妥当性チェック
- 着手候補の事前フィルタ（隣に相手石があるか）
- 8方向レイによる反転数のカウント

設計のポイント
- 盤面は `Board.cells`（`List[List[int]]`、0=空, 1=黒, -1=白）で表現
- プレイヤーは `BLACK=1`, `WHITE=-1` の整数で持つ（相手は符号反転）
- 不正な盤面・範囲外座標は例外にせず、False / 0 を返して無害化する
- 反転数の計算は盤面を書き換えない（手番色を引数で受け取る）
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


# セル状態の定数
EMPTY = 0   # 空きマス
BLACK = 1   # 黒石
WHITE = -1  # 白石

Player = int  # BLACK or WHITE
Coord = Tuple[int, int]

# 列は 'a'..'y' で表すため 26 未満
MAX_BOARD_COLUMNS = 26
MAX_BOARD_ROWS = 26


DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1),  (1, 0), (1, 1),
)

_CELL_CHARS = {"B": BLACK, "W": WHITE}


def player_name(player: Player) -> str:
    """表示用のプレイヤー名（"BLACK" / "WHITE"）。"""
    return "WHITE" if player == WHITE else "BLACK"


def cell_from_char(ch: str) -> int:
    """入力文字をセル値へ。'B'/'W' 以外はすべて空きマス扱い。"""
    return _CELL_CHARS.get(ch, EMPTY)


@dataclass
class Board:
    """1 局面分の盤面。

    - columns / rows: 盤の有効範囲（`cells` はちょうど rows x columns）
    - to_move: 次に打つ側（BLACK または WHITE）
    - title: 表示用の見出し（ロジックでは使わない）
    """

    columns: int
    rows: int
    to_move: Player
    title: str = ""
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        # セル未指定なら rows x columns の空き盤面
        if not self.cells:
            self.cells = [[EMPTY for _ in range(max(self.columns, 0))] for _ in range(max(self.rows, 0))]

    @classmethod
    def empty(cls, columns: int, rows: int, to_move: Player, title: str = "") -> "Board":
        """すべて空きマスの盤面を作る。"""
        return cls(columns, rows, to_move, title)

    @classmethod
    def from_strings(cls, lines: Sequence[str], to_move: Player, title: str = "") -> "Board":
        """'B' / 'W' / 空白の文字列リストから盤面を作る。

        列数は最長の行に合わせ、短い行は空きマスで埋める。
        """
        columns = max((len(line) for line in lines), default=0)
        board = cls.empty(columns, len(lines), to_move, title)
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                board.cells[r][c] = cell_from_char(ch)
        return board

    def cell(self, r: int, c: int) -> int:
        return self.cells[r][c]

    def copy(self) -> "Board":
        """独立したコピーを返す（セル配列も複製）。"""
        return Board(self.columns, self.rows, self.to_move, self.title, [row[:] for row in self.cells])


def validate(board: Board) -> bool:
    """盤面の不変条件（サイズ・セル配列の形・手番）を満たすかどうか。"""
    return (
        0 < board.columns < MAX_BOARD_COLUMNS
        and 0 < board.rows < MAX_BOARD_ROWS
        and board.to_move in (BLACK, WHITE)
        and len(board.cells) == board.rows
        and all(len(row) == board.columns for row in board.cells)
    )


def in_bounds(board: Board, r: int, c: int) -> bool:
    """(r, c) が盤の有効範囲内かどうか。"""
    return 0 <= r < board.rows and 0 <= c < board.columns


def neighbors(board: Board, r: int, c: int) -> Iterable[Coord]:
    """(r, c) の周囲 8 マスのうち盤内にあるものを列挙する。"""
    for dr, dc in DIRECTIONS:
        rr, cc = r + dr, c + dc
        # 行は行数、列は列数でそれぞれクリップ
        if in_bounds(board, rr, cc):
            yield rr, cc


def can_play_at(board: Board, r: int, c: int) -> bool:
    """(r, c) に打てる「可能性」があるか（空きマスかつ隣に相手石）。

    必要条件のみの判定で、実際に石が返るかどうかは `count_reversals` で確かめる。
    不正な盤面・範囲外座標は False。
    """
    if not validate(board) or not in_bounds(board, r, c):
        return False
    if board.cells[r][c] != EMPTY:
        return False
    return any(
        board.cells[rr][cc] not in (EMPTY, board.to_move)
        for rr, cc in neighbors(board, r, c)
    )


def count_direction(board: Board, r: int, c: int, dr: int, dc: int,
                    player: Optional[Player] = None) -> int:
    """(r, c) に `player` が打った場合に方向 (dr, dc) で返る石の数。

    相手石が連続し、その直後に自分石があるときだけその個数を返す。
    途中で空きマスに当たる、または盤外に出た場合は 0。
    `player` 省略時は盤面の手番側。(r, c) 自体の中身は見ない。
    """
    if not validate(board) or not in_bounds(board, r, c) or (dr, dc) not in DIRECTIONS:
        return 0
    return _ray_count(board, r, c, dr, dc, board.to_move if player is None else player)


def _ray_count(board: Board, r: int, c: int, dr: int, dc: int, player: Player) -> int:
    # 盤面・座標・方向は呼び出し側で検査済み
    count = 0
    rr, cc = r + dr, c + dc
    while in_bounds(board, rr, cc):
        cell = board.cells[rr][cc]
        if cell == player:
            return count
        if cell == EMPTY:
            return 0
        count += 1
        rr += dr
        cc += dc
    # Ran off the board without a closing piece
    return 0


def count_reversals(board: Board, r: int, c: int, player: Optional[Player] = None) -> int:
    """着手 (r, c) で返る石の総数（8 方向の合計）。不正な盤面・範囲外座標は 0。"""
    if not validate(board) or not in_bounds(board, r, c):
        return 0
    if player is None:
        player = board.to_move
    return sum(_ray_count(board, r, c, dr, dc, player) for dr, dc in DIRECTIONS)
