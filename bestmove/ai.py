"""
1 手先の反転数だけを見て最善手を選ぶ。

方針
- 先読みはせず、盤面を左上から行優先で走査して貪欲に選ぶ
- 評価値は「その手で返る相手石の数」
- 同点の場合は走査順で最初に見つかった手を採用（厳密に大きいときだけ更新）
- どの手でも 1 枚も返らなければ None（エラーではない）
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Optional

from .logic import Board, can_play_at, count_reversals, player_name, validate

logger = logging.getLogger(__name__)


class Move(NamedTuple):
    """最善手の結果（0 始まりの行・列と反転数）。"""

    row: int
    col: int
    reversals: int

    @property
    def column_letter(self) -> str:
        return chr(ord("a") + self.col)

    @property
    def row_number(self) -> int:
        return self.row + 1


def candidate_moves(board: Board) -> Iterator[Move]:
    """事前フィルタを通過したマスと、その反転数を走査順に列挙する。"""
    for r in range(board.rows):
        for c in range(board.columns):
            if can_play_at(board, r, c):
                yield Move(r, c, count_reversals(board, r, c))


def best_move(board: Board) -> Optional[Move]:
    """最も多く相手石を返す着手を返す。該当なし・不正な盤面は None。"""
    if not validate(board):
        logger.debug("Rejected invalid board %r (%dx%d, to_move=%r)",
                     board.title, board.columns, board.rows, board.to_move)
        return None
    best: Optional[Move] = None
    for move in candidate_moves(board):
        if move.reversals > (best.reversals if best is not None else 0):
            best = move
            logger.debug("New best for %s: %s", player_name(board.to_move), best)
    logger.debug("Best move for %r: %s", board.title, best)
    return best
