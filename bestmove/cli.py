"""
テキストベースのCLI。

役割
- 盤面の描画（列名 a.. / 行番号 1.. の枠付き）
- 入力（ファイルまたは標準入力）から局面を順に読み込み、最善手を表示
- 入力終端で終了メッセージを表示

設計のポイント
- 読み込みは `reader`、最善手は `ai` に委譲して表示に専念
- 最善手が無い局面は推奨行を出さないだけ（エラー扱いしない）
- 入力形式の誤りはそこで処理を打ち切り、終了コード 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import logic
from .ai import Move, best_move
from .reader import BoardFormatError, iter_boards

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 80


def _render_cell(v: int) -> str:
    """セルの内部値を表示用文字に変換。"""
    if v == logic.BLACK:
        return "B"
    if v == logic.WHITE:
        return "W"
    return " "


def _column_names(n: int) -> str:
    return "   " + "".join(f"{chr(ord('a') + c)} " for c in range(n)) + "  "


def _row_separator(n: int) -> str:
    return "  +" + "-+" * n


def print_board(board: logic.Board, out: Optional[TextIO] = None) -> None:
    """盤面をタイトル・座標ラベル付きで描画。不正な盤面は何も出さない。"""
    if not logic.validate(board):
        return
    n = board.columns
    print(board.title, file=out)
    print(file=out)
    print(_column_names(n), file=out)
    print(_row_separator(n), file=out)
    for r in range(board.rows):
        row = "".join(f"{_render_cell(board.cell(r, c))}|" for c in range(n))
        print(f"{r + 1:>2}|{row}{r + 1:<2}", file=out)
        print(_row_separator(n), file=out)
    print(_column_names(n), file=out)


def format_recommendation(board: logic.Board, move: Optional[Move]) -> Optional[str]:
    """最善手の推奨文。手が無ければ None。"""
    if move is None:
        return None
    return (
        f"The best move for {logic.player_name(board.to_move)} is "
        f"({move.column_letter}, {move.row_number}), "
        f"which will reverse {move.reversals} opponent piece(s)"
    )


def report(board: logic.Board, out: Optional[TextIO] = None) -> Optional[Move]:
    """1 局面分の盤面と推奨手を出力し、求めた最善手を返す。"""
    print_board(board, out)
    move = best_move(board)
    print(file=out)
    text = format_recommendation(board, move)
    if text is not None:
        print(text, file=out)
        print(file=out)
    return move


def process(stream: TextIO, out: Optional[TextIO] = None) -> int:
    """入力の全局面を処理して件数を返す。

    形式の誤りがあれば `BoardFormatError` をそのまま送出する（それ以降は読まない）。
    """
    count = 0
    try:
        for board in iter_boards(stream):
            report(board, out)
            print(SEPARATOR, file=out)
            print(file=out)
            count += 1
    except BoardFormatError:
        logger.error("Stopped after %d board(s): malformed input", count)
        raise
    finally:
        print("\n*** END OF PROCESSING ***\n", file=out)
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reversi-bestmove",
        description="Find the Reversi move that reverses the most opponent pieces.",
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="board file to read ('-' or omitted for standard input)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """エントリーポイント：引数解析→全局面を処理。"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        if args.input == "-":
            process(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as stream:
                process(stream)
    except BoardFormatError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
