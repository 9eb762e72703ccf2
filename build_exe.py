"""
PyInstaller で最善手 CLI を単体の実行ファイルにするビルドスクリプト。

ポイント
- コンソールアプリとしてビルド（標準入力から盤面を読むため）
- `--onefile` を付けたい場合は引数に指定
- `icon.ico` がこのディレクトリにあれば自動でアイコン適用

使い方
- 標準: `python build_exe.py`
- 1ファイル: `python build_exe.py --onefile`

出力
- フォルダ版: `dist/ReversiBestMove/ReversiBestMove(.exe)`
- 1ファイル版: `dist/ReversiBestMove(.exe)`
"""

from __future__ import annotations

import os
import sys

APP_NAME = "ReversiBestMove"


def build_options(argv: list[str], here: str | None = None) -> list[str]:
    """PyInstaller に渡すオプション一覧を組み立てる。"""
    here = here or os.path.dirname(os.path.abspath(__file__))
    opts: list[str] = [
        "--console",
        "--name",
        APP_NAME,
        # main.py は単体スクリプトとして実行されるためパッケージを明示
        "--paths",
        here,
        "--hidden-import",
        "bestmove.cli",
    ]

    if "--onefile" in argv:
        opts.append("--onefile")

    # アイコンがあれば付与
    icon_path = os.path.join(here, "icon.ico")
    if os.path.exists(icon_path):
        opts += ["--icon", icon_path]

    # エントリ（パッケージ側の main から起動 → CLI）
    opts.append(os.path.join(here, "bestmove", "main.py"))
    return opts


def main() -> None:
    import PyInstaller.__main__

    opts = build_options(sys.argv[1:])

    print("PyInstaller options:")
    for o in opts:
        print(" ", o)

    PyInstaller.__main__.run(opts)


if __name__ == "__main__":
    main()
