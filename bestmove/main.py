"""
CLI で起動するためのスクリプト。

通常の起動は `reversi-bestmove` や `python -m bestmove` でも可能ですが、
このファイルを直接実行した場合（PyInstaller のエントリも同じ）でも動くようにしています。
相対インポートを優先し、失敗時は親ディレクトリを `sys.path` に追加して
`bestmove.cli` を解決できるようにしています。
"""

import sys

try:
    # パッケージ内からの相対 import（推奨ルート）
    from .cli import main  # type: ignore
except ImportError:
    # 単体ファイル実行に対応: python bestmove/main.py
    import os
    sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    from bestmove.cli import main

if __name__ == "__main__":
    sys.exit(main())
