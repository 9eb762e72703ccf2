"""`python -m bestmove` 用のエントリ。"""

import sys

from .cli import main

sys.exit(main())
