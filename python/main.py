#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                # 4×4 board in the Rich terminal
    python main.py -s 3           # 3×3 board
    python main.py --seed 7       # reproducible shuffles
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidingui.cli.main import app  # noqa: E402

if __name__ == "__main__":
    app()
