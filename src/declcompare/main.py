from __future__ import annotations

"""
Main Entry Point.

Allows running the CLI as a plain script (python src/declcompare/main.py)
in addition to the installed 'declcompare' console command.
"""

import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from declcompare.interface.cli.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
