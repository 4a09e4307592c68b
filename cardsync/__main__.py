#!/usr/bin/env python3
"""Allow running the tool with ``python -m cardsync``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
