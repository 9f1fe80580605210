#!/usr/bin/env python3
"""FocusRounds — entry point.

Run with:
    python main.py
    python -m focusrounds
"""

from focusrounds.__main__ import main


if __name__ == "__main__":
    main()
