#!/usr/bin/env python3
"""BrewGuide — entry point.

Run with:
    python main.py
    python -m brewguide
"""

from brewguide.__main__ import main


if __name__ == "__main__":
    main()
