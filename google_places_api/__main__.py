"""
Package entry point.

Allows running: python -m google_places_api text "coffee"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
