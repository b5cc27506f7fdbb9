"""
finitelogic console entry point.

Usage:
    python -m backend.finitelogic
    python -m backend.finitelogic -e "domain add socrates"
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
