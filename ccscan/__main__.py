"""
Entry point for running ccscan as a module.

Usage:
    python -m ccscan < main.c
    python -m ccscan --help
"""

import sys
from ccscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
