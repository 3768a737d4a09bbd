"""
Ecoji package entry point.

Allows running: python -m ecoji [options]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
