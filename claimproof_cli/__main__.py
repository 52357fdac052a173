"""
Module execution entry point.

Allows running with: python -m claimproof_cli
"""

import sys
from claimproof_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
