"""Entry point for ``python -m credscan``."""
import sys

from credscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
