"""
Entry point for module execution (``python -m ilib_scanner``).

This module delegates execution to the CLI handler in ``ilib_scanner.cli.__main__``.
"""

import sys
from ilib_scanner.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
