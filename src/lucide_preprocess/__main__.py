"""
Entry point for module execution (``python -m lucide_preprocess``).

This module delegates execution to the CLI handler in ``lucide_preprocess.cli.__main__``.
"""

import sys
from lucide_preprocess.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
