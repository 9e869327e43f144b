"""Module entry point for ``python -m globrm``."""

import sys

from globrm.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
