"""Module entry point for python -m py_scripts.fund_holdings."""

import sys

from .daily_update import main

if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
