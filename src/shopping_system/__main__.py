"""Allow ``python -m shopping_system`` to start the interactive CLI."""

import sys

from shopping_system.cli import main

if __name__ == "__main__":
    sys.exit(main())
