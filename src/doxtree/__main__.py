"""Allow ``python -m doxtree``."""

import sys

from doxtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
