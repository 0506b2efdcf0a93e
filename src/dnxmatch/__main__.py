"""Entry point for dnxmatch when run as a module."""

import sys

from dnxmatch.advisor import main

if __name__ == "__main__":
    sys.exit(main())
