#!/usr/bin/env python3
"""Top-level entry point for dnxmatch.

This wrapper ensures the `src/` directory is on sys.path, then delegates to
the package CLI implemented in `dnxmatch.advisor`.
"""

from pathlib import Path
import sys


def _bootstrap_src() -> None:
    root = Path(__file__).resolve().parent
    src = root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def main() -> int:
    _bootstrap_src()
    from dnxmatch.advisor import main as advisor_main

    return advisor_main()


if __name__ == "__main__":
    raise SystemExit(main())
