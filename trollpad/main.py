from __future__ import annotations
import sys
from trollpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m trollpad.main` and the `trollpad` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
