"""Module entry point for running with python -m docs2index."""

from docs2index.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
