"""Entry point: ``python main.py <source> <stamp> <output> [options...]``."""
from stamp.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
