"""Allow running as ``python -m cmdshell``."""

from cmdshell.cli import main

if __name__ == "__main__":
    main()
