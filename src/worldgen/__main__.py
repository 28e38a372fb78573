"""Allow running as ``python -m worldgen``."""

from .cli import main

if __name__ == "__main__":
    main()
