"""Allow ``python -m hushrun``."""

from .cli import main

if __name__ == "__main__":
    main()
