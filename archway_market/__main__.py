"""Allow ``python -m archway_market``."""
from .cli import main

if __name__ == "__main__":
    main()
