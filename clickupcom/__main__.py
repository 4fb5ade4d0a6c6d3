"""Allow ``python -m clickupcom``."""

from clickupcom.main import main

if __name__ == "__main__":
    main()
