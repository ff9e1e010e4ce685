"""Allow running Formulon as ``python -m formulon``."""

from formulon.cli import main

if __name__ == "__main__":
    main()
