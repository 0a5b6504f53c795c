"""Allows ``python -m jsonclip``."""

from jsonclip.cli import main

if __name__ == "__main__":
    main()
