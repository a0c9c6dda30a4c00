"""Entry point for `python -m dirsim`."""

from dirsim.cli import main

if __name__ == "__main__":
    main()
