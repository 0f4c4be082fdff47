"""Module entrypoint for ``python -m clinav``."""

from .cli import main


if __name__ == "__main__":
    main()
