"""Module entrypoint for ``python -m lazyinquire``."""

from .cli import main


if __name__ == "__main__":
    main()
