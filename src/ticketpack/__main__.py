"""Module entrypoint for ``python -m ticketpack``."""

from ticketpack.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
