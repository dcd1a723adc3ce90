"""Module entrypoint for ``python -m lettergrid``.

All argument parsing and runtime setup happen in ``lettergrid.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
