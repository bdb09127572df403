"""Module entrypoint for ``python -m lazylaunch``.

All argument parsing and runtime setup happen in ``lazylaunch.cli``.
"""

from .cli import run


if __name__ == "__main__":
    run()
