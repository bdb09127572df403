"""Runtime loop wiring for the launcher."""

from .loop import SearchFn, run_launcher

__all__ = ["SearchFn", "run_launcher"]
