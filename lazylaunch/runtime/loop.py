"""Main interactive loop for the launcher.

Alternates strictly between drawing a frame and blocking for one key.
Candidate ranking is re-run synchronously from the query before every frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..candidate import Candidate
from ..frontend import Frontend
from ..search import rank_candidates

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, Sequence[Candidate]], Sequence[Candidate]]


def run_launcher(
    frontend: Frontend,
    candidates: Sequence[Candidate],
    search: SearchFn = rank_candidates,
) -> Candidate | None:
    """Drive ``frontend`` until the user confirms or cancels.

    Returns the confirmed candidate from the list shown in the last frame, or
    ``None`` on cancel. The terminal is restored before returning or raising.
    """
    with frontend:
        shown = search(frontend.get_query(), candidates)
        frontend.render(shown)
        while True:
            should_exit, confirmed = frontend.wait_for_key()
            if should_exit:
                if confirmed is None:
                    logger.debug("launcher cancelled")
                    return None
                choice = shown[confirmed]
                logger.debug("launcher confirmed %r", choice.display_string())
                return choice
            shown = search(frontend.get_query(), candidates)
            frontend.render(shown)
