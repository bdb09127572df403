"""Search collaborators: candidate sources and query ranking.

The front-end never filters or sorts; these helpers produce the ordered
candidate list it is handed before each render.
"""

from .fuzzy import DEFAULT_LIMIT, basename_start, fuzzy_score, match_position, rank_candidates
from .sources import candidates_from_lines, collect_path_executables, read_candidates

__all__ = [
    "DEFAULT_LIMIT",
    "fuzzy_score",
    "rank_candidates",
    "match_position",
    "basename_start",
    "candidates_from_lines",
    "collect_path_executables",
    "read_candidates",
]
