"""Query ranking for launcher labels.

Labels are often bare command names but may be paths or desktop-entry
titles, so hits inside the last path component and at word starts count most.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ..candidate import Candidate

CandidateT = TypeVar("CandidateT", bound=Candidate)

DEFAULT_LIMIT = 500
WORD_SEPARATORS = frozenset(" -_./\\:")

MATCH_POINTS = 16
WORD_START_BONUS = 24
BASENAME_BONUS = 12
RUN_BONUS = 8
GAP_PENALTY = 3
MAX_GAP_PENALTY = 30


def basename_start(label: str) -> int:
    """Return the index where the last path component of ``label`` begins."""
    return max(label.rfind("/"), label.rfind("\\")) + 1


def is_word_start(label: str, idx: int) -> bool:
    """Whether ``label[idx]`` opens a word (after a separator or a camelCase hump)."""
    if idx == 0:
        return True
    prev = label[idx - 1]
    return prev in WORD_SEPARATORS or (prev.islower() and label[idx].isupper())


def match_position(query: str, label: str) -> tuple[int, int] | None:
    """Locate ``query`` as a case-insensitive substring of ``label``.

    Returns ``(tier, offset)``: tier 0 with an offset inside the basename when
    the hit lies there, tier 1 with an offset into the whole label otherwise.
    """
    query_folded = query.casefold()
    label_folded = label.casefold()
    base = basename_start(label)
    idx = label_folded.find(query_folded, base)
    if idx >= 0:
        return 0, idx - base
    idx = label_folded.find(query_folded)
    if idx >= 0:
        return 1, idx
    return None


def fuzzy_score(query: str, label: str) -> int | None:
    """Score ``query`` as an in-order subsequence of ``label``.

    ``None`` means some query character could not be matched.
    """
    if not query:
        return 0
    label_folded = label.casefold()
    base = basename_start(label)

    score = 0
    prev_idx = -1
    run = 0
    for needle in query.casefold():
        idx = label_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        score += MATCH_POINTS
        if idx == prev_idx + 1 and prev_idx >= 0:
            run += 1
            score += RUN_BONUS * run
        else:
            run = 0
            if prev_idx >= 0:
                score -= min(MAX_GAP_PENALTY, (idx - prev_idx - 1) * GAP_PENALTY)
        if is_word_start(label, idx):
            score += WORD_START_BONUS
        if idx >= base:
            score += BASENAME_BONUS
        prev_idx = idx

    return score - len(label) // 8


def rank_candidates(query: str, candidates: Sequence[CandidateT], limit: int = DEFAULT_LIMIT) -> list[CandidateT]:
    """Return candidates matching ``query``, best first.

    An empty query keeps input order. Substring hits come first, basename hits
    before the rest, then by offset and label length; subsequence-only
    matches follow, ordered by ``fuzzy_score``.
    """
    max_results = max(1, limit)
    if not query:
        return list(candidates[:max_results])

    substring_ranked: list[tuple[int, int, int, str, int]] = []
    fuzzy_ranked: list[tuple[int, int, str, int]] = []
    for idx, candidate in enumerate(candidates):
        label = candidate.display_string()
        position = match_position(query, label)
        if position is not None:
            tier, offset = position
            substring_ranked.append((tier, offset, len(label), label, idx))
            continue
        score = fuzzy_score(query, label)
        if score is not None:
            fuzzy_ranked.append((-score, len(label), label, idx))

    substring_ranked.sort()
    fuzzy_ranked.sort()
    ranked = [candidates[item[-1]] for item in substring_ranked]
    ranked.extend(candidates[item[-1]] for item in fuzzy_ranked)
    return ranked[:max_results]
