"""Fuzzy matching used to suggest corrections for misspelled variable names."""

from __future__ import annotations

from typing import Iterable, Optional

from envref.core.settings import DEFAULT_MAX_SUGGESTION_DISTANCE


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or
    substitutions needed to turn a into b.

    Example:
        >>> levenshtein_distance("REACT_APP_API_ULR", "REACT_APP_API_URL")
        2
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Two rolling rows of the DP matrix.
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(
                        previous[j - 1] + 1,  # substitution
                        current[j - 1] + 1,  # insertion
                        previous[j] + 1,  # deletion
                    )
                )
        previous = current
    return previous[-1]


def find_closest_match(
    target: str,
    candidates: Iterable[str],
    max_distance: int = DEFAULT_MAX_SUGGESTION_DISTANCE,
) -> Optional[str]:
    """Return the candidate closest to target, if within max_distance.

    Ties are resolved in favour of the candidate seen first.

    Args:
        target: The misspelled name.
        candidates: Names to compare against, in priority order.
        max_distance: Largest edit distance still worth suggesting.

    Returns:
        The best candidate, or None if nothing is close enough.
    """
    closest_match: Optional[str] = None
    closest_distance: Optional[int] = None

    for candidate in candidates:
        distance = levenshtein_distance(target, candidate)
        if distance > max_distance:
            continue
        if closest_distance is None or distance < closest_distance:
            closest_distance = distance
            closest_match = candidate

    return closest_match
