"""Diff referenced names against defined names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from envref.core.settings import DEFAULT_MAX_SUGGESTION_DISTANCE
from envref.matching import find_closest_match


@dataclass(frozen=True)
class MissingVariable:
    """A referenced variable that is not defined."""

    name: str
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class CheckReport:
    """Outcome of a completed check run."""

    referenced: Tuple[str, ...]
    defined: Tuple[str, ...]
    missing: Tuple[MissingVariable, ...]

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)

    @property
    def missing_names(self) -> Tuple[str, ...]:
        return tuple(item.name for item in self.missing)


def find_missing_variables(
    referenced: Sequence[str],
    defined: Sequence[str],
    max_distance: int = DEFAULT_MAX_SUGGESTION_DISTANCE,
) -> Tuple[MissingVariable, ...]:
    """Return referenced names absent from defined, each with a suggestion.

    Order follows referenced. Membership is exact (case-sensitive).
    """
    defined_set = set(defined)
    return tuple(
        MissingVariable(name, find_closest_match(name, defined, max_distance))
        for name in referenced
        if name not in defined_set
    )
