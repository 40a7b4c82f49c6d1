"""Streaming selection of the candidate closest to a query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from best.infrastructure.normalize import NormalizationConfig, normalize
from best.infrastructure.similarity import levenshtein_distance

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "Candidate",
    "Selector",
    "select_best",
]

logger = structlog.get_logger()


@dataclass(frozen=True)
class Candidate:
    """A scored candidate.

    Attributes:
        value: String to print if this candidate wins.
        distance: Edit distance between the candidate and the query.
    """

    value: str
    distance: int


class Selector:
    """Keeps the closest candidate seen so far.

    Candidates are considered one at a time, so the input can be an
    unbounded stream. On equal distance the earlier candidate is kept.
    """

    def __init__(self, query: str, *, require_substring: bool = False) -> None:
        """Initialize the selector.

        Args:
            query: Normalized query every candidate is scored against.
            require_substring: Skip candidates that do not contain the query.
        """
        self._query = query
        self._require_substring = require_substring
        self._best: Candidate | None = None

    def accepts(self, normalized_value: str) -> bool:
        """Check whether a normalized candidate passes the acceptance filter."""
        return not self._require_substring or self._query in normalized_value

    def consider(self, display_value: str, normalized_value: str) -> Candidate | None:
        """Score a candidate and keep it if it beats the current best.

        Args:
            display_value: String reported if the candidate wins.
            normalized_value: Normalized form compared against the query.

        Returns:
            The scored candidate, or None if the acceptance filter rejected it.
        """
        if not self.accepts(normalized_value):
            logger.debug("candidate_skipped", value=display_value)
            return None

        candidate = Candidate(
            value=display_value,
            distance=levenshtein_distance(self._query, normalized_value),
        )

        if self._best is None or candidate.distance < self._best.distance:
            self._best = candidate
            logger.debug(
                "best_updated", value=candidate.value, distance=candidate.distance
            )

        return candidate

    def result(self) -> Candidate | None:
        """Return the best candidate so far, or None if nothing was accepted."""
        return self._best


def select_best(
    items: Iterable[tuple[str, str]],
    query: str,
    config: NormalizationConfig,
    *,
    require_substring: bool = False,
) -> Candidate | None:
    """Find the item closest to the query.

    Args:
        items: (display value, raw value) pairs, consumed lazily in order.
        query: Normalized query.
        config: Normalization applied to each raw value.
        require_substring: Skip items whose normalized value lacks the query.

    Returns:
        The winning candidate, or None if no item was accepted.
    """
    selector = Selector(query, require_substring=require_substring)
    seen = 0

    logger.debug("search_started", query=query, require_substring=require_substring)

    for display_value, raw_value in items:
        seen += 1
        selector.consider(display_value, normalize(raw_value, config))

    best = selector.result()
    logger.debug(
        "search_finished",
        candidates=seen,
        found=best is not None,
        distance=best.distance if best else None,
    )
    return best
