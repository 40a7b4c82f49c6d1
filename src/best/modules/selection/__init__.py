"""Best-match selection module."""

from best.modules.selection.selector import Candidate, Selector, select_best

__all__ = [
    "Candidate",
    "Selector",
    "select_best",
]
