"""Candidate sources module."""

from best.modules.candidates.source import (
    CandidateSourceError,
    iter_directory,
    iter_lines,
)

__all__ = [
    "CandidateSourceError",
    "iter_directory",
    "iter_lines",
]
