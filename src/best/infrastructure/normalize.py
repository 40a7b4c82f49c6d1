"""Text normalization applied to the query and every candidate."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_DELIMITER",
    "NormalizationConfig",
    "normalize",
]

DEFAULT_DELIMITER = "."


@dataclass(frozen=True)
class NormalizationConfig:
    """Immutable set of normalization toggles.

    Steps run in a fixed order: case fold, delimiter substitution,
    whitespace trim. Trimming runs last so it sees the spaces produced
    by delimiter substitution.

    Attributes:
        fold_case: Lowercase the text.
        replace_delimiter: Replace every delimiter character with a space.
        strip_whitespace: Remove leading and trailing whitespace.
        delimiter: Character replaced when replace_delimiter is set.
    """

    fold_case: bool = True
    replace_delimiter: bool = False
    strip_whitespace: bool = False
    delimiter: str = DEFAULT_DELIMITER


def normalize(raw: str, config: NormalizationConfig) -> str:
    """Produce the comparable form of a string.

    Args:
        raw: Text as read from the candidate source or command line.
        config: Normalization toggles.

    Returns:
        Normalized text.
    """
    text = raw.lower() if config.fold_case else raw
    if config.replace_delimiter:
        text = text.replace(config.delimiter, " ")
    if config.strip_whitespace:
        text = text.strip()
    return text
