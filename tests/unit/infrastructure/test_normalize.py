"""Tests for text normalization."""

from __future__ import annotations

import pytest

from best.infrastructure.normalize import NormalizationConfig, normalize

ALL_ON = NormalizationConfig(
    fold_case=True, replace_delimiter=True, strip_whitespace=True
)


class TestNormalizationConfig:
    """Tests for NormalizationConfig dataclass."""

    def test_defaults(self) -> None:
        """Only case folding is on by default."""
        config = NormalizationConfig()

        assert config.fold_case is True
        assert config.replace_delimiter is False
        assert config.strip_whitespace is False
        assert config.delimiter == "."

    def test_config_is_frozen(self) -> None:
        """NormalizationConfig should be immutable."""
        config = NormalizationConfig()

        with pytest.raises((AttributeError, TypeError)):
            config.fold_case = False  # type: ignore


class TestNormalize:
    """Tests for normalize function."""

    def test_no_steps_returns_input(self) -> None:
        """With everything off the string is unchanged."""
        config = NormalizationConfig(fold_case=False)
        assert normalize("  Mixed.Case  ", config) == "  Mixed.Case  "

    def test_folds_case(self) -> None:
        """Case folding lowercases the text."""
        assert normalize("Photo.JPG", NormalizationConfig()) == "photo.jpg"

    def test_replaces_every_delimiter(self) -> None:
        """Each delimiter becomes exactly one space."""
        config = NormalizationConfig(fold_case=False, replace_delimiter=True)
        assert normalize("a.b..c", config) == "a b  c"

    def test_custom_delimiter(self) -> None:
        """A configured delimiter replaces the dot."""
        config = NormalizationConfig(replace_delimiter=True, delimiter="_")
        assert normalize("my_file.txt", config) == "my file.txt"

    def test_strips_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is removed, inner kept."""
        config = NormalizationConfig(fold_case=False, strip_whitespace=True)
        assert normalize("\t a b \n", config) == "a b"

    def test_trim_runs_after_substitution(self) -> None:
        """Spaces produced from delimiters are trimmed at the ends."""
        assert normalize(".hidden.", ALL_ON) == "hidden"

    def test_photo_query(self) -> None:
        """Mixed-case dotted name normalizes to lowercase words."""
        assert normalize("Photo.JPG", ALL_ON) == "photo jpg"

    @pytest.mark.parametrize(
        "config",
        [
            NormalizationConfig(),
            NormalizationConfig(fold_case=False, strip_whitespace=True),
            NormalizationConfig(replace_delimiter=True),
            ALL_ON,
        ],
    )
    @pytest.mark.parametrize("text", ["", " A.b ", "..x..", "Straße.TXT", "\tTab\t"])
    def test_idempotent(self, config: NormalizationConfig, text: str) -> None:
        """Normalizing twice gives the same result as once."""
        once = normalize(text, config)
        assert normalize(once, config) == once
