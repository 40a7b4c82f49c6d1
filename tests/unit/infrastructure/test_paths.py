"""Tests for path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from best.infrastructure.paths import PathResolver


class TestPathResolver:
    """Tests for PathResolver."""

    def test_explicit_base(self, tmp_path: Path) -> None:
        """Explicit base directory is used as given."""
        resolver = PathResolver(base=tmp_path)
        assert resolver.base == tmp_path

    def test_global_config_path(self, tmp_path: Path) -> None:
        """Config file lives directly under the base directory."""
        resolver = PathResolver(base=tmp_path)
        assert resolver.global_config() == tmp_path / "config.json"

    def test_env_var_overrides_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """BEST_HOME selects the base directory."""
        monkeypatch.setenv("BEST_HOME", str(tmp_path / "custom"))
        assert PathResolver().base == tmp_path / "custom"

    def test_defaults_to_home_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without BEST_HOME the base is ~/.best."""
        monkeypatch.delenv("BEST_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert PathResolver().base == tmp_path / ".best"
