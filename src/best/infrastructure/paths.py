"""Path resolution for best's storage."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["PathResolver"]

HOME_ENV_VAR = "BEST_HOME"


class PathResolver:
    """Resolves paths for best's storage.

    Storage layout:
        ~/.best/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to $BEST_HOME,
                then ~/.best.
        """
        if base is None:
            env_home = os.environ.get(HOME_ENV_VAR)
            base = Path(env_home) if env_home else Path.home() / ".best"
        self.base = base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"

