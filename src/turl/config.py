"""Discovery of provider base directories."""

import os
from dataclasses import dataclass
from pathlib import Path

CODEX_HOME_ENV = "CODEX_HOME"
CLAUDE_CONFIG_DIR_ENV = "CLAUDE_CONFIG_DIR"


def _home_dir(explicit: str | Path | None, env_var: str, default: Path) -> Path:
    """Resolve a base directory: explicit value, then env var, then default."""
    if explicit:
        return Path(explicit).expanduser()

    env_value = os.environ.get(env_var, "").strip()
    if env_value:
        return Path(env_value).expanduser()

    return default


@dataclass(frozen=True)
class ProviderRoots:
    """Base directories each provider searches beneath."""

    codex_root: Path
    claude_root: Path

    @classmethod
    def from_env(
        cls,
        codex_home: str | Path | None = None,
        claude_home: str | Path | None = None,
    ) -> "ProviderRoots":
        """Build roots from explicit values, $CODEX_HOME / $CLAUDE_CONFIG_DIR, or defaults."""
        return cls(
            codex_root=_home_dir(codex_home, CODEX_HOME_ENV, Path.home() / ".codex"),
            claude_root=_home_dir(claude_home, CLAUDE_CONFIG_DIR_ENV, Path.home() / ".claude"),
        )
