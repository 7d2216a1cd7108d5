"""Codex rollout resolver.

Layout: $CODEX_HOME/sessions/YYYY/MM/DD/rollout-<timestamp>-<session_id>.jsonl,
with older threads moved to $CODEX_HOME/archived_sessions/.
"""

from pathlib import Path

from turl.models import ProviderKind, ResolvedThread
from turl.providers.base import SearchRoot, resolve_in_roots

FILE_PREFIX = "rollout-"
FILE_SUFFIX = ".jsonl"


class CodexProvider:
    """Resolve Codex session ids to rollout files."""

    kind = ProviderKind.CODEX

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @property
    def sessions_root(self) -> Path:
        return self.root / "sessions"

    @property
    def archived_root(self) -> Path:
        return self.root / "archived_sessions"

    def search_roots(self) -> list[SearchRoot]:
        return [
            SearchRoot(source="codex:sessions", path=self.sessions_root),
            SearchRoot(source="codex:archived_sessions", path=self.archived_root, label="archived "),
        ]

    def resolve(self, session_id: str) -> ResolvedThread:
        needle = f"{session_id}{FILE_SUFFIX}"

        def is_candidate(name: str) -> bool:
            return name.startswith(FILE_PREFIX) and name.endswith(needle)

        return resolve_in_roots(self.kind, session_id, self.search_roots(), is_candidate)
