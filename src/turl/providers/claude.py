"""Claude Code transcript resolver.

Layout: $CLAUDE_CONFIG_DIR/projects/<encoded-project-path>/<session_id>.jsonl
"""

from pathlib import Path

from turl.models import ProviderKind, ResolvedThread
from turl.providers.base import SearchRoot, resolve_in_roots

FILE_SUFFIX = ".jsonl"


class ClaudeProvider:
    """Resolve Claude Code session ids to project transcripts."""

    kind = ProviderKind.CLAUDE

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @property
    def projects_root(self) -> Path:
        return self.root / "projects"

    def search_roots(self) -> list[SearchRoot]:
        return [SearchRoot(source="claude:projects", path=self.projects_root)]

    def resolve(self, session_id: str) -> ResolvedThread:
        filename = f"{session_id}{FILE_SUFFIX}"
        return resolve_in_roots(
            self.kind,
            session_id,
            self.search_roots(),
            lambda name: name == filename,
        )
