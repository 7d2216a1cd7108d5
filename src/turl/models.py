"""Data models for turl."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ProviderKind(Enum):
    """A known chat-session backend. The value doubles as the URI scheme."""

    CODEX = "codex"
    CLAUDE = "claude"

    def __str__(self) -> str:
        return self.value


class MessageRole(Enum):
    """Author of a conversational message."""

    USER = "user"
    ASSISTANT = "assistant"

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class ThreadUri:
    """A parsed `<provider>://<session_id>` identifier."""

    provider: ProviderKind
    session_id: str

    @classmethod
    def parse(cls, text: str) -> "ThreadUri":
        from turl.uri import parse_thread_uri

        return parse_thread_uri(text)

    def as_string(self) -> str:
        return f"{self.provider.value}://{self.session_id}"

    def __str__(self) -> str:
        return self.as_string()


@dataclass
class ResolutionMeta:
    """Where a thread was found and how ambiguous the lookup was."""

    source: str  # e.g. "codex:sessions"
    candidate_count: int
    warnings: list[str] = field(default_factory=list)


@dataclass
class ResolvedThread:
    """The single log file selected for a thread."""

    provider: ProviderKind
    session_id: str
    path: Path
    metadata: ResolutionMeta


@dataclass(frozen=True)
class ThreadMessage:
    """A user or assistant message with trimmed, non-empty text."""

    role: MessageRole
    text: str
