"""Error types raised by turl."""

from pathlib import Path


class TurlError(Exception):
    """Base class for every error turl reports to its caller."""


class InvalidUri(TurlError):
    """The thread identifier is malformed or names an unknown provider."""

    def __init__(self, reason: str, value: str = "") -> None:
        self.reason = reason
        self.value = value
        super().__init__(f"invalid thread uri: {reason}")


class ThreadNotFound(TurlError):
    """No candidate file exists for the session id in any searched root."""

    def __init__(self, provider: str, session_id: str, searched_roots: list[Path]) -> None:
        self.provider = provider
        self.session_id = session_id
        self.searched_roots = list(searched_roots)
        roots = ", ".join(str(root) for root in self.searched_roots)
        super().__init__(
            f"thread not found: provider={provider} session_id={session_id} "
            f"searched_roots=[{roots}]"
        )


class InvalidJsonLine(TurlError):
    """A line of the session file is not valid JSON."""

    def __init__(self, path: Path, line: int, cause: Exception) -> None:
        self.path = path
        self.line = line
        self.cause = cause
        super().__init__(f"invalid json at {path}:{line}: {cause}")


class ThreadReadError(TurlError):
    """The resolved session file could not be read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read {path}: {cause}")
