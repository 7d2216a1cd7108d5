"""Resolve `<provider>://<session_id>` thread URIs to local chat logs and render them."""

from turl.config import ProviderRoots
from turl.errors import InvalidJsonLine, InvalidUri, ThreadNotFound, ThreadReadError, TurlError
from turl.models import (
    MessageRole,
    ProviderKind,
    ResolutionMeta,
    ResolvedThread,
    ThreadMessage,
    ThreadUri,
)
from turl.service import read_thread_raw, render_thread_markdown, resolve_thread

__version__ = "0.1.0"

__all__ = [
    "InvalidJsonLine",
    "InvalidUri",
    "MessageRole",
    "ProviderKind",
    "ProviderRoots",
    "ResolutionMeta",
    "ResolvedThread",
    "ThreadMessage",
    "ThreadNotFound",
    "ThreadReadError",
    "ThreadUri",
    "TurlError",
    "__version__",
    "read_thread_raw",
    "render_thread_markdown",
    "resolve_thread",
]
