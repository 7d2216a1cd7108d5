"""High-level entry points: resolve, read raw, render."""

import logging

from turl.config import ProviderRoots
from turl.errors import ThreadReadError
from turl.models import ResolvedThread, ThreadUri
from turl.providers import provider_for
from turl.render import render_markdown
from turl.uri import parse_thread_uri

log = logging.getLogger(__name__)


def _as_uri(uri: ThreadUri | str) -> ThreadUri:
    if isinstance(uri, ThreadUri):
        return uri
    return parse_thread_uri(uri)


def resolve_thread(uri: ThreadUri | str, roots: ProviderRoots) -> ResolvedThread:
    """Locate the session file for uri."""
    uri = _as_uri(uri)
    provider = provider_for(uri.provider, roots)
    resolved = provider.resolve(uri.session_id)
    log.debug(
        "Resolved %s to %s (source=%s, candidates=%d)",
        uri,
        resolved.path,
        resolved.metadata.source,
        resolved.metadata.candidate_count,
    )
    return resolved


def read_resolved(resolved: ResolvedThread) -> str:
    """Read the selected session file exactly as stored."""
    try:
        # newline="" keeps \r\n intact for raw output
        with open(resolved.path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ThreadReadError(path=resolved.path, cause=e) from e


def read_resolved_bytes(resolved: ResolvedThread) -> bytes:
    """Read the selected session file as bytes, with no decoding."""
    try:
        return resolved.path.read_bytes()
    except OSError as e:
        raise ThreadReadError(path=resolved.path, cause=e) from e


def read_thread_raw(uri: ThreadUri | str, roots: ProviderRoots) -> str:
    """Return the untouched contents of the session file for uri."""
    return read_resolved(resolve_thread(uri, roots))


def render_thread_markdown(uri: ThreadUri | str, roots: ProviderRoots) -> str:
    """Resolve uri and render its conversation as markdown."""
    uri = _as_uri(uri)
    resolved = resolve_thread(uri, roots)
    return render_markdown(uri, resolved.path, read_resolved(resolved))
