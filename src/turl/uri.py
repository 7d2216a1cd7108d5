"""Parsing of `<provider>://<session_id>` thread identifiers."""

from turl.errors import InvalidUri
from turl.models import ProviderKind, ThreadUri

SCHEMES: dict[str, ProviderKind] = {kind.value: kind for kind in ProviderKind}

SEPARATOR = "://"


def parse_thread_uri(text: str) -> ThreadUri:
    """Parse a thread identifier such as ``codex://019c871c-...``.

    Raises InvalidUri when the scheme is unknown or the session id is empty
    or contains a path separator.
    """
    value = text.strip()
    scheme, sep, session_id = value.partition(SEPARATOR)
    if not sep:
        raise InvalidUri("expected <provider>://<session_id>", text)

    provider = SCHEMES.get(scheme)
    if provider is None:
        raise InvalidUri("unknown provider", text)

    if not session_id or "/" in session_id or "\\" in session_id:
        raise InvalidUri("invalid session id", text)

    return ThreadUri(provider=provider, session_id=session_id)
