"""Provider resolvers, one per ProviderKind."""

from turl.config import ProviderRoots
from turl.models import ProviderKind
from turl.providers.claude import ClaudeProvider
from turl.providers.codex import CodexProvider

Provider = CodexProvider | ClaudeProvider


def provider_for(kind: ProviderKind, roots: ProviderRoots) -> Provider:
    """Build the resolver for kind rooted at the configured base directory."""
    if kind is ProviderKind.CODEX:
        return CodexProvider(roots.codex_root)
    if kind is ProviderKind.CLAUDE:
        return ClaudeProvider(roots.claude_root)
    raise ValueError(f"Unsupported provider: {kind}")


__all__ = ["ClaudeProvider", "CodexProvider", "Provider", "provider_for"]
