"""Shared search-and-select logic for provider resolvers."""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from turl.errors import ThreadNotFound
from turl.models import ProviderKind, ResolutionMeta, ResolvedThread

log = logging.getLogger(__name__)

# Timestamp used for candidates whose mtime cannot be read
EPOCH = 0.0

NamePredicate = Callable[[str], bool]


@dataclass(frozen=True)
class SearchRoot:
    """A directory searched for session files, in priority order."""

    source: str  # e.g. "codex:sessions"
    path: Path
    label: str = ""  # prefix for the ambiguity warning, e.g. "archived "


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry below root.

    A missing root yields nothing and unreadable directories are skipped.
    No entry is stat-ed here; name matching happens first.
    """

    def skip(err: OSError) -> None:
        log.debug("Skipping %s: %s", err.filename, err.strerror)

    for dirpath, _dirnames, filenames in os.walk(root, onerror=skip):
        for name in filenames:
            yield Path(dirpath) / name


def match_candidates(paths: Iterable[Path], predicate: NamePredicate) -> list[Path]:
    """Keep the paths whose file name satisfies predicate."""
    return [path for path in paths if predicate(path.name)]


def file_mtime(path: Path) -> float:
    """Modification time of path, or EPOCH if it cannot be read."""
    try:
        return path.stat().st_mtime
    except OSError:
        return EPOCH


def choose_latest(
    paths: list[Path],
    mtime: Callable[[Path], float] = file_mtime,
) -> tuple[Path, int] | None:
    """Pick the most recently modified path.

    Returns (selected, candidate_count), or None when paths is empty.
    Equal timestamps fall back to lexicographic path order.
    """
    if not paths:
        return None

    scored = [(mtime(path), path) for path in paths]
    scored.sort(key=lambda item: (-item[0], str(item[1])))
    return scored[0][1], len(scored)


def resolve_in_roots(
    provider: ProviderKind,
    session_id: str,
    roots: list[SearchRoot],
    predicate: NamePredicate,
    mtime: Callable[[Path], float] = file_mtime,
) -> ResolvedThread:
    """Search roots in order and resolve to the newest match in the first hit.

    Raises ThreadNotFound listing every root when nothing matches.
    """
    for root in roots:
        candidates = match_candidates(iter_files(root.path), predicate)
        log.debug("Searched %s: %d candidate(s)", root.path, len(candidates))

        chosen = choose_latest(candidates, mtime=mtime)
        if chosen is None:
            continue

        selected, count = chosen
        meta = ResolutionMeta(source=root.source, candidate_count=count)
        if count > 1:
            meta.warnings.append(
                f"multiple {root.label}matches found ({count}) for session_id={session_id}; "
                f"selected latest: {selected}"
            )

        return ResolvedThread(
            provider=provider,
            session_id=session_id,
            path=selected,
            metadata=meta,
        )

    raise ThreadNotFound(
        provider=str(provider),
        session_id=session_id,
        searched_roots=[root.path for root in roots],
    )
