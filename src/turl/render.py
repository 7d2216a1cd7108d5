"""Markdown rendering of extracted threads."""

from pathlib import Path

from turl.extractor import extract_messages
from turl.models import ThreadMessage, ThreadUri

EMPTY_PLACEHOLDER = "_No user/assistant messages found._"


def render_markdown(uri: ThreadUri, source_path: Path, raw_jsonl: str) -> str:
    """Render the conversation in raw_jsonl as a markdown document."""
    messages = extract_messages(uri.provider, source_path, raw_jsonl)
    return format_markdown(uri, source_path, messages)


def format_markdown(uri: ThreadUri, source_path: Path, messages: list[ThreadMessage]) -> str:
    """Lay out already extracted messages as the thread markdown document."""
    lines = [
        "# Thread",
        "",
        f"- URI: `{uri.as_string()}`",
        f"- Source: `{source_path}`",
        "",
    ]

    if not messages:
        lines.append(EMPTY_PLACEHOLDER)
        return "\n".join(lines) + "\n"

    for idx, message in enumerate(messages, 1):
        lines.append(f"## {idx}. {message.role.title}")
        lines.append("")
        lines.append(message.text.strip())
        lines.append("")

    return "\n".join(lines) + "\n"
