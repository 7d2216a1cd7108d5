"""Extraction of user/assistant messages from JSONL session logs."""

import json
import logging
from pathlib import Path
from typing import Any

from turl.errors import InvalidJsonLine
from turl.models import MessageRole, ProviderKind, ThreadMessage

log = logging.getLogger(__name__)

# Content items that carry tool traffic rather than conversation
TOOL_TYPES = frozenset(
    {
        "tool_call",
        "tool_result",
        "tool_use",
        "function_call",
        "function_result",
        "function_response",
    }
)

# Fields checked, in order, for the text of a content item
TEXT_FIELDS = ("text", "input_text", "output_text")

ROLES = {
    "user": MessageRole.USER,
    "assistant": MessageRole.ASSISTANT,
}


def extract_messages(provider: ProviderKind, path: Path, raw_jsonl: str) -> list[ThreadMessage]:
    """Parse a JSONL session log into an ordered list of messages.

    Blank lines are skipped. A line that is not valid JSON aborts the whole
    extraction with InvalidJsonLine; records that are not conversational
    (tool calls, metadata, unknown roles, empty text) are dropped.
    """
    extract_record = EXTRACTORS[provider]
    messages: list[ThreadMessage] = []

    # Only \n separates records; U+2028 and friends may appear inside strings
    for line_num, line in enumerate(raw_jsonl.split("\n"), 1):
        line = line.strip()
        if not line:
            continue

        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise InvalidJsonLine(path=path, line=line_num, cause=e) from e

        if not isinstance(record, dict):
            continue

        message = extract_record(record)
        if message is not None:
            messages.append(message)

    log.debug("Extracted %d message(s) from %s", len(messages), path)
    return messages


def extract_codex_message(record: dict[str, Any]) -> ThreadMessage | None:
    """Codex rollouts: `response_item` messages and `event_msg` agent messages."""
    record_type = record.get("type")
    payload = record.get("payload")
    if not isinstance(payload, dict):
        return None

    if record_type == "response_item":
        if payload.get("type") != "message":
            return None
        role = parse_role(payload.get("role"))
        if role is None:
            return None
        return build_message(role, extract_text(payload.get("content")))

    if record_type == "event_msg" and payload.get("type") == "agent_message":
        text = payload.get("message")
        if not isinstance(text, str):
            return None
        return build_message(MessageRole.ASSISTANT, text)

    return None


def extract_claude_message(record: dict[str, Any]) -> ThreadMessage | None:
    """Claude Code transcripts: `user` and `assistant` records."""
    record_type = record.get("type")
    if record_type not in ("user", "assistant"):
        return None

    message = record.get("message")
    if not isinstance(message, dict):
        return None

    # Older transcripts omit message.role; the record type says who spoke
    raw_role = message.get("role")
    if not isinstance(raw_role, str):
        raw_role = record_type
    role = parse_role(raw_role)
    if role is None:
        return None
    return build_message(role, extract_text(message.get("content")))


EXTRACTORS = {
    ProviderKind.CODEX: extract_codex_message,
    ProviderKind.CLAUDE: extract_claude_message,
}


def parse_role(value: Any) -> MessageRole | None:
    """Map a raw role string to a MessageRole; anything unknown is None."""
    if not isinstance(value, str):
        return None
    return ROLES.get(value)


def build_message(role: MessageRole, text: str) -> ThreadMessage | None:
    text = text.strip()
    if not text:
        return None
    return ThreadMessage(role=role, text=text)


def extract_text(content: Any) -> str:
    """Flatten message content into plain text.

    A string is returned as-is. A list of content items keeps the text of
    every non-tool item, each trimmed, joined by blank lines.
    """
    if isinstance(content, str):
        return content
    if not isinstance(content, list):
        return ""

    chunks: list[str] = []
    for item in content:
        if not isinstance(item, dict):
            continue
        if item.get("type") in TOOL_TYPES:
            continue

        for field_name in TEXT_FIELDS:
            value = item.get(field_name)
            if isinstance(value, str) and value.strip():
                chunks.append(value.strip())
                break

    return "\n\n".join(chunks)
