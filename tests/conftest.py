"""Pytest fixtures for turl tests."""

import json
import os
import tempfile
from pathlib import Path

import pytest

CODEX_SESSION_ID = "019c871c-b1f9-7f60-9c4f-87ed09f13592"
CLAUDE_SESSION_ID = "6f1c2a4e-93d5-4b8a-a0c1-5e2b7d9f3a10"


def write_jsonl(path: Path, records: list, mtime: float | None = None) -> Path:
    """Write records as JSON lines, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def codex_message(role: str, text: str) -> dict:
    item_type = "input_text" if role == "user" else "output_text"
    return {
        "type": "response_item",
        "payload": {
            "type": "message",
            "role": role,
            "content": [{"type": item_type, "text": text}],
        },
    }


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def codex_records():
    """A Codex rollout with a function call between the two messages."""
    return [
        {"type": "session_meta", "payload": {"id": CODEX_SESSION_ID, "cwd": "/work"}},
        codex_message("user", "hello"),
        {
            "type": "response_item",
            "payload": {"type": "function_call", "name": "shell", "arguments": '{"cmd":"ls"}'},
        },
        {
            "type": "response_item",
            "payload": {"type": "function_call_output", "call_id": "c1", "output": "README.md"},
        },
        codex_message("assistant", "world"),
    ]


@pytest.fixture
def codex_home(temp_dir, codex_records):
    """A $CODEX_HOME with one rollout under sessions/."""
    write_jsonl(
        temp_dir / "sessions" / "2026" / "02" / "23"
        / f"rollout-2026-02-23T04-48-50-{CODEX_SESSION_ID}.jsonl",
        codex_records,
    )
    return temp_dir


@pytest.fixture
def claude_records():
    """A Claude Code transcript with tool traffic and a thinking block."""
    return [
        {"type": "summary", "summary": "Auth discussion", "leafUuid": "msg-004"},
        {
            "type": "user",
            "uuid": "msg-001",
            "sessionId": CLAUDE_SESSION_ID,
            "message": {"role": "user", "content": "How do I implement authentication?"},
        },
        {
            "type": "assistant",
            "uuid": "msg-002",
            "sessionId": CLAUDE_SESSION_ID,
            "message": {
                "role": "assistant",
                "content": [
                    {"type": "thinking", "thinking": "Let me look at the code first..."},
                    {"type": "tool_use", "id": "tu1", "name": "Read", "input": {"path": "app.py"}},
                ],
            },
        },
        {
            "type": "user",
            "uuid": "msg-003",
            "sessionId": CLAUDE_SESSION_ID,
            "message": {
                "role": "user",
                "content": [{"type": "tool_result", "tool_use_id": "tu1", "content": "import jwt"}],
            },
        },
        {
            "type": "assistant",
            "uuid": "msg-004",
            "sessionId": CLAUDE_SESSION_ID,
            "message": {
                "role": "assistant",
                "content": [{"type": "text", "text": "You already use JWT tokens."}],
            },
        },
    ]


@pytest.fixture
def claude_home(temp_dir, claude_records):
    """A $CLAUDE_CONFIG_DIR with one transcript under projects/."""
    write_jsonl(
        temp_dir / "projects" / "-Users-name-Code-project" / f"{CLAUDE_SESSION_ID}.jsonl",
        claude_records,
    )
    return temp_dir


@pytest.fixture
def write_session():
    """Return the JSONL writer for building ad-hoc session trees."""
    return write_jsonl


@pytest.fixture
def codex_session_id():
    return CODEX_SESSION_ID


@pytest.fixture
def claude_session_id():
    return CLAUDE_SESSION_ID
