import json
from dataclasses import dataclass, field
from typing import Literal

from ringkas.logging.logger import Log

Role = Literal["system", "user", "assistant", "tool"]


@dataclass(frozen=True)
class Message:
    """One turn of a model invocation. ``name`` is set on tool turns."""

    role: Role
    content: str
    name: str | None = None


@dataclass(frozen=True)
class GenerationResponse:
    """Final text of a model invocation plus every turn that led to it."""

    text: str
    history: list[Message] = field(default_factory=list)

    def output(self) -> dict[str, object] | None:
        """Parse ``text`` as a JSON object; None when it is not one."""
        return parse_json_object(self.text)

    def tool_messages(self, names: frozenset[str] | None = None) -> list[Message]:
        return [
            m for m in self.history
            if m.role == "tool" and (names is None or m.name in names)
        ]


def _strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned


def parse_json_object(raw: str | None) -> dict[str, object] | None:
    if not raw or not raw.strip():
        return None
    try:
        parsed = json.loads(_strip_code_fences(raw))
    except json.JSONDecodeError as exc:
        Log.debug(f"Model response is not valid JSON: {exc}")
        return None
    if not isinstance(parsed, dict):
        Log.debug("Model response JSON is not an object")
        return None
    return parsed
