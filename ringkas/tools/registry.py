"""Tools the model may call while it generates a response."""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from ringkas.logging.logger import Log
from ringkas.processing.models import OutputLanguage
from ringkas.tools.copyedit import copyedit
from ringkas.tools.exceptions import ToolArgumentError, UnknownToolError
from ringkas.tools.models import ToolInvocationResult
from ringkas.tools.transcript import TranscriptFetcher, fetch_transcript_from_youtube_url
from ringkas.tools.web_page import WebPageFetcher, fetch_text_from_url

FETCH_TEXT_FROM_URL = "fetchTextFromUrl"
FETCH_TRANSCRIPT = "fetchTranscriptFromYouTubeUrl"
COPYEDIT = "copyedit"

FETCH_TOOL_NAMES = frozenset({FETCH_TEXT_FROM_URL, FETCH_TRANSCRIPT})

ToolHandler = Callable[..., Awaitable[str]]

_JSON_TYPES: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "object": dict,
    "array": list,
}


@dataclass(frozen=True)
class Tool:
    """A named async function plus the JSON schema of its arguments."""

    name: str
    description: str
    parameters: dict[str, Any]
    handler: ToolHandler

    def to_openai_spec(self) -> dict[str, object]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
                "strict": True,
            },
        }

    def check_arguments(self, arguments: Mapping[str, object]) -> None:
        """Check model-supplied ``arguments`` against ``parameters``.

        Raises:
            ToolArgumentError: on a missing, unexpected or mistyped argument.
        """
        properties = self.parameters.get("properties", {})
        required = self.parameters.get("required", [])

        missing = [key for key in required if key not in arguments]
        if missing:
            raise ToolArgumentError(f"Tool '{self.name}' is missing arguments: {missing}")
        unexpected = sorted(set(arguments) - set(properties))
        if unexpected:
            raise ToolArgumentError(f"Tool '{self.name}' got unexpected arguments: {unexpected}")
        for key, value in arguments.items():
            expected = properties[key].get("type")
            python_type = _JSON_TYPES.get(expected)
            if python_type is not None and not isinstance(value, python_type):
                raise ToolArgumentError(
                    f"Argument '{key}' of tool '{self.name}' must be a {expected}, "
                    f"got {type(value).__name__}"
                )


class ToolSet:
    """Tools offered to the model for one request, addressed by name."""

    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools = {tool.name: tool for tool in tools}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def subset(self, names: Iterable[str]) -> "ToolSet":
        wanted = set(names)
        return ToolSet(tool for tool in self._tools.values() if tool.name in wanted)

    def specs(self) -> list[dict[str, object]]:
        return [tool.to_openai_spec() for tool in self._tools.values()]

    async def invoke(self, name: str, arguments: Mapping[str, object]) -> ToolInvocationResult:
        """Run the tool called ``name`` with keyword ``arguments``.

        Raises:
            UnknownToolError: if no tool with that name is offered.
            ToolArgumentError: if the arguments do not match the tool's schema.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(f"Tool '{name}' is not available. Offered: {self.names}")
        tool.check_arguments(arguments)
        try:
            output = await tool.handler(**arguments)
        except TypeError as exc:
            raise ToolArgumentError(f"Invalid arguments for tool '{name}': {exc}") from exc
        Log.debug(f"Tool {name} returned {len(output)} chars")
        return ToolInvocationResult(name=name, output=output)


def _text_parameters(field: str, description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {field: {"type": "string", "description": description}},
        "required": [field],
        "additionalProperties": False,
    }


def build_toolset(
    *,
    web_fetcher: WebPageFetcher,
    transcript_fetcher: TranscriptFetcher,
    language: OutputLanguage = OutputLanguage.INDONESIAN,
) -> ToolSet:
    """Build every tool, with fetch failures reported in ``language``."""
    return ToolSet([
        Tool(
            name=FETCH_TEXT_FROM_URL,
            description=(
                "Fetches the text content from a given website URL. "
                "Do not use for YouTube URLs."
            ),
            parameters=_text_parameters("url", "The URL to fetch content from."),
            handler=partial(fetch_text_from_url, fetcher=web_fetcher, language=language),
        ),
        Tool(
            name=FETCH_TRANSCRIPT,
            description="Fetches the transcript of a YouTube video from its URL.",
            parameters=_text_parameters("url", "The YouTube video URL."),
            handler=partial(
                fetch_transcript_from_youtube_url,
                fetcher=transcript_fetcher,
                language=language,
            ),
        ),
        Tool(
            name=COPYEDIT,
            description=(
                "Edits and refines the provided text for clarity, conciseness, and style."
            ),
            parameters=_text_parameters("text", "The text to be edited."),
            handler=copyedit,
        ),
    ])
