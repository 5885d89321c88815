from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ringkas.config.settings import Settings
from ringkas.llm.models import GenerationResponse
from ringkas.processing.models import (
    FetchMode,
    OutputLanguage,
    ProcessingRequest,
    ProcessingResult,
    ResolvedSource,
)
from ringkas.tools.registry import COPYEDIT, FETCH_TEXT_FROM_URL, FETCH_TRANSCRIPT, ToolSet

KNOWN_TOOLS = frozenset({COPYEDIT, FETCH_TEXT_FROM_URL, FETCH_TRANSCRIPT})


@dataclass(frozen=True)
class PipelineCapabilities:
    """Which tools the model gets and who fetches URL content."""

    fetch_mode: FetchMode = FetchMode.RESOLVER
    tools: frozenset[str] = frozenset({COPYEDIT})
    tool_choice: str = "auto"

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineCapabilities":
        tools = frozenset(name.strip() for name in settings.pipeline_tools if name.strip())
        unknown = tools - KNOWN_TOOLS
        if unknown:
            raise ValueError(
                f"Unknown pipeline tools {sorted(unknown)}. Choose from: {sorted(KNOWN_TOOLS)}"
            )
        return cls(
            fetch_mode=settings.pipeline_fetch_mode,
            tools=tools,
            tool_choice=settings.pipeline_tool_choice,
        )


@dataclass(slots=True)
class PipelineContext:
    request: ProcessingRequest
    language: OutputLanguage
    source: ResolvedSource | None = None
    instruction: str = ""
    prompt: str = ""
    tools: ToolSet | None = None
    tool_choice: str = "auto"
    response: GenerationResponse | None = None
    structured_output: dict[str, object] = field(default_factory=dict)
    result: ProcessingResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
