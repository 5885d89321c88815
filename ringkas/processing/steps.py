from collections.abc import Callable

from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.exceptions import ModelInvocationError
from ringkas.logging.logger import Log
from ringkas.processing.models import OutputLanguage, ProcessingResult, SourceKind
from ringkas.processing.pipeline import (
    FetchMode,
    PipelineCapabilities,
    PipelineContext,
    PipelineStep,
)
from ringkas.processing.postprocessor import postprocess
from ringkas.processing.resolver import InputResolver
from ringkas.processing.word_count import count_words
from ringkas.prompts.composer import compose, language_rule, source_rule
from ringkas.tools.registry import FETCH_TEXT_FROM_URL, FETCH_TOOL_NAMES, FETCH_TRANSCRIPT, ToolSet

ToolSetFactory = Callable[[OutputLanguage], ToolSet]


class ResolveInputStep(PipelineStep):
    def __init__(self, resolver: InputResolver, capabilities: PipelineCapabilities) -> None:
        self._resolver = resolver
        self._capabilities = capabilities

    async def run(self, context: PipelineContext) -> PipelineContext:
        source = await self._resolver.resolve(
            context.request,
            context.language,
            fetch=self._capabilities.fetch_mode is FetchMode.RESOLVER,
        )
        context.source = source
        Log.info(
            "Input resolved",
            kind=source.source_kind.value,
            words=count_words(source.text),
            deferred=source.deferred,
        )
        if source.failed:
            # The failure sentence is the answer; the model has nothing to work on.
            context.result = ProcessingResult(
                output=source.text,
                word_count_original=0,
                word_count_summary=count_words(source.text),
                output_format=context.request.output_format,
                source_kind=source.source_kind,
            )
        return context


class ComposePromptStep(PipelineStep):
    def __init__(
        self,
        template: str,
        capabilities: PipelineCapabilities,
        toolset_factory: ToolSetFactory,
    ) -> None:
        self._template = template
        self._capabilities = capabilities
        self._toolset_factory = toolset_factory

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.source is None:
            raise ValueError("PipelineContext.source must be set before composing the prompt")
        source = context.source
        model_fetches = source.deferred

        context.instruction = compose(context.request.output_format, context.request.question)
        context.prompt = self._template.format(
            language_rule=language_rule(context.language),
            source_rule=source_rule(model_fetches),
            source_text=source.text,
            url=source.url if model_fetches else "",
            instruction=context.instruction,
        )

        names = set(self._capabilities.tools) - FETCH_TOOL_NAMES
        if model_fetches:
            names.add(
                FETCH_TRANSCRIPT if source.source_kind is SourceKind.TRANSCRIPT
                else FETCH_TEXT_FROM_URL
            )
        tools = self._toolset_factory(context.language).subset(names)
        context.tools = tools if len(tools) else None

        choice = self._capabilities.tool_choice
        if choice.startswith("tool:") and choice[len("tool:"):] not in tools:
            choice = "auto"
        context.tool_choice = choice
        Log.debug(f"Processing prompt:\n{context.prompt}")
        return context


class InvokeModelStep(PipelineStep):
    def __init__(
        self,
        client: BaseModelClient,
        output_schema: dict[str, object],
        schema_name: str = "processing_result",
    ) -> None:
        self._client = client
        self._output_schema = output_schema
        self._schema_name = schema_name

    async def run(self, context: PipelineContext) -> PipelineContext:
        response = await self._client.generate(
            context.prompt,
            output_schema=self._output_schema,
            schema_name=self._schema_name,
            tools=context.tools,
            tool_choice=context.tool_choice,
        )
        Log.debug(f"AI raw response:\n{response.text}")
        data = response.output()
        if data is None:
            raise ModelInvocationError("AI returned no structured output")
        context.response = response
        context.structured_output = data
        return context


class PostProcessStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.source is None or context.response is None:
            raise ValueError("PipelineContext.source and response must be set before post-processing")
        source = context.source

        fetched = [m.content for m in context.response.tool_messages(FETCH_TOOL_NAMES)]
        if source.source_kind is not SourceKind.LITERAL and not source.deferred:
            fetched.insert(0, source.text)
        original = source.text if source.source_kind is SourceKind.LITERAL else ""

        context.result = postprocess(
            context.structured_output,
            original,
            output_format=context.request.output_format,
            fetched_texts=fetched,
            source_kind=source.source_kind,
        )
        Log.info(
            "Processing complete",
            format=context.result.output_format.value,
            original_words=context.result.word_count_original,
            output_words=context.result.word_count_summary,
        )
        return context
