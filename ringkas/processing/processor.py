from ringkas.config.settings import Settings
from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.exceptions import ModelInvocationError
from ringkas.llm.factory import ModelClientFactory
from ringkas.logging.logger import Log
from ringkas.processing.exceptions import MissingInputError, ProcessingError
from ringkas.processing.models import (
    AnswerResult,
    OutputLanguage,
    ProcessingRequest,
    ProcessingResult,
    Sentiment,
    SentimentResult,
)
from ringkas.processing.pipeline import PipelineCapabilities, PipelineContext, PipelineStep
from ringkas.processing.resolver import InputResolver
from ringkas.processing.steps import (
    ComposePromptStep,
    InvokeModelStep,
    PostProcessStep,
    ResolveInputStep,
)
from ringkas.prompts.composer import NOT_FOUND_ANSWER, language_rule
from ringkas.prompts.prompt_loader import load_json_schema, load_prompt_template
from ringkas.tools.registry import ToolSet, build_toolset
from ringkas.tools.transcript import TranscriptFetcher
from ringkas.tools.web_page import WebPageFetcher


class TextProcessor:
    """Runs the text pipeline and the standalone question/sentiment flows.

    Pipeline: resolve input -> compose prompt -> invoke model -> post-process.
    """

    def __init__(
        self,
        *,
        steps: list[PipelineStep],
        client: BaseModelClient,
        default_language: OutputLanguage = OutputLanguage.INDONESIAN,
    ) -> None:
        self._steps = steps
        self._client = client
        self._default_language = default_language
        self._answer_template = load_prompt_template("answer")
        self._answer_schema = load_json_schema("answer")
        self._sentiment_template = load_prompt_template("sentiment")
        self._sentiment_schema = load_json_schema("sentiment")

    async def process(self, request: ProcessingRequest) -> ProcessingResult:
        """Turn a request into a summary, key points, questions or content ideas."""
        language = request.output_language or self._default_language
        Log.info(
            "Processing request",
            format=request.output_format.value,
            language=language.value,
            has_text=bool(request.text and request.text.strip()),
            has_url=bool(request.url and request.url.strip()),
            has_question=bool(request.question),
        )
        context = PipelineContext(request=request, language=language)
        for step in self._steps:
            context = await step.run(context)
            if context.result is not None:
                return context.result
        raise ProcessingError("Pipeline finished without producing a result")

    async def answer_question(
        self,
        source_text: str,
        question: str,
        language: OutputLanguage | None = None,
    ) -> AnswerResult:
        """Answer ``question`` strictly from ``source_text``.

        Raises:
            MissingInputError: if the source text or the question is blank.
            ModelInvocationError: if the model returns no structured output.
        """
        if not source_text.strip():
            raise MissingInputError("Source text is required to answer a question.")
        if not question.strip():
            raise MissingInputError("Please enter a question.")

        prompt = self._answer_template.format(
            language_rule=language_rule(language or self._default_language),
            question=question.strip(),
            not_found=NOT_FOUND_ANSWER,
            source_text=source_text,
        )
        Log.debug(f"Answer prompt:\n{prompt}")
        response = await self._client.generate(
            prompt,
            output_schema=self._answer_schema,
            schema_name="answer_question_result",
        )
        data = response.output()
        if data is None:
            raise ModelInvocationError("Failed to get an answer.")
        answer = data.get("answer")
        if not isinstance(answer, str) or not answer.strip():
            answer = NOT_FOUND_ANSWER
        Log.info("Question answered", words=len(answer.split()))
        return AnswerResult(answer=answer)

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        """Classify ``text`` as Positive, Negative or Neutral with a short reason.

        Raises:
            MissingInputError: if the text is blank.
            ModelInvocationError: if the model output is missing or invalid.
        """
        if not text.strip():
            raise MissingInputError("Text is required for sentiment analysis.")

        prompt = self._sentiment_template.format(source_text=text)
        response = await self._client.generate(
            prompt,
            output_schema=self._sentiment_schema,
            schema_name="sentiment_result",
        )
        data = response.output()
        if data is None:
            raise ModelInvocationError("Failed to analyze sentiment.")
        try:
            sentiment = Sentiment(data.get("sentiment"))
        except ValueError as exc:
            raise ModelInvocationError(
                f"AI returned an unknown sentiment: {data.get('sentiment')!r}"
            ) from exc
        explanation = data.get("explanation")
        Log.info("Sentiment analyzed", sentiment=sentiment.value)
        return SentimentResult(
            sentiment=sentiment,
            explanation=explanation if isinstance(explanation, str) else "",
        )


def build_processor(
    settings: Settings,
    client: BaseModelClient | None = None,
) -> TextProcessor:
    """Build a TextProcessor with all required adapters."""
    web_fetcher = WebPageFetcher(
        timeout_seconds=settings.fetch_timeout_seconds,
        user_agent=settings.fetch_user_agent,
    )
    transcript_fetcher = TranscriptFetcher(languages=settings.transcript_languages)
    resolver = InputResolver(web_fetcher=web_fetcher, transcript_fetcher=transcript_fetcher)
    capabilities = PipelineCapabilities.from_settings(settings)
    if client is None:
        client = ModelClientFactory.create(settings)

    def toolset_factory(language: OutputLanguage) -> ToolSet:
        return build_toolset(
            web_fetcher=web_fetcher,
            transcript_fetcher=transcript_fetcher,
            language=language,
        )

    steps: list[PipelineStep] = [
        ResolveInputStep(resolver, capabilities),
        ComposePromptStep(
            load_prompt_template("process"),
            capabilities,
            toolset_factory,
        ),
        InvokeModelStep(client, load_json_schema("process")),
        PostProcessStep(),
    ]
    return TextProcessor(
        steps=steps,
        client=client,
        default_language=settings.default_output_language,
    )
