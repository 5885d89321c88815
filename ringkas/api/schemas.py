"""Request and response bodies of the HTTP API (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ringkas.pdf.models import PdfText
from ringkas.processing.models import (
    AnswerResult,
    OutputFormat,
    OutputLanguage,
    ProcessingRequest,
    ProcessingResult,
    Sentiment,
    SentimentResult,
    SourceKind,
)
from ringkas.processing.word_count import count_words


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessRequestBody(ApiModel):
    text: str | None = None
    url: str | None = None
    question: str | None = None
    output_format: OutputFormat = OutputFormat.SUMMARY
    output_language: OutputLanguage | None = None

    def to_domain(self) -> ProcessingRequest:
        return ProcessingRequest(
            text=self.text,
            url=self.url,
            question=self.question,
            output_format=self.output_format,
            output_language=self.output_language,
        )


class ProcessResponseBody(ApiModel):
    output: str
    answer: str | None = None
    word_count_original: int
    word_count_summary: int
    reduction_percentage: int
    output_format: OutputFormat
    source_kind: SourceKind
    format_issues: list[str] = []

    @classmethod
    def from_result(cls, result: ProcessingResult) -> "ProcessResponseBody":
        return cls(
            output=result.output,
            answer=result.answer,
            word_count_original=result.word_count_original,
            word_count_summary=result.word_count_summary,
            reduction_percentage=result.reduction_percentage,
            output_format=result.output_format,
            source_kind=result.source_kind,
            format_issues=list(result.format_issues),
        )


class AnswerRequestBody(ApiModel):
    source_text: str
    question: str
    output_language: OutputLanguage | None = None


class AnswerResponseBody(ApiModel):
    answer: str

    @classmethod
    def from_result(cls, result: AnswerResult) -> "AnswerResponseBody":
        return cls(answer=result.answer)


class SentimentRequestBody(ApiModel):
    text: str


class SentimentResponseBody(ApiModel):
    sentiment: Sentiment
    explanation: str

    @classmethod
    def from_result(cls, result: SentimentResult) -> "SentimentResponseBody":
        return cls(sentiment=result.sentiment, explanation=result.explanation)


class PdfTextResponseBody(ApiModel):
    text: str
    word_count: int
    page_count: int
    file_name: str | None = None

    @classmethod
    def from_result(cls, result: PdfText, file_name: str | None) -> "PdfTextResponseBody":
        return cls(
            text=result.text,
            word_count=count_words(result.text),
            page_count=result.page_count,
            file_name=file_name,
        )


class ErrorBody(ApiModel):
    error: str
