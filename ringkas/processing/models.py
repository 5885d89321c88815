from dataclasses import dataclass, field
from enum import Enum

from ringkas.processing.word_count import reduction_percentage


class OutputFormat(str, Enum):
    """Transformation the user asked for. Values match the wire format."""

    SUMMARY = "summary"
    KEY_POINTS = "keyPoints"
    QUESTIONS = "questions"
    CONTENT_IDEAS = "contentIdeas"


class OutputLanguage(str, Enum):
    INDONESIAN = "indonesian"
    ENGLISH = "english"
    ARABIC = "arabic"


class SourceKind(str, Enum):
    """Where the text that was processed came from."""

    LITERAL = "literal"
    SCRAPE = "scrape"
    TRANSCRIPT = "transcript"


class FetchMode(str, Enum):
    """Who fetches URL content: the resolver before the model call, or the model."""

    RESOLVER = "resolver"
    MODEL = "model"


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class ProcessingRequest:
    """One user action: text and/or URL plus the requested transformation."""

    text: str | None = None
    url: str | None = None
    question: str | None = None
    output_format: OutputFormat = OutputFormat.SUMMARY
    output_language: OutputLanguage | None = None


@dataclass(frozen=True)
class ResolvedSource:
    """Raw text chosen by the input resolver."""

    text: str
    source_kind: SourceKind
    url: str | None = None
    failed: bool = False
    deferred: bool = False


@dataclass(frozen=True)
class ProcessingResult:
    """Output of the processing pipeline for one request."""

    output: str
    word_count_original: int
    word_count_summary: int
    output_format: OutputFormat
    answer: str | None = None
    source_kind: SourceKind = SourceKind.LITERAL
    format_issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def reduction_percentage(self) -> int:
        return reduction_percentage(self.word_count_original, self.word_count_summary)


@dataclass(frozen=True)
class AnswerResult:
    answer: str


@dataclass(frozen=True)
class SentimentResult:
    sentiment: Sentiment
    explanation: str
