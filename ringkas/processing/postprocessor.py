from collections.abc import Iterable, Mapping

from ringkas.logging.logger import Log
from ringkas.processing.exceptions import EmptyInputError
from ringkas.processing.format_check import find_bullet_violations
from ringkas.processing.models import OutputFormat, ProcessingResult, SourceKind
from ringkas.processing.word_count import count_words
from ringkas.tools.messages import is_failure_message


def select_baseline(original_text: str, fetched_texts: Iterable[str]) -> str:
    """Text the "original" word count is taken from.

    Fetched page or transcript text wins when any fetch succeeded; otherwise
    the literal input is used.
    """
    fetched = [t for t in fetched_texts if t.strip() and not is_failure_message(t)]
    if fetched:
        return " ".join(fetched)
    return original_text


def postprocess(
    data: Mapping[str, object],
    original_text: str,
    *,
    output_format: OutputFormat,
    fetched_texts: Iterable[str] = (),
    source_kind: SourceKind = SourceKind.LITERAL,
) -> ProcessingResult:
    """Build a ProcessingResult from the model's structured output.

    Raises:
        EmptyInputError: if both the baseline and the output are empty.
    """
    output = data.get("output")
    output_text = output if isinstance(output, str) else ""
    answer = data.get("answer")
    answer_text = answer if isinstance(answer, str) and answer.strip() else None

    baseline = select_baseline(original_text or "", fetched_texts)
    if not baseline.strip() and not output_text.strip():
        raise EmptyInputError("No text to process. Please provide text or a valid URL.")

    issues: tuple[str, ...] = ()
    if output_format is OutputFormat.KEY_POINTS:
        issues = tuple(find_bullet_violations(output_text))
        if issues:
            Log.warning(f"Key points use a foreign bullet on {len(issues)} line(s)")

    return ProcessingResult(
        output=output_text,
        answer=answer_text,
        word_count_original=count_words(baseline),
        word_count_summary=count_words(output_text),
        output_format=output_format,
        source_kind=source_kind,
        format_issues=issues,
    )
