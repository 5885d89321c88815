"""Fixed failure sentences returned in-band by the fetch tools.

The model relays them to the user instead of processing them further, so
they are phrased for the end user in each supported output language.
"""

from enum import Enum

from ringkas.processing.models import OutputLanguage


class FailureKind(str, Enum):
    URL_UNREACHABLE = "url_unreachable"
    URL_EMPTY = "url_empty"
    TRANSCRIPT_UNAVAILABLE = "transcript_unavailable"


_FAILURE_MESSAGES: dict[FailureKind, dict[OutputLanguage, str]] = {
    FailureKind.URL_UNREACHABLE: {
        OutputLanguage.INDONESIAN: (
            "Gagal mengambil konten dari URL. Pastikan URL valid dan dapat diakses."
        ),
        OutputLanguage.ENGLISH: (
            "Failed to fetch content from the URL. "
            "Make sure the URL is valid and accessible."
        ),
        OutputLanguage.ARABIC: (
            "تعذّر جلب المحتوى من الرابط. تأكد من أن الرابط صالح ويمكن الوصول إليه."
        ),
    },
    FailureKind.URL_EMPTY: {
        OutputLanguage.INDONESIAN: "Gagal mengambil konten dari URL karena isinya kosong.",
        OutputLanguage.ENGLISH: "Failed to fetch content from the URL because the page is empty.",
        OutputLanguage.ARABIC: "تعذّر جلب المحتوى من الرابط لأن الصفحة فارغة.",
    },
    FailureKind.TRANSCRIPT_UNAVAILABLE: {
        OutputLanguage.INDONESIAN: (
            "Gagal mengambil transkrip dari video YouTube. "
            "Pastikan video memiliki subtitle."
        ),
        OutputLanguage.ENGLISH: (
            "Failed to fetch the transcript of the YouTube video. "
            "Make sure the video has subtitles."
        ),
        OutputLanguage.ARABIC: (
            "تعذّر جلب نص فيديو يوتيوب. تأكد من أن الفيديو يحتوي على ترجمة."
        ),
    },
}

_ALL_MESSAGES = frozenset(
    message
    for by_language in _FAILURE_MESSAGES.values()
    for message in by_language.values()
)


def failure_message(kind: FailureKind, language: OutputLanguage) -> str:
    return _FAILURE_MESSAGES[kind][language]


def is_failure_message(text: str) -> bool:
    """True when ``text`` is one of the fixed failure sentences."""
    return text.strip() in _ALL_MESSAGES
