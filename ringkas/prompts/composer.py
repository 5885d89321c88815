"""Fixed instruction text for each output format and language."""

from ringkas.processing.models import OutputFormat, OutputLanguage

BULLET = "•"

NOT_FOUND_ANSWER = "Informasi untuk menjawab pertanyaan tersebut tidak ditemukan dalam teks."

INSTRUCTIONS: dict[OutputFormat, str] = {
    OutputFormat.SUMMARY: (
        "Buat ringkasan singkat dari teks, tidak lebih dari 30% dari panjang aslinya, "
        "sambil mempertahankan informasi utama."
    ),
    OutputFormat.KEY_POINTS: (
        "Ekstrak poin-poin penting dari teks sebagai daftar berpoin. "
        f"PENTING: Gunakan HANYA karakter bullet point ({BULLET}) untuk setiap poin. "
        "JANGAN gunakan tanda bintang (*) atau tanda hubung (-)."
    ),
    OutputFormat.QUESTIONS: (
        "Buat daftar pertanyaan penting berdasarkan teks sebagai daftar bernomor."
    ),
    OutputFormat.CONTENT_IDEAS: (
        "Berdasarkan teks yang diberikan, hasilkan 5 ide konten yang menarik dalam "
        "format daftar bernomor. Setiap ide harus kreatif dan relevan dengan topik "
        "utama teks."
    ),
}

_QUESTION_CLAUSE = (
    '\n\nSelain itu, jawab pertanyaan berikut: "{question}" HANYA berdasarkan '
    "informasi yang ada di dalam teks yang diberikan. Jika jawaban tidak dapat "
    'ditemukan di dalam teks, katakan "{not_found}" Letakkan jawaban untuk '
    "pertanyaan ini di bidang 'answer' pada output JSON, jangan di bidang 'output'."
)

LANGUAGE_RULES: dict[OutputLanguage, str] = {
    OutputLanguage.INDONESIAN: (
        "PENTING: Seluruh output Anda HARUS dalam Bahasa Indonesia. "
        "Jangan pernah menggunakan Bahasa Inggris."
    ),
    OutputLanguage.ENGLISH: (
        "PENTING: Seluruh output Anda HARUS dalam Bahasa Inggris, "
        "meskipun teks sumbernya berbahasa Indonesia."
    ),
    OutputLanguage.ARABIC: (
        "PENTING: Seluruh output Anda HARUS dalam Bahasa Arab, "
        "meskipun teks sumbernya berbahasa Indonesia."
    ),
}

_SOURCE_RULE_PROVIDED = (
    "Teks sumber sudah disediakan di bawah ini. Terapkan instruksi pemrosesan "
    "pada teks tersebut."
)
_SOURCE_RULE_TOOLS = (
    "Jika URL yang diberikan, gunakan alat 'fetchTextFromUrl' untuk mengambil "
    "kontennya terlebih dahulu. Untuk URL YouTube, gunakan alat "
    "'fetchTranscriptFromYouTubeUrl'.\n"
    "Setelah mendapatkan teks dari URL, atau jika teks sudah disediakan dari awal, "
    "Anda HARUS menerapkan instruksi pemrosesan di bawah ini pada teks tersebut."
)


def compose(output_format: OutputFormat, question: str | None = None) -> str:
    """Return the instruction for ``output_format``, plus a question clause."""
    instruction = INSTRUCTIONS[OutputFormat(output_format)]
    if question and question.strip():
        instruction += _QUESTION_CLAUSE.format(
            question=question.strip(),
            not_found=NOT_FOUND_ANSWER,
        )
    return instruction


def language_rule(language: OutputLanguage) -> str:
    return LANGUAGE_RULES[OutputLanguage(language)]


def source_rule(model_fetches: bool) -> str:
    return _SOURCE_RULE_TOOLS if model_fetches else _SOURCE_RULE_PROVIDED
