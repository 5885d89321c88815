import pytest

from ringkas.processing.exceptions import EmptyInputError
from ringkas.processing.models import OutputFormat, SourceKind
from ringkas.processing.postprocessor import postprocess, select_baseline


class TestSelectBaseline:
    def test_literal_when_nothing_fetched(self) -> None:
        assert select_baseline("Teks asli.", []) == "Teks asli."

    def test_fetched_text_wins(self) -> None:
        assert select_baseline("", ["Isi halaman web."]) == "Isi halaman web."

    def test_failure_sentences_are_ignored(self) -> None:
        fetched = ["Gagal mengambil konten dari URL karena isinya kosong."]
        assert select_baseline("Teks asli.", fetched) == "Teks asli."

    def test_multiple_fetches_are_joined(self) -> None:
        assert select_baseline("", ["Satu dua.", "  ", "Tiga."]) == "Satu dua. Tiga."


class TestPostprocess:
    def test_counts_words_of_original_and_output(self) -> None:
        result = postprocess(
            {"output": "Ringkas saja.", "answer": None},
            "Kalimat satu. Kalimat dua. Kalimat tiga.",
            output_format=OutputFormat.SUMMARY,
        )
        assert result.output == "Ringkas saja."
        assert result.word_count_original == 6
        assert result.word_count_summary == 2
        assert result.reduction_percentage == 67
        assert result.answer is None

    def test_answer_is_carried_over(self) -> None:
        result = postprocess(
            {"output": "Ringkasan.", "answer": "Jakarta."},
            "Ibu kota Indonesia adalah Jakarta.",
            output_format=OutputFormat.SUMMARY,
        )
        assert result.answer == "Jakarta."

    def test_blank_answer_becomes_none(self) -> None:
        result = postprocess(
            {"output": "Ringkasan.", "answer": "  "},
            "Teks.",
            output_format=OutputFormat.SUMMARY,
        )
        assert result.answer is None

    def test_fetched_text_is_baseline(self) -> None:
        result = postprocess(
            {"output": "Satu."},
            "",
            output_format=OutputFormat.SUMMARY,
            fetched_texts=["a b c d e f g h i j"],
            source_kind=SourceKind.SCRAPE,
        )
        assert result.word_count_original == 10
        assert result.source_kind is SourceKind.SCRAPE
        assert result.reduction_percentage == 90

    def test_non_string_output_is_empty(self) -> None:
        result = postprocess(
            {"output": 42},
            "Teks asli.",
            output_format=OutputFormat.SUMMARY,
        )
        assert result.output == ""
        assert result.word_count_summary == 0

    def test_empty_input_and_output_raise(self) -> None:
        with pytest.raises(EmptyInputError):
            postprocess({"output": ""}, "", output_format=OutputFormat.SUMMARY)

    def test_key_points_with_foreign_bullets_are_reported(self) -> None:
        output = "• Poin satu\n- Poin dua\n* Poin tiga"
        result = postprocess(
            {"output": output},
            "Teks sumber yang panjang.",
            output_format=OutputFormat.KEY_POINTS,
        )
        assert result.format_issues == ("- Poin dua", "* Poin tiga")
        assert result.output == output

    def test_clean_key_points_have_no_issues(self) -> None:
        result = postprocess(
            {"output": "• Poin satu\n• Poin dua"},
            "Teks sumber.",
            output_format=OutputFormat.KEY_POINTS,
        )
        assert result.format_issues == ()

    def test_other_formats_skip_bullet_check(self) -> None:
        result = postprocess(
            {"output": "- pertanyaan?"},
            "Teks sumber.",
            output_format=OutputFormat.QUESTIONS,
        )
        assert result.format_issues == ()
