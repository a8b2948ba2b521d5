"""
Тесты для WordFrequencyPipeline.
"""

import pytest

from word_frequency_analyser import ExtractionError, WordFrequencyPipeline
from word_frequency_analyser.components.stopwords import StopwordFilter
from word_frequency_analyser.interfaces.text_processor import ExportRow, FrequencyAnalysisResult


class TestWordFrequencyPipeline:
    """Тесты для пайплайна частотного анализа."""

    def test_simple_document(self, pipeline, sample_texts):
        """Простой документ: стоп-слова отброшены, частоты подсчитаны."""
        result = pipeline.analyze_text(sample_texts["simple"])

        assert isinstance(result, FrequencyAnalysisResult)
        assert result.table.counts == {"chat": 2, "mange": 1, "dort": 1}
        assert result.total_filtered_words == 4
        assert result.unique_words == 3
        assert result.token_count == 6
        assert pipeline.export_rows(result)[0] == ExportRow(1, "chat", 2)

    def test_case_and_diacritics(self, pipeline):
        """Регистр и форма записи диакритики не разделяют слова."""
        result = pipeline.analyze_text("Café CAFÉ café café")

        assert result.table.counts == {"café": 4}
        assert pipeline.lookup(result, "CAFÉ") == 4

    def test_numbers_only(self, pipeline, sample_texts):
        """Документ только из числовых стоп-слов даёт пустую таблицу."""
        result = pipeline.analyze_text(sample_texts["numbers"])

        assert len(result.table) == 0
        assert result.total_filtered_words == 0
        assert result.token_count == 3
        assert pipeline.export_rows(result) == []

    def test_complex_document(self, pipeline, sample_texts):
        result = pipeline.analyze_text(sample_texts["complex"])

        assert [row.word for row in pipeline.export_rows(result)] == [
            "l'été", "enfants", "dernier", "paris", "jouaient",
            "jardin", "aujourd'hui", "revenu", "jouent", "encore",
        ]
        assert result.total_filtered_words == 12
        assert result.token_count == 18
        assert pipeline.lookup(result, "L'ÉTÉ") == 2

    def test_empty_text_raises(self, pipeline):
        """Пустой текст - ошибка извлечения, а не пустая таблица."""
        for raw in ("", "  \n\t", None, b"", b"  "):
            with pytest.raises(ExtractionError):
                pipeline.analyze_text(raw)

    def test_blank_after_decoding_raises(self, pipeline):
        """Неразрывные пробелы считаются пустым текстом и в str, и в bytes."""
        for raw in ("\u00a0", "\u00a0".encode("utf-8"), " \u2009\n".encode("utf-16")):
            with pytest.raises(ExtractionError):
                pipeline.analyze_text(raw)

    def test_utf16_bytes_input(self, pipeline):
        result = pipeline.analyze_text("Le chat mange".encode("utf-16"))

        assert result.table.counts == {"chat": 1, "mange": 1}
        assert result.token_count == 3

    def test_bytes_input(self, pipeline):
        result = pipeline.analyze_text("Le chat, l'été.".encode("cp1252"), source_name="chat.txt")

        assert result.table.counts == {"chat": 1, "l'été": 1}
        assert result.source_name == "chat.txt"

    def test_declared_encoding(self, pipeline):
        result = pipeline.analyze_text("Noël".encode("latin-1"), encoding="latin-1")

        assert result.table.counts == {"noël": 1}

    def test_lookup(self, pipeline, sample_texts):
        result = pipeline.analyze_text(sample_texts["simple"])

        assert pipeline.lookup(result, "Chat") == 2
        assert pipeline.lookup(result.table, "chat") == 2
        assert pipeline.lookup(result, "xyzzy") == 0
        assert pipeline.lookup(result, "le") == 0

    def test_top(self, pipeline, sample_texts):
        result = pipeline.analyze_text(sample_texts["simple"])

        top = pipeline.top(result, 1)
        assert len(top) == 1
        assert top[0].word == "chat"
        assert top[0].count == 2

    def test_independent_analyses(self, pipeline):
        """Каждый анализ возвращает независимую таблицу."""
        first = pipeline.analyze_text("chat chat")
        second = pipeline.analyze_text("chien")

        assert first.table.counts == {"chat": 2}
        assert second.table.counts == {"chien": 1}

    def test_empty_stopword_filter(self):
        """Явно пустой фильтр не заменяется французским списком."""
        pipeline = WordFrequencyPipeline(stopword_filter=StopwordFilter([]))

        result = pipeline.analyze_text("Le chat et le chien")

        assert len(pipeline.stopword_filter) == 0
        assert result.table.counts == {"le": 2, "chat": 1, "et": 1, "chien": 1}
        assert result.total_filtered_words == 5

    def test_custom_stopwords(self):
        pipeline = WordFrequencyPipeline(stopword_filter=StopwordFilter(["Chat"]))

        result = pipeline.analyze_text("Le chat mange")

        assert result.table.counts == {"le": 1, "mange": 1}

    def test_analyze_document(self, pipeline, temp_directory, sample_texts):
        path = temp_directory / "page.html"
        path.write_text(sample_texts["html"], encoding="utf-8")

        result = pipeline.analyze_document(path)

        assert result.table.counts == {"chat": 2, "mange": 1, "dort": 1}
        assert result.source_name == "page.html"
        assert result.metadata["path"] == str(path)
        assert result.metadata["pdf_engine"] == "pymupdf"

    def test_analyze_document_empty(self, pipeline, temp_directory):
        path = temp_directory / "vide.txt"
        path.write_bytes(b"   ")

        with pytest.raises(ExtractionError):
            pipeline.analyze_document(path)
