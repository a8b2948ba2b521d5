"""
Word Frequency Analyser - частотный анализ слов в документах

Этот модуль предоставляет инструменты для:
- Извлечения текста из PDF/HTML/TXT
- Нормализации и токенизации текста (Unicode)
- Фильтрации стоп-слов (французский список по умолчанию)
- Построения частотной таблицы и поиска по ней
- Экспорта результатов в CSV, Excel и JSON
"""

__version__ = "0.1.0"

from .exceptions import AnalyserError, ExtractionError, UnsupportedDocumentError
from .interfaces.text_processor import ExportRow, FrequencyAnalysisResult, FrequencyTable, RankedEntry
from .components.text_pipeline import WordFrequencyPipeline

__all__ = [
    "WordFrequencyPipeline",
    "FrequencyTable",
    "FrequencyAnalysisResult",
    "RankedEntry",
    "ExportRow",
    "AnalyserError",
    "ExtractionError",
    "UnsupportedDocumentError",
]
