"""
Исключения анализатора частотности слов.

Ядро пайплайна поднимает наружу только ошибку извлечения текста:
проблемы кодировки исправляются заменой, а отсутствие слова в таблице
не является ошибкой (возвращается 0).
"""

from typing import Optional


class AnalyserError(Exception):
    """Базовое исключение пакета."""


class ExtractionError(AnalyserError):
    """Текст документа не удалось извлечь (или он пуст) - анализ не выполняется."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message


class UnsupportedDocumentError(ExtractionError):
    """Формат документа не поддерживается экстрактором."""
