"""
Слой запросов и экспорта над частотной таблицей.

Таблица передаётся явно в каждый вызов: хранилище не держит результатов
между запросами, за хранение таблицы отвечает вызывающий слой.
"""

from typing import List, Optional
from ..interfaces.text_processor import (
    ExportRow,
    FrequencyTable,
    RankedEntry,
    TextNormalizerInterface,
    TokenizerInterface,
)
from .normalizer import TextNormalizer
from .tokenizer import Tokenizer


class FrequencyStore:
    """Точечные запросы и табличный экспорт частотной таблицы."""

    def __init__(self, normalizer: Optional[TextNormalizerInterface] = None,
                 tokenizer: Optional[TokenizerInterface] = None):
        """
        Args:
            normalizer: Тот же нормализатор, что применялся к документу
            tokenizer: Токенизатор, задающий политику допустимых символов
        """
        self.normalizer = normalizer or TextNormalizer()
        self.tokenizer = tokenizer or Tokenizer()

    def normalize_query(self, raw_query: Optional[str]) -> str:
        """Приводит запрос к форме ключа таблицы."""
        if not raw_query:
            return ""
        return self.tokenizer.clean_query(self.normalizer.normalize(raw_query.strip()))

    def lookup(self, table: FrequencyTable, raw_query: Optional[str]) -> int:
        """
        Возвращает количество вхождений слова.

        Отсутствие слова - не ошибка: возвращается 0.

        Args:
            table: Частотная таблица
            raw_query: Слово в том виде, как его ввёл пользователь

        Returns:
            Количество вхождений (>= 0)
        """
        key = self.normalize_query(raw_query)
        if not key or table is None:
            return 0
        return table.get(key, 0)

    def export_rows(self, table: FrequencyTable) -> List[ExportRow]:
        """
        Формирует строки (ранг, слово, количество) в ранжированном порядке.

        Ранг позиционный и начинается с 1.
        """
        if not table:
            return []
        return [
            ExportRow(rank, entry.word, entry.count)
            for rank, entry in enumerate(table.ranked(), 1)
        ]

    def top(self, table: FrequencyTable, n: int = 10) -> List[RankedEntry]:
        """Возвращает n самых частых слов."""
        if not table or n <= 0:
            return []
        return table.ranked()[:n]
