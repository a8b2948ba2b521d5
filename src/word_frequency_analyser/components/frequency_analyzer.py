"""
Компонент для подсчёта частотности слов.

Отвечает за фильтрацию токенов по стоп-словам, подсчёт количества
вхождений и построение ранжированного представления таблицы.

Порядок ранжирования: по убыванию количества; при равном количестве
слова идут в порядке первого появления в потоке токенов. Counter хранит
ключи в порядке вставки, а most_common() выполняет устойчивую сортировку,
поэтому результат воспроизводим для одинакового входа.
"""

from collections import Counter, defaultdict
from typing import Dict, Iterable, Optional
from ..interfaces.text_processor import (
    FrequencyAggregatorInterface,
    FrequencyTable,
    StopwordFilterInterface,
)
import logging

logger = logging.getLogger(__name__)


class FrequencyAggregator(FrequencyAggregatorInterface):
    """Агрегатор частотности слов (без состояния между вызовами)."""

    def aggregate(self, tokens: Iterable[str],
                  stopword_filter: Optional[StopwordFilterInterface] = None) -> FrequencyTable:
        """
        Фильтрует токены и подсчитывает частоту появления слов.

        Args:
            tokens: Токены в порядке появления в тексте
            stopword_filter: Фильтр стоп-слов (None - пустые токены всё равно отбрасываются)

        Returns:
            Частотная таблица в ранжированном порядке
        """
        if stopword_filter is not None:
            filtered = stopword_filter.filter_tokens(tokens)
        else:
            filtered = [token for token in tokens if token]

        if not filtered:
            return FrequencyTable()

        word_counts = Counter(filtered)
        ranked = dict(word_counts.most_common())
        logger.debug(f"Подсчитано слов: {len(filtered)}, уникальных: {len(ranked)}")

        return FrequencyTable(counts=ranked, total_filtered_words=len(filtered))

    def frequency_distribution(self, table: FrequencyTable) -> Dict[int, int]:
        """
        Возвращает распределение слов по частоте.

        Returns:
            Словарь {частота: количество слов}, по убыванию частоты
        """
        if not table:
            return {}

        distribution = defaultdict(int)
        for count in table.counts.values():
            distribution[count] += 1

        return dict(distribution)
