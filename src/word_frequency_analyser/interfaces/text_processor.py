"""
Абстрактные интерфейсы и типы данных для компонентов частотного анализа.

Определяет контракты, которые должны реализовывать все компоненты
пайплайна (нормализация → токенизация → стоп-слова → подсчёт → запросы),
обеспечивая единообразный API и возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Union, Any


class RankedEntry(NamedTuple):
    """Пара (слово, количество) в каноническом порядке частотной таблицы."""
    word: str
    count: int


class ExportRow(NamedTuple):
    """Строка экспорта: позиционный ранг (с 1), слово, количество."""
    rank: int
    word: str
    count: int


@dataclass(frozen=True, eq=False)
class FrequencyTable:
    """
    Частотная таблица слов.

    counts хранит слова уже в ранжированном порядке: по убыванию количества,
    при равенстве - в порядке первого появления в потоке токенов.
    total_filtered_words - число токенов, прошедших фильтр (сумма counts),
    а не число различных слов.
    """
    counts: Dict[str, int] = field(default_factory=dict)
    total_filtered_words: int = 0

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, word: object) -> bool:
        return word in self.counts

    def __bool__(self) -> bool:
        return bool(self.counts)

    def __eq__(self, other: object) -> bool:
        # Порядок слов входит в значение таблицы
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return (
            self.total_filtered_words == other.total_filtered_words
            and list(self.counts.items()) == list(other.counts.items())
        )

    __hash__ = None

    def get(self, word: str, default: int = 0) -> int:
        return self.counts.get(word, default)

    @property
    def unique_words(self) -> int:
        return len(self.counts)

    def ranked(self) -> List[RankedEntry]:
        """Возвращает записи в каноническом ранжированном порядке."""
        return [RankedEntry(word, count) for word, count in self.counts.items()]

    def to_dict(self) -> Dict[str, int]:
        return dict(self.counts)


@dataclass
class FrequencyAnalysisResult:
    """Результат анализа одного документа."""
    table: FrequencyTable
    token_count: int
    processing_time: float
    source_name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @property
    def total_filtered_words(self) -> int:
        return self.table.total_filtered_words

    @property
    def unique_words(self) -> int:
        return self.table.unique_words


class TextNormalizerInterface(ABC):
    """Интерфейс для нормализации текста."""

    @abstractmethod
    def normalize(self, text: Union[str, bytes, None]) -> str:
        """Приводит текст к канонической форме сравнения."""
        pass


class TokenizerInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает нормализованный текст на токены."""
        pass

    @abstractmethod
    def clean_query(self, text: str) -> str:
        """Очищает одиночное слово запроса по той же политике символов."""
        pass


class StopwordFilterInterface(ABC):
    """Интерфейс для фильтрации стоп-слов."""

    @property
    @abstractmethod
    def stopwords(self) -> FrozenSet[str]:
        """Нормализованное множество стоп-слов."""
        pass

    @abstractmethod
    def is_stopword(self, token: str) -> bool:
        """Проверяет, является ли токен стоп-словом."""
        pass

    @abstractmethod
    def filter_tokens(self, tokens: Iterable[str]) -> List[str]:
        """Оставляет только токены, не являющиеся стоп-словами."""
        pass


class FrequencyAggregatorInterface(ABC):
    """Интерфейс для подсчёта частотности слов."""

    @abstractmethod
    def aggregate(self, tokens: Iterable[str],
                  stopword_filter: Optional[StopwordFilterInterface] = None) -> FrequencyTable:
        """Фильтрует токены и строит частотную таблицу."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_csv(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в CSV."""
        pass

    @abstractmethod
    def export_to_excel(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_json(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в JSON формат."""
        pass
