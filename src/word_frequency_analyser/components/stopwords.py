"""
Компонент для фильтрации стоп-слов.

Множество стоп-слов строится один раз: каждое слово исходного списка
проходит через тот же нормализатор, что и текст документа (поэтому регистр
и диакритика в списке могут быть любыми), дубликаты схлопываются.
После построения множество неизменяемо и может безопасно разделяться
между параллельными анализами.
"""

from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Union
from ..interfaces.text_processor import StopwordFilterInterface, TextNormalizerInterface
from ..stopwords_fr import DEFAULT_STOPWORDS
from .normalizer import TextNormalizer
import logging

logger = logging.getLogger(__name__)


def build_stopword_set(raw_list: Iterable[str],
                       normalizer: Optional[TextNormalizerInterface] = None) -> FrozenSet[str]:
    """
    Строит нормализованное множество стоп-слов.

    Args:
        raw_list: Исходный список слов
        normalizer: Нормализатор (тот же, что используется для текста)

    Returns:
        Неизменяемое множество нормализованных слов (без пустых строк)
    """
    normalizer = normalizer or TextNormalizer()
    normalized = (normalizer.normalize(word) for word in raw_list if word)
    return frozenset(word for word in normalized if word)


def load_stopwords_file(path: Union[str, Path]) -> List[str]:
    """
    Читает список стоп-слов из файла: одно слово на строку, '#' - комментарий.

    Args:
        path: Путь к файлу (UTF-8)

    Returns:
        Список слов в порядке файла
    """
    words = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith('#'):
                continue
            words.append(word)
    logger.info(f"Загружено стоп-слов из {path}: {len(words)}")
    return words


class StopwordFilter(StopwordFilterInterface):
    """Фильтр стоп-слов на основе хеш-множества."""

    def __init__(self, raw_list: Optional[Iterable[str]] = None,
                 normalizer: Optional[TextNormalizerInterface] = None):
        """
        Инициализирует фильтр.

        Args:
            raw_list: Исходный список стоп-слов (по умолчанию французский)
            normalizer: Нормализатор для приведения списка к форме токенов
        """
        if raw_list is None:
            raw_list = DEFAULT_STOPWORDS
        self._stopwords = build_stopword_set(raw_list, normalizer)
        logger.debug(f"Множество стоп-слов построено: {len(self._stopwords)} слов")

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  normalizer: Optional[TextNormalizerInterface] = None) -> 'StopwordFilter':
        """Создаёт фильтр из файла со списком стоп-слов."""
        return cls(load_stopwords_file(path), normalizer)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopwords

    def __len__(self) -> int:
        return len(self._stopwords)

    def __contains__(self, token: object) -> bool:
        return token in self._stopwords

    def is_stopword(self, token: str) -> bool:
        """
        Проверяет, является ли токен стоп-словом.

        Сравнение точное: токен уже нормализован, повторная нормализация не выполняется.
        """
        return token in self._stopwords

    def keep(self, token: str) -> bool:
        """Токен сохраняется, если он непустой и не является стоп-словом."""
        return bool(token) and token not in self._stopwords

    def filter_tokens(self, tokens: Iterable[str]) -> List[str]:
        """
        Оставляет только токены, прошедшие фильтр, сохраняя порядок.

        Args:
            tokens: Последовательность токенов

        Returns:
            Отфильтрованный список токенов
        """
        if not tokens:
            return []
        return [token for token in tokens if self.keep(token)]
