"""
Пайплайн частотного анализа документа.

Поток данных: сырой текст → TextNormalizer → Tokenizer → StopwordFilter →
FrequencyAggregator → FrequencyTable. Пайплайн синхронный и не хранит
состояния между вызовами: каждый анализ возвращает независимую таблицу,
которую вызывающий слой сам передаёт в последующие запросы и экспорт.
"""

import time
from pathlib import Path
from typing import List, Optional, Union
from ..exceptions import ExtractionError
from ..interfaces.text_processor import (
    ExportRow,
    FrequencyAnalysisResult,
    FrequencyTable,
    RankedEntry,
)
from .extractor import DocumentTextExtractor, RawText
from .frequency_analyzer import FrequencyAggregator
from .frequency_store import FrequencyStore
from .normalizer import TextNormalizer
from .stopwords import StopwordFilter, load_stopwords_file
from .tokenizer import CharacterPolicy, Tokenizer
from ..stopwords_fr import DEFAULT_STOPWORDS
import logging

logger = logging.getLogger(__name__)

TableSource = Union[FrequencyTable, FrequencyAnalysisResult]


class WordFrequencyPipeline:
    """
    Единая точка входа для анализа частотности слов.

    Все компоненты передаются явно; from_config() собирает их
    из конфигурации проекта.
    """

    def __init__(self,
                 normalizer: Optional[TextNormalizer] = None,
                 tokenizer: Optional[Tokenizer] = None,
                 stopword_filter: Optional[StopwordFilter] = None,
                 aggregator: Optional[FrequencyAggregator] = None,
                 extractor: Optional[DocumentTextExtractor] = None):
        """
        Инициализирует пайплайн.

        Args:
            normalizer: Нормализатор текста
            tokenizer: Токенизатор с политикой символов
            stopword_filter: Фильтр стоп-слов (по умолчанию французский список)
            aggregator: Агрегатор частотности
            extractor: Экстрактор текста документов
        """
        self.normalizer = normalizer or TextNormalizer()
        self.tokenizer = tokenizer or Tokenizer()
        # Пустой фильтр (без стоп-слов) - допустимое значение
        if stopword_filter is None:
            stopword_filter = StopwordFilter(normalizer=self.normalizer)
        self.stopword_filter = stopword_filter
        self.aggregator = aggregator or FrequencyAggregator()
        self.extractor = extractor or DocumentTextExtractor()
        self.store = FrequencyStore(self.normalizer, self.tokenizer)

    @classmethod
    def from_config(cls, cfg=None) -> 'WordFrequencyPipeline':
        """Собирает пайплайн по настройкам config.yaml."""
        if cfg is None:
            from ..config import config as cfg

        normalizer = TextNormalizer(
            unicode_form=cfg.get_unicode_form(),
            fallback_encoding=cfg.get_fallback_encoding(),
        )
        tokenizer = Tokenizer(CharacterPolicy(
            word_chars=cfg.get_word_chars(),
            drop_tokens_without_alnum=cfg.is_drop_tokens_without_alnum_enabled(),
        ))

        raw_stopwords: List[str] = list(DEFAULT_STOPWORDS) if cfg.use_default_stopwords() else []
        stopwords_file = cfg.get_stopwords_file()
        if stopwords_file:
            raw_stopwords.extend(load_stopwords_file(stopwords_file))
        raw_stopwords.extend(cfg.get_extra_stopwords())

        extractor = DocumentTextExtractor(
            pdf_engine=cfg.get_pdf_engine(),
            timeout=cfg.get_extraction_timeout(),
        )
        return cls(
            normalizer=normalizer,
            tokenizer=tokenizer,
            stopword_filter=StopwordFilter(raw_stopwords, normalizer),
            extractor=extractor,
        )

    def analyze_text(self, raw_text: Optional[RawText], source_name: Optional[str] = None,
                     encoding: Optional[str] = None) -> FrequencyAnalysisResult:
        """
        Анализирует уже извлечённый текст.

        Args:
            raw_text: Сырой текст (строка или байты)
            source_name: Имя документа для отчётов
            encoding: Объявленная кодировка байтов, если известна

        Returns:
            Результат анализа с частотной таблицей

        Raises:
            ExtractionError: Текст пуст - анализ не запускается
        """
        start = time.perf_counter()
        text = self.normalizer.normalize(raw_text, encoding=encoding)
        # Пустота определяется по декодированному тексту
        if not text.strip():
            raise ExtractionError("Извлечённый текст пуст, анализ не выполняется", source=source_name)

        tokens = self.tokenizer.tokenize(text)
        table = self.aggregator.aggregate(tokens, self.stopword_filter)
        processing_time = time.perf_counter() - start

        logger.info(
            f"Анализ {source_name or 'текста'}: токенов {len(tokens)}, "
            f"после фильтра {table.total_filtered_words}, уникальных {table.unique_words}"
        )
        return FrequencyAnalysisResult(
            table=table,
            token_count=len(tokens),
            processing_time=processing_time,
            source_name=source_name,
        )

    def analyze_document(self, path: Union[str, Path]) -> FrequencyAnalysisResult:
        """
        Извлекает текст документа и анализирует его.

        Raises:
            ExtractionError: Извлечение не удалось или дало пустой текст
        """
        path = Path(path)
        raw_text = self.extractor.extract(path)
        result = self.analyze_text(raw_text, source_name=path.name)
        result.metadata = {'path': str(path), 'pdf_engine': self.extractor.pdf_engine}
        return result

    def lookup(self, source: TableSource, word: Optional[str]) -> int:
        """Количество вхождений слова (0, если слова нет)."""
        return self.store.lookup(_as_table(source), word)

    def export_rows(self, source: TableSource) -> List[ExportRow]:
        """Строки (ранг, слово, количество) в ранжированном порядке."""
        return self.store.export_rows(_as_table(source))

    def top(self, source: TableSource, n: int = 10) -> List[RankedEntry]:
        """n самых частых слов."""
        return self.store.top(_as_table(source), n)


def _as_table(source: TableSource) -> FrequencyTable:
    if isinstance(source, FrequencyAnalysisResult):
        return source.table
    return source
