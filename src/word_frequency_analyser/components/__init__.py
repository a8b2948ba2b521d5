"""
Компоненты частотного анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TextNormalizer - кодировка, Unicode-композиция, приведение регистра
- Tokenizer - разбиение на слова по политике символов
- StopwordFilter - исключение стоп-слов
- FrequencyAggregator - подсчёт частотности и ранжирование
- FrequencyStore - запросы и строки экспорта
- DocumentTextExtractor - извлечение текста из PDF/HTML/TXT
- ResultExporter - экспорт результатов
"""

from .normalizer import TextNormalizer
from .tokenizer import Tokenizer, CharacterPolicy
from .stopwords import StopwordFilter, build_stopword_set, load_stopwords_file
from .frequency_analyzer import FrequencyAggregator
from .frequency_store import FrequencyStore
from .extractor import DocumentTextExtractor
from .exporter import ResultExporter
from .text_pipeline import WordFrequencyPipeline

__all__ = [
    'TextNormalizer',
    'Tokenizer',
    'CharacterPolicy',
    'StopwordFilter',
    'build_stopword_set',
    'load_stopwords_file',
    'FrequencyAggregator',
    'FrequencyStore',
    'DocumentTextExtractor',
    'ResultExporter',
    'WordFrequencyPipeline',
]
