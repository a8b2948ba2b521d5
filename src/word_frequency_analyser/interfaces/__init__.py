"""
Интерфейсы и типы данных для компонентов частотного анализа.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    RankedEntry,
    ExportRow,
    FrequencyTable,
    FrequencyAnalysisResult,
    TextNormalizerInterface,
    TokenizerInterface,
    StopwordFilterInterface,
    FrequencyAggregatorInterface,
    ResultExporterInterface
)

__all__ = [
    'RankedEntry',
    'ExportRow',
    'FrequencyTable',
    'FrequencyAnalysisResult',
    'TextNormalizerInterface',
    'TokenizerInterface',
    'StopwordFilterInterface',
    'FrequencyAggregatorInterface',
    'ResultExporterInterface'
]
