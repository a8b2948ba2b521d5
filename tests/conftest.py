from pathlib import Path

import pytest

from word_frequency_analyser.components.text_pipeline import WordFrequencyPipeline
from word_frequency_analyser.components.stopwords import StopwordFilter


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы французских текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_COMPLEX_TEXT,
        SAMPLE_HTML_TEXT,
        SAMPLE_NUMBERS_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "complex": SAMPLE_COMPLEX_TEXT,
        "html": SAMPLE_HTML_TEXT,
        "numbers": SAMPLE_NUMBERS_TEXT,
    }


@pytest.fixture(scope="session")
def french_stopwords() -> StopwordFilter:
    """Фильтр со встроенным французским списком (неизменяемый, общий для тестов)."""
    return StopwordFilter()


@pytest.fixture
def pipeline(french_stopwords) -> WordFrequencyPipeline:
    """Пайплайн с компонентами по умолчанию."""
    return WordFrequencyPipeline(stopword_filter=french_stopwords)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
    config.addinivalue_line("markers", "e2e: сквозные тесты")
