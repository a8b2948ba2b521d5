"""
Компонент для токенизации нормализованного текста.

Политика символов: словообразующими считаются буквы Unicode (категории L*),
цифры Unicode (категории N*) и дополнительные символы политики (по умолчанию
апостроф и дефис). Всё остальное, кроме пробельных символов, заменяется
пробелом, после чего текст разбивается по пробельным последовательностям.
"""

import unicodedata
from dataclasses import dataclass
from typing import List
from ..interfaces.text_processor import TokenizerInterface

WORD_CATEGORIES = ('L', 'N')


@dataclass(frozen=True)
class CharacterPolicy:
    """Явная политика допустимых символов слова."""
    word_chars: str = "'-"
    # Отбрасывать токены без единой буквы/цифры (например, "--" или "'")
    drop_tokens_without_alnum: bool = False

    def is_word_char(self, char: str) -> bool:
        return unicodedata.category(char)[0] in WORD_CATEGORIES or char in self.word_chars

    def has_alnum(self, token: str) -> bool:
        return any(unicodedata.category(char)[0] in WORD_CATEGORIES for char in token)


class Tokenizer(TokenizerInterface):
    """Токенизатор нормализованного текста."""

    def __init__(self, policy: CharacterPolicy = None):
        """
        Инициализирует токенизатор.

        Args:
            policy: Политика допустимых символов (по умолчанию буквы, цифры, ' и -)
        """
        self.policy = policy or CharacterPolicy()

    def tokenize(self, text: str) -> List[str]:
        """
        Разбивает текст на токены.

        Порядок токенов совпадает с порядком в тексте. Текст из одной
        пунктуации или пробелов даёт пустой список.

        Args:
            text: Нормализованный текст

        Returns:
            Список токенов
        """
        if not text:
            return []

        cleaned = ''.join(
            char if char.isspace() or self.policy.is_word_char(char) else ' '
            for char in text
        )
        return self.filter_tokens(cleaned.split())

    def is_valid_token(self, token: str) -> bool:
        """
        Проверяет валидность токена.

        Args:
            token: Токен для проверки

        Returns:
            True если токен непустой и удовлетворяет политике
        """
        if not token:
            return False
        if self.policy.drop_tokens_without_alnum:
            return self.policy.has_alnum(token)
        return True

    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """Фильтрует токены по критериям валидности."""
        if not tokens:
            return []
        return [token for token in tokens if self.is_valid_token(token)]

    def clean_query(self, text: str) -> str:
        """
        Очищает слово запроса: удаляет всё, что не входит в политику символов.

        Пробелы тоже удаляются - запрос всегда одно слово.
        """
        if not text:
            return ""
        return ''.join(char for char in text if self.policy.is_word_char(char))
