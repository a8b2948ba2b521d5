"""
Компонент для нормализации текста перед токенизацией.

Шаги (в этом порядке):
- приведение к корректной Unicode-строке (битые байты заменяются, а не роняют пайплайн)
- каноническая композиция Unicode (NFC по умолчанию)
- полное Unicode-приведение регистра (casefold, а не ASCII lower())
"""

from typing import List, Optional, Union
from ..interfaces.text_processor import TextNormalizerInterface
import codecs
import logging
import unicodedata

logger = logging.getLogger(__name__)

# Только составные формы
SUPPORTED_FORMS = ('NFC', 'NFKC')
REPLACEMENT_CHAR = '\ufffd'

# UTF-32 проверяется раньше UTF-16: BOM UTF-32 LE начинается с BOM UTF-16 LE
BOMS = (
    (codecs.BOM_UTF32_LE, 'utf-32'),
    (codecs.BOM_UTF32_BE, 'utf-32'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
)


class TextNormalizer(TextNormalizerInterface):
    """Нормализатор сырого текста к форме сравнения."""

    def __init__(self, unicode_form: Optional[str] = 'NFC', fallback_encoding: Optional[str] = 'cp1252'):
        """
        Инициализирует нормализатор.

        Args:
            unicode_form: Форма Unicode-нормализации (None - без нормализации)
            fallback_encoding: Кодировка для байтов, которые явно не являются UTF-8
        """
        if unicode_form is not None and unicode_form not in SUPPORTED_FORMS:
            raise ValueError(f"Неизвестная форма Unicode-нормализации: {unicode_form}")
        self.unicode_form = unicode_form
        self.fallback_encoding = fallback_encoding

    def normalize(self, text: Union[str, bytes, None], encoding: Optional[str] = None) -> str:
        """
        Нормализует текст для сравнения.

        Никогда не бросает исключений на битых входных данных:
        некорректные последовательности заменяются символом U+FFFD.

        Args:
            text: Исходный текст (строка или байты)
            encoding: Объявленная кодировка байтов, если известна

        Returns:
            Нормализованная строка
        """
        if not text:
            return ""

        text = self.coerce_to_unicode(text, encoding)
        text = self._compose(text)
        # casefold может вернуть разложенные последовательности, поэтому композиция повторяется
        return self._compose(text.casefold())

    def normalize_batch(self, texts: List[str]) -> List[str]:
        """
        Нормализует список строк.

        Args:
            texts: Список строк для нормализации

        Returns:
            Список нормализованных строк
        """
        if not texts:
            return []

        return [self.normalize(text) for text in texts]

    def coerce_to_unicode(self, text: Union[str, bytes], encoding: Optional[str] = None) -> str:
        """Приводит вход к корректной Unicode-строке (best effort)."""
        if isinstance(text, (bytes, bytearray)):
            return self._decode_bytes(bytes(text), encoding)

        try:
            text.encode('utf-8')
            return text
        except UnicodeEncodeError:
            # Одиночные суррогаты: пары склеиваем, остальное заменяем
            logger.debug("В тексте найдены одиночные суррогаты, выполняется замена")
            return text.encode('utf-16', 'surrogatepass').decode('utf-16', 'replace')

    def _decode_bytes(self, data: bytes, encoding: Optional[str]) -> str:
        if encoding:
            try:
                return data.decode(encoding, errors='replace')
            except LookupError:
                logger.warning(f"Неизвестная кодировка '{encoding}', определяю автоматически")

        for bom, codec in BOMS:
            if data.startswith(bom):
                logger.debug(f"Найден BOM, декодирую как {codec}")
                return data.decode(codec, errors='replace')

        try:
            return data.decode('utf-8-sig')
        except UnicodeDecodeError:
            pass

        utf8_text = data.decode('utf-8-sig', errors='replace')
        if not self.fallback_encoding:
            return utf8_text

        # Единичные битые байты в UTF-8 тексте - заменяем; если же битых
        # последовательностей не меньше половины не-ASCII байтов, это другая кодировка
        invalid = utf8_text.count(REPLACEMENT_CHAR)
        non_ascii = sum(1 for byte in data if byte >= 0x80)
        if invalid * 2 < non_ascii:
            logger.debug(f"UTF-8 с {invalid} битыми последовательностями, выполнена замена")
            return utf8_text

        logger.debug(f"Текст не похож на UTF-8, декодирую как {self.fallback_encoding}")
        try:
            return data.decode(self.fallback_encoding, errors='replace')
        except LookupError:
            logger.warning(f"Неизвестная резервная кодировка '{self.fallback_encoding}'")
            return utf8_text

    def _compose(self, text: str) -> str:
        if self.unicode_form is None:
            return text
        return unicodedata.normalize(self.unicode_form, text)
