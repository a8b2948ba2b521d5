"""
Компонент для извлечения текста из документов.

Тонкая обёртка над сторонними инструментами:
- PDF: PyMuPDF (по умолчанию) или утилита Poppler `pdftotext -layout`
- HTML: BeautifulSoup
- TXT: сырые байты (кодировку определяет нормализатор)

Пустой результат считается ошибкой извлечения: анализ частично не выполняется.
"""

import subprocess
from pathlib import Path
from typing import Union
from bs4 import BeautifulSoup
from ..exceptions import ExtractionError, UnsupportedDocumentError
import logging

logger = logging.getLogger(__name__)

RawText = Union[str, bytes]

PDF_ENGINES = ('pymupdf', 'pdftotext')
PDF_SUFFIXES = {'.pdf'}
HTML_SUFFIXES = {'.html', '.htm', '.xhtml'}
TEXT_SUFFIXES = {'.txt', '.text', '.md', '.csv'}


class DocumentTextExtractor:
    """Извлекает сырой текст из файла документа."""

    def __init__(self, pdf_engine: str = 'pymupdf', timeout: float = 60.0):
        """
        Инициализирует экстрактор.

        Args:
            pdf_engine: Движок для PDF ('pymupdf' или 'pdftotext')
            timeout: Таймаут внешней утилиты pdftotext (секунды)
        """
        if pdf_engine not in PDF_ENGINES:
            raise ValueError(f"Неизвестный движок PDF: {pdf_engine}")
        self.pdf_engine = pdf_engine
        self.timeout = timeout

    def supports(self, path: Union[str, Path]) -> bool:
        """Проверяет, поддерживается ли формат файла."""
        suffix = Path(path).suffix.lower()
        return suffix in PDF_SUFFIXES or suffix in HTML_SUFFIXES or suffix in TEXT_SUFFIXES

    def extract(self, path: Union[str, Path]) -> RawText:
        """
        Извлекает текст документа.

        Args:
            path: Путь к документу

        Returns:
            Извлечённый текст (строка или байты для plain text)

        Raises:
            ExtractionError: Файл не найден, инструмент завершился ошибкой или текст пуст
            UnsupportedDocumentError: Формат файла не поддерживается
        """
        path = Path(path)
        if not path.is_file():
            raise ExtractionError("Файл документа не найден", source=str(path))

        suffix = path.suffix.lower()
        if suffix in PDF_SUFFIXES:
            if self.pdf_engine == 'pdftotext':
                raw = self._extract_pdf_pdftotext(path)
            else:
                raw = self._extract_pdf_pymupdf(path)
        elif suffix in HTML_SUFFIXES:
            raw = self._extract_html(path)
        elif suffix in TEXT_SUFFIXES:
            raw = path.read_bytes()
        else:
            raise UnsupportedDocumentError(f"Формат '{suffix or path.name}' не поддерживается", source=path.name)

        if not raw or not raw.strip():
            raise ExtractionError("Не удалось извлечь текст документа: результат пуст", source=path.name)

        logger.info(f"Извлечено {len(raw)} символов из {path.name}")
        return raw

    def _extract_pdf_pymupdf(self, path: Path) -> str:
        try:
            import fitz  # PyMuPDF
        except ImportError as e:
            raise ExtractionError(f"PyMuPDF недоступен: {e}", source=path.name) from e

        try:
            with fitz.open(path) as doc:
                pages = [page.get_text("text") for page in doc]
        except Exception as e:
            raise ExtractionError(f"PyMuPDF не смог прочитать PDF: {e}", source=path.name) from e

        logger.debug(f"PyMuPDF: {len(pages)} страниц в {path.name}")
        return "\n".join(pages)

    def _extract_pdf_pdftotext(self, path: Path) -> bytes:
        # '-' в качестве выходного файла - вывод в stdout
        cmd = ['pdftotext', '-layout', '-enc', 'UTF-8', str(path), '-']
        try:
            completed = subprocess.run(cmd, capture_output=True, timeout=self.timeout, check=False)
        except FileNotFoundError as e:
            raise ExtractionError("Утилита pdftotext не найдена (установите Poppler)", source=path.name) from e
        except subprocess.TimeoutExpired as e:
            raise ExtractionError(f"pdftotext не уложился в {self.timeout} с", source=path.name) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode('utf-8', errors='replace').strip()
            raise ExtractionError(
                f"pdftotext завершился с кодом {completed.returncode}: {stderr}", source=path.name
            )
        return completed.stdout

    def _extract_html(self, path: Path) -> str:
        soup = BeautifulSoup(path.read_bytes(), "html.parser")
        for tag in soup(["script", "style"]):
            tag.decompose()
        return soup.get_text(separator=" ")
