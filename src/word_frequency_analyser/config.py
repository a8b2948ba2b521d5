"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс WORD_FREQUENCY_ANALYSER_, вложенность через __)
- Валидация и подготовка директорий
- Настройка логирования

Ядро пайплайна конфигурацию не читает: все параметры передаются в компоненты
явно, а этот модуль используют только CLI и фабрика пайплайна.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WORD_FREQUENCY_ANALYSER_'
UNICODE_FORMS = ('NFC', 'NFKC')


class Config:
    """Класс для работы с конфигурацией проекта"""
    
    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации
        
        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в корне проекта
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"
            
            # Если не найден в текущей директории, ищем в родительских
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"
            
            self.config_path = config_path
        
        self.config_data = {}
        
        self._load_env()
        self._load_config()
        # Применяем ENV-переопределения и профили
        try:
            self._apply_env_overrides()
            self._validate_and_prepare()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        # Настраиваем логирование согласно конфигу (идемпотентно, с возможностью переинициализации)
        self._configure_logging_if_needed()
    
    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            logger.info("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")
    
    # --- Профили/ENV overrides/валидация/логирование ---
    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        candidate: Path
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла"""
        try:
            # Выбор файла с учётом профиля окружения
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self.config_data = self._merge(self._get_default_config(), loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
                self.config_data = self._get_default_config()
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Рекурсивно накладывает значения YAML на значения по умолчанию."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (WORD_FREQUENCY_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Пропускаем служебные (ENV/DEBUG)
            if key in (f'{ENV_PREFIX}ENV', f'{ENV_PREFIX}DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            # Пытаемся привести числа/булевы
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate_and_prepare(self) -> None:
        """Проверяет значения и создаёт нужные директории."""
        form = self.get('text_analysis.unicode_form', 'NFC')
        if form is not None and str(form).upper() not in UNICODE_FORMS:
            logger.warning(f"Неизвестная форма Unicode '{form}': принудительно установлено NFC")
            self._set_nested(self.config_data, 'text_analysis.unicode_form', 'NFC')
        elif form is not None:
            self._set_nested(self.config_data, 'text_analysis.unicode_form', str(form).upper())
        try:
            timeout = float(self.get('extraction.timeout', 60))
            if timeout <= 0:
                logger.warning("extraction.timeout <= 0: принудительно установлено 60")
                self._set_nested(self.config_data, 'extraction.timeout', 60)
        except (TypeError, ValueError):
            self._set_nested(self.config_data, 'extraction.timeout', 60)
        # Директории
        try:
            Path(self.get_results_folder()).mkdir(parents=True, exist_ok=True)
        except Exception as e:
            logger.debug(f"Не удалось создать директорию результатов: {e}")

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        # Получаем раздельные уровни для консоли и файла
        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)
        
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_word_frequency_configured", False) and not force:
            # Проверим, не изменились ли параметры
            current_console_level = getattr(root, "_word_frequency_console_level", None)
            current_file_level = getattr(root, "_word_frequency_file_level", None)
            current_fmt = getattr(root, "_word_frequency_format", None)
            current_file = getattr(root, "_word_frequency_file", None)
            if (
                current_console_level == console_level_name and
                current_file_level == file_level_name and
                current_fmt == desired_fmt and
                # Имя файла сессии содержит временную метку - сравниваем только факт записи в файл
                bool(current_file) == bool(desired_file)
            ):
                return

        handlers: List[logging.Handler] = []
        # Консоль с уровнем для пользователя (WARNING по умолчанию, чтобы не мешать выводу CLI)
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)
        
        # Файл при необходимости с уровнем для отладки (DEBUG)
        if desired_file:
            # Очищаем старые логи перед созданием нового
            self.cleanup_old_log_files()
            
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except Exception as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        # Минимальный уровень для root logger (DEBUG для файла)
        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_word_frequency_configured", True)
        setattr(root, "_word_frequency_console_level", console_level_name)
        setattr(root, "_word_frequency_file_level", file_level_name)
        setattr(root, "_word_frequency_format", desired_fmt)
        setattr(root, "_word_frequency_file", desired_file)
    
    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'text_analysis': {
                'unicode_form': "NFC",
                # Символы, которые кроме букв и цифр Unicode входят в слово
                'word_chars': "'-",
                'drop_tokens_without_alnum': False,
                # Французский список по умолчанию; файл позволяет подключить другой язык
                'use_default_stopwords': True,
                'stopwords_file': None,
                'extra_stopwords': [],
            },
            'extraction': {
                'pdf_engine': "pymupdf",
                'timeout': 60,
                'fallback_encoding': "cp1252",
            },
            'export': {
                'csv_header': ["#", "mot", "occurrence"],
                'csv_delimiter': ",",
                # BOM облегчает открытие CSV в Excel под Windows
                'csv_bom': True,
                'excel_sheet_name': "Fréquence des mots",
                'max_rows': None,
                'top_n': 20,
            },
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "frequence_mots",
            },
            'logging': {
                'level': "WARNING",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/word_frequency.log"
            },
        }
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу
        
        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию
            
        Returns:
            Значение параметра или default
        """
        try:
            keys = key.split('.')
            value = self.config_data
            
            for k in keys:
                value = value[k]
            
            return value
        except (KeyError, TypeError):
            return default
    
    # --- Анализ текста ---
    def get_unicode_form(self) -> Optional[str]:
        """Форма Unicode-нормализации (None - отключена)"""
        return self.get('text_analysis.unicode_form', "NFC")

    def get_word_chars(self) -> str:
        """Дополнительные словообразующие символы"""
        return str(self.get('text_analysis.word_chars', "'-"))

    def is_drop_tokens_without_alnum_enabled(self) -> bool:
        """Отбрасывать ли токены без букв и цифр"""
        return bool(self.get('text_analysis.drop_tokens_without_alnum', False))

    def use_default_stopwords(self) -> bool:
        """Использовать ли встроенный французский список стоп-слов"""
        return bool(self.get('text_analysis.use_default_stopwords', True))

    def get_stopwords_file(self) -> Optional[str]:
        """Путь к файлу дополнительного списка стоп-слов"""
        return self.get('text_analysis.stopwords_file', None)

    def get_extra_stopwords(self) -> List[str]:
        """Дополнительные стоп-слова из конфигурации"""
        return list(self.get('text_analysis.extra_stopwords', []) or [])

    # --- Извлечение ---
    def get_pdf_engine(self) -> str:
        """Движок извлечения текста из PDF"""
        return self.get('extraction.pdf_engine', "pymupdf")

    def get_extraction_timeout(self) -> float:
        """Таймаут внешней утилиты извлечения (секунды)"""
        return float(self.get('extraction.timeout', 60))

    def get_fallback_encoding(self) -> Optional[str]:
        """Кодировка для текста, который не является UTF-8"""
        return self.get('extraction.fallback_encoding', "cp1252")

    # --- Экспорт ---
    def get_csv_header(self) -> List[str]:
        """Заголовок CSV (#, слово, количество)"""
        return list(self.get('export.csv_header', ["#", "mot", "occurrence"]))

    def get_csv_delimiter(self) -> str:
        """Разделитель CSV"""
        return self.get('export.csv_delimiter', ",")

    def is_csv_bom_enabled(self) -> bool:
        """Записывать ли BOM в начало CSV"""
        return bool(self.get('export.csv_bom', True))

    def get_excel_sheet_name(self) -> str:
        """Название листа Excel с частотами"""
        return self.get('export.excel_sheet_name', "Fréquence des mots")

    def get_max_export_rows(self) -> Optional[int]:
        """Максимум строк в экспорте (None - без ограничения)"""
        value = self.get('export.max_rows', None)
        return int(value) if value else None

    def get_top_n(self) -> int:
        """Количество слов в таблице CLI по умолчанию"""
        return int(self.get('export.top_n', 20))
    
    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")
    
    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "frequence_mots")
    
    # --- Логирование ---
    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка формата logging.level для обратной совместимости
        return self.get('logging.console_level', self.get('logging.level', "WARNING"))
    
    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")
    
    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")
    
    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        # Если включено логирование в файл, используем файл с временной меткой
        if self.is_logging_to_file_enabled():
            return self.get_session_log_file()
        
        log_file_template = self.get('logging.log_file', "logs/word_frequency.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template
    
    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))
    
    def get_session_log_file(self) -> str:
        """Генерирует имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"logs/word_frequency_{timestamp}.log"
    
    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return self.get('logging.max_log_files', 10)
    
    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        try:
            logs_dir = Path("logs")
            if not logs_dir.exists():
                return
            
            log_files = list(logs_dir.glob("word_frequency_*.log"))
            max_files = self.get_max_log_files()
            
            if len(log_files) <= max_files:
                return
            
            # Сортируем по времени модификации (самые новые последними)
            log_files.sort(key=lambda f: f.stat().st_mtime)
            
            for old_file in log_files[:-max_files]:
                try:
                    old_file.unlink()
                    logger.debug(f"Удален старый лог файл: {old_file}")
                except Exception as e:
                    logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")
                    
        except Exception as e:
            logger.debug(f"Ошибка при очистке старых логов: {e}")


# Глобальный экземпляр конфигурации (только для вызывающего слоя)
config = Config()
