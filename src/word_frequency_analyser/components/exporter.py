"""
Компонент для экспорта результатов анализа.

Сериализует строки (ранг, слово, количество) в форматы вызывающего слоя:
CSV (с BOM для Excel), Excel с листом статистики и JSON.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
import pandas as pd
from ..interfaces.text_processor import ExportRow, FrequencyAnalysisResult, ResultExporterInterface
from .frequency_store import FrequencyStore
import logging

logger = logging.getLogger(__name__)

DEFAULT_CSV_HEADER = ("#", "mot", "occurrence")


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов частотного анализа."""

    def __init__(self,
                 output_dir: Union[str, Path] = "data/results",
                 store: Optional[FrequencyStore] = None,
                 csv_header: Sequence[str] = DEFAULT_CSV_HEADER,
                 csv_delimiter: str = ",",
                 csv_bom: bool = True,
                 sheet_name: str = "Fréquence des mots",
                 max_rows: Optional[int] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            store: Слой запросов, формирующий строки экспорта
            csv_header: Заголовок из трёх колонок (ранг, слово, количество)
            csv_delimiter: Разделитель CSV
            csv_bom: Записывать ли UTF-8 BOM в начало CSV
            sheet_name: Название листа Excel с частотами
            max_rows: Ограничение числа строк (None - все)
        """
        if len(csv_header) != 3:
            raise ValueError("Заголовок CSV должен содержать ровно три колонки")
        self.output_dir = Path(output_dir)
        self.store = store or FrequencyStore()
        self.csv_header = list(csv_header)
        self.csv_delimiter = csv_delimiter
        self.csv_bom = csv_bom
        self.sheet_name = sheet_name
        self.max_rows = max_rows

    @classmethod
    def from_config(cls, cfg=None, store: Optional[FrequencyStore] = None) -> 'ResultExporter':
        """Создаёт экспортёр по настройкам config.yaml."""
        if cfg is None:
            from ..config import config as cfg
        return cls(
            output_dir=cfg.get_results_folder(),
            store=store,
            csv_header=cfg.get_csv_header(),
            csv_delimiter=cfg.get_csv_delimiter(),
            csv_bom=cfg.is_csv_bom_enabled(),
            sheet_name=cfg.get_excel_sheet_name(),
            max_rows=cfg.get_max_export_rows(),
        )

    def _rows(self, result: FrequencyAnalysisResult) -> List[ExportRow]:
        if not result or not result.table:
            raise ValueError("Нет данных для экспорта: частотная таблица пуста")
        rows = self.store.export_rows(result.table)
        if self.max_rows:
            rows = rows[:self.max_rows]
        return rows

    @staticmethod
    def _target(filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_csv(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в CSV.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        rows = self._rows(result)
        filepath = self._target(filepath, '.csv')

        # utf-8-sig добавляет BOM, по которому Excel распознаёт кодировку
        encoding = 'utf-8-sig' if self.csv_bom else 'utf-8'
        with open(filepath, 'w', newline='', encoding=encoding) as csvfile:
            writer = csv.writer(csvfile, delimiter=self.csv_delimiter)
            writer.writerow(self.csv_header)
            writer.writerows(rows)

        logger.info(f"Результат экспортирован в CSV: {filepath} ({len(rows)} строк)")
        return filepath

    def export_to_excel(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в Excel: лист частот и лист статистики.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        rows = self._rows(result)
        filepath = self._target(filepath, '.xlsx')

        df = pd.DataFrame([tuple(row) for row in rows], columns=self.csv_header)
        stats_df = pd.DataFrame({
            'Paramètre': [
                'Document',
                'Total des mots (hors stopwords)',
                'Mots distincts',
                'Tokens avant filtrage',
                "Date d'analyse",
            ],
            'Valeur': [
                result.source_name or '',
                result.total_filtered_words,
                result.unique_words,
                result.token_count,
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            ],
        })

        # Имя листа Excel ограничено 31 символом
        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name=self.sheet_name[:31], index=False)
            stats_df.to_excel(writer, sheet_name='Statistiques', index=False)

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_json(self, result: FrequencyAnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        rows = self._rows(result)
        filepath = self._target(filepath, '.json')

        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'source': result.source_name,
                'total_filtered_words': result.total_filtered_words,
                'unique_words': result.unique_words,
                'token_count': result.token_count,
                'processing_time': result.processing_time,
                'additional': result.metadata or {},
            },
            'rows': [row._asdict() for row in rows],
        }

        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def export_all_formats(self, result: FrequencyAnalysisResult, base_filename: str) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь с путями к экспортированным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename}_{timestamp}"

        exported_files = {
            'csv': self.export_to_csv(result, self.output_dir / f"{base_filename}.csv"),
            'excel': self.export_to_excel(result, self.output_dir / f"{base_filename}.xlsx"),
            'json': self.export_to_json(result, self.output_dir / f"{base_filename}.json"),
        }

        logger.info(f"Результат экспортирован во все форматы в папку: {self.output_dir}")
        return exported_files
