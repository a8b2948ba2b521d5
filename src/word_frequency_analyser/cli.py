#!/usr/bin/env python3
"""
Интерфейс командной строки для Word Frequency Analyser

Анализирует документ (PDF, HTML, TXT) или текст из stdin, выводит частотную
таблицу, отвечает на запросы по отдельным словам и экспортирует результат.
Таблица результата передаётся между шагами явно, без общего состояния.
"""

import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .exceptions import ExtractionError


def format_count(value: int) -> str:
    """Форматирует число с пробелом как разделителем тысяч (1 234 567)."""
    return f"{value:,}".replace(",", " ")


def print_table(pipeline, result, top_n: int) -> None:
    """Выводит первые top_n строк ранжированной таблицы."""
    rows = pipeline.export_rows(result)
    if top_n > 0:
        rows = rows[:top_n]
    if not rows:
        print("   (после фильтрации стоп-слов слов не осталось)")
        return
    width = max(len(row.word) for row in rows)
    print(f"   {'#':>5}  {'mot':<{width}}  occurrence")
    for row in rows:
        print(f"   {row.rank:>5}  {row.word:<{width}}  {format_count(row.count)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-frequency",
        description="Word Frequency Analyser - частотность слов в документе",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  word-frequency livre.pdf                      # Топ слов документа
  word-frequency livre.pdf --search chat        # Сколько раз встречается слово
  word-frequency livre.pdf --csv out.csv        # Экспорт в CSV
  cat texte.txt | word-frequency --text         # Анализ текста из stdin
        """
    )
    parser.add_argument('document', nargs='?', help='Путь к документу (PDF, HTML, TXT)')
    parser.add_argument('--text', action='store_true', help='Читать текст из stdin вместо файла')
    parser.add_argument('--top', type=int, default=None, help='Сколько строк таблицы показать (0 - все)')
    parser.add_argument('--search', action='append', default=[], metavar='WORD',
                        help='Найти количество вхождений слова (можно повторять)')
    parser.add_argument('--csv', metavar='PATH', help='Сохранить таблицу в CSV')
    parser.add_argument('--excel', metavar='PATH', help='Сохранить таблицу в Excel')
    parser.add_argument('--json', metavar='PATH', help='Сохранить таблицу в JSON')
    parser.add_argument('--all-formats', action='store_true',
                        help='Сохранить CSV, Excel и JSON в папку результатов')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    # Инициализируем логирование из конфигурации в самом начале
    from .config import config

    if os.environ.get('WORD_FREQUENCY_ANALYSER_DEBUG') == '1':
        config._set_nested(config.config_data, 'logging.level', 'DEBUG')
        config._set_nested(config.config_data, 'logging.console_level', 'DEBUG')
        print("🔍 DEBUG режим активирован через WORD_FREQUENCY_ANALYSER_DEBUG=1")
    config._configure_logging_if_needed(force=True)

    from .components.text_pipeline import WordFrequencyPipeline
    from .components.exporter import ResultExporter

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.text and not args.document:
        parser.error("укажите документ или --text")

    pipeline = WordFrequencyPipeline.from_config(config)

    try:
        if args.text:
            result = pipeline.analyze_text(sys.stdin.read(), source_name="stdin")
        else:
            print(f"📄 Анализ документа: {args.document}")
            result = pipeline.analyze_document(args.document)
    except ExtractionError as e:
        print(f"❌ {e}")
        return 1

    print(f"\n📊 Результаты для: {result.source_name}")
    print(f"   Total des mots (hors stopwords): {format_count(result.total_filtered_words)}")
    print(f"   Уникальных слов: {format_count(result.unique_words)}")

    top_n = args.top if args.top is not None else config.get_top_n()
    print()
    print_table(pipeline, result, top_n)

    for word in args.search:
        count = pipeline.lookup(result, word)
        print(f"\n🔎 Le mot \"{word}\" apparaît {format_count(count)} fois.")

    if not result.table:
        return 0

    exporter = ResultExporter.from_config(config, store=pipeline.store)
    exported = []
    if args.csv:
        exported.append(exporter.export_to_csv(result, args.csv))
    if args.excel:
        exported.append(exporter.export_to_excel(result, args.excel))
    if args.json:
        exported.append(exporter.export_to_json(result, args.json))
    if args.all_formats:
        base = f"{config.get_results_filename_prefix()}_{Path(result.source_name or 'stdin').stem}"
        exported.extend(exporter.export_all_formats(result, base).values())

    for path in exported:
        print(f"✅ Экспортировано: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
