import textwrap
from pathlib import Path

from word_frequency_analyser.config import Config
from word_frequency_analyser.components.exporter import ResultExporter
from word_frequency_analyser.components.text_pipeline import WordFrequencyPipeline


def write_config(tmp_path: Path, text: str, name: str = "config.yaml") -> Path:
    cfg_path = tmp_path / name
    cfg_path.write_text(textwrap.dedent(text).strip(), encoding="utf-8")
    return cfg_path


def test_config_defaults_when_missing_file(tmp_path, monkeypatch):
    """
    Проверяет, что при отсутствии файла конфигурации подставляются дефолтные значения.
    Приложение должно работать и без config.yaml.
    """
    monkeypatch.chdir(tmp_path)
    cfg = Config(config_path=str(tmp_path / "nonexistent.yaml"))

    assert cfg.get_unicode_form() == "NFC"
    assert cfg.get_word_chars() == "'-"
    assert cfg.use_default_stopwords() is True
    assert cfg.get_pdf_engine() == "pymupdf"
    assert cfg.get_extraction_timeout() == 60.0
    assert cfg.get_csv_header() == ["#", "mot", "occurrence"]
    assert cfg.is_csv_bom_enabled() is True
    assert cfg.get_max_export_rows() is None
    assert cfg.get_top_n() == 20
    assert cfg.get_results_folder() == "data/results"
    # Папка результатов создаётся при загрузке
    assert (tmp_path / "data" / "results").is_dir()


def test_config_overrides_from_yaml(tmp_path, monkeypatch):
    """
    Проверяет, что значения из YAML перекрывают дефолты, а незаданные ключи секции сохраняются.
    """
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        text_analysis:
          word_chars: "'"
          extra_stopwords: ["chat"]
        export:
          csv_delimiter: ";"
          max_rows: 50
        """)

    cfg = Config(config_path=str(cfg_path))

    assert cfg.get_word_chars() == "'"
    assert cfg.get_extra_stopwords() == ["chat"]
    assert cfg.get_csv_delimiter() == ";"
    assert cfg.get_max_export_rows() == 50
    # Неизменённые значения остаются дефолтными
    assert cfg.use_default_stopwords() is True
    assert cfg.get_excel_sheet_name() == "Fréquence des mots"
    assert cfg.get_fallback_encoding() == "cp1252"


def test_config_env_overrides(tmp_path, monkeypatch):
    """
    ENV-переменные с префиксом переопределяют вложенные ключи и приводятся к типам.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WORD_FREQUENCY_ANALYSER_EXPORT__TOP_N", "5")
    monkeypatch.setenv("WORD_FREQUENCY_ANALYSER_EXPORT__CSV_BOM", "false")
    monkeypatch.setenv("WORD_FREQUENCY_ANALYSER_EXTRACTION__PDF_ENGINE", "pdftotext")
    monkeypatch.setenv("WORD_FREQUENCY_ANALYSER_EXTRACTION__TIMEOUT", "2.5")

    cfg = Config(config_path=str(tmp_path / "nonexistent.yaml"))

    assert cfg.get_top_n() == 5
    assert cfg.is_csv_bom_enabled() is False
    assert cfg.get_pdf_engine() == "pdftotext"
    assert cfg.get_extraction_timeout() == 2.5


def test_config_profile_selection(tmp_path, monkeypatch):
    """
    Профиль testing выбирает config.test.yaml рядом с основным файлом.
    """
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        export:
          top_n: 10
        """)
    write_config(tmp_path, """
        export:
          top_n: 3
        """, name="config.test.yaml")
    monkeypatch.setenv("WORD_FREQUENCY_ANALYSER_ENV", "testing")

    cfg = Config(config_path=str(cfg_path))

    assert cfg.config_path.name == "config.test.yaml"
    assert cfg.get_top_n() == 3


def test_config_validation(tmp_path, monkeypatch):
    """
    Некорректные значения заменяются безопасными.
    """
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        text_analysis:
          unicode_form: "nfkc"
        extraction:
          timeout: -5
        """)
    cfg = Config(config_path=str(cfg_path))
    assert cfg.get_unicode_form() == "NFKC"
    assert cfg.get_extraction_timeout() == 60.0

    cfg_path = write_config(tmp_path, """
        text_analysis:
          unicode_form: "latin"
        """)
    cfg = Config(config_path=str(cfg_path))
    assert cfg.get_unicode_form() == "NFC"

    # Разложенные формы не допускаются
    cfg_path = write_config(tmp_path, """
        text_analysis:
          unicode_form: "NFD"
        """)
    cfg = Config(config_path=str(cfg_path))
    assert cfg.get_unicode_form() == "NFC"


def test_pipeline_from_config(tmp_path, monkeypatch):
    """
    Фабрика пайплайна собирает стоп-слова из встроенного списка, файла и ключа extra_stopwords.
    """
    monkeypatch.chdir(tmp_path)
    (tmp_path / "stopwords.txt").write_text("# liste\nsouris\n", encoding="utf-8")
    cfg_path = write_config(tmp_path, f"""
        text_analysis:
          stopwords_file: "{(tmp_path / 'stopwords.txt').as_posix()}"
          extra_stopwords: ["CHAT"]
        """)
    cfg = Config(config_path=str(cfg_path))

    pipeline = WordFrequencyPipeline.from_config(cfg)
    result = pipeline.analyze_text("Le chat mange la souris")

    assert result.table.counts == {"mange": 1}


def test_pipeline_from_config_without_default_stopwords(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        text_analysis:
          use_default_stopwords: false
          drop_tokens_without_alnum: true
        """)
    cfg = Config(config_path=str(cfg_path))

    pipeline = WordFrequencyPipeline.from_config(cfg)
    result = pipeline.analyze_text("Le chat - le chien")

    assert result.table.counts == {"le": 2, "chat": 1, "chien": 1}


def test_exporter_from_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        export:
          csv_header: ["rang", "mot", "nombre"]
          csv_bom: false
          max_rows: 2
        files:
          results_folder: "sortie"
        """)
    cfg = Config(config_path=str(cfg_path))

    exporter = ResultExporter.from_config(cfg)

    assert exporter.csv_header == ["rang", "mot", "nombre"]
    assert exporter.csv_bom is False
    assert exporter.max_rows == 2
    assert exporter.output_dir == Path("sortie")
    assert (tmp_path / "sortie").is_dir()


def test_pipeline_from_config_empty_stopword_list(tmp_path, monkeypatch):
    """
    Без встроенного списка, файла и extra_stopwords фильтр пуст, и французский список не подставляется.
    """
    monkeypatch.chdir(tmp_path)
    cfg_path = write_config(tmp_path, """
        text_analysis:
          use_default_stopwords: false
        """)
    cfg = Config(config_path=str(cfg_path))

    pipeline = WordFrequencyPipeline.from_config(cfg)
    result = pipeline.analyze_text("Le chat et le chien")

    assert len(pipeline.stopword_filter) == 0
    assert result.table.counts == {"le": 2, "chat": 1, "et": 1, "chien": 1}
