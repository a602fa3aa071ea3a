# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from searchterms.logging.init import reset_logging

EXPORT_EN = """Search terms report
10 February 2026 - 13 February 2026
Search term,Campaign,Cost,Impr.,Clicks,Conversions,Cost / conv.
buy running shoes,Brand,€5.20,40,3,1,€5.20
running shoes sale,Generic,"€1,234.50",900,60,2,€617.25
cheap trainers,Generic,€0.00,12,0,0,—
Total: Search,,,€12.50,100,5,2,€6.25
"""

EXPORT_RU = """Отчет по поисковым запросам
1 февраля 2026 – 7 февраля 2026
Поисковый запрос,Кампания,Группа объявлений,Расход,Показы,Клики,Конверсии,Стоимость/конв.
купить кроссовки,Бренд,Кроссовки,"1 234,56",100,10,2,"617,28"
кроссовки распродажа,Общая,Кроссовки,"12,40",50,4,0,—
Итого: Аккаунт,,,"1 247,96",150,14,2,"623,98"
"""


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
file_pattern: "*.csv"
encoding: utf-8
warnings_log: true
logs_directory: ./logs
view:
  sort_by: cost
  direction: desc
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def export_en() -> str:
    return EXPORT_EN


@pytest.fixture()
def export_ru() -> str:
    return EXPORT_RU


@pytest.fixture()
def export_files(temp_workdir: Path) -> list[Path]:
    files = []
    for name, text in [("en.csv", EXPORT_EN), ("ru.csv", EXPORT_RU)]:
        f = temp_workdir / "data" / name
        f.write_text(text, encoding="utf-8")
        files.append(f)
    return files
