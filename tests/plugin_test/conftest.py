import pytest
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def json_chart_path():
    return str(FIXTURES_DIR / "chart1.json")


@pytest.fixture
def xml_chart_path():
    return str(FIXTURES_DIR / "chart1.xml")
