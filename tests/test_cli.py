from pathlib import Path

import pytest

from mis_dashboard import cli
from mis_dashboard.config import DEFAULT_SERVICE_URL, DEFAULT_TIMEOUT, load_settings
from mis_dashboard.infrastructure.readers.memory import InMemoryDatasetReader


def test_load_settings_reads_environment():
    settings = load_settings({"MIS_DASHBOARD_SERVICE_URL": "http://sap.local/srv/", "MIS_DASHBOARD_TIMEOUT": "12"})

    assert settings.service_url == "http://sap.local/srv"
    assert settings.request_timeout == 12.0
    assert settings.entity_sets["dispatch"] == "es_dm_dispset"


def test_load_settings_falls_back_to_defaults():
    settings = load_settings({"MIS_DASHBOARD_TIMEOUT": "soon"})

    assert settings.service_url == DEFAULT_SERVICE_URL
    assert settings.request_timeout == DEFAULT_TIMEOUT
    assert settings.date_field == "budat"


def test_main_requires_date(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
    assert "--date" in capsys.readouterr().err


def test_main_rejects_malformed_date(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--date", "07.03.2024"])

    assert excinfo.value.code == 2
    assert "expected YYYY-MM-DD" in capsys.readouterr().err


def test_main_writes_csv(monkeypatch, tmp_path: Path, capsys):
    datasets = {
        "dtm": [],
        "combine": [{"category": "COUPLER_ASSM", "t_menge": "100", "budat": "20240307"}],
        "dispatch": [{"category": "COUPLER", "budat": "20240307"}],
        "stock": [],
    }
    monkeypatch.setattr(cli, "ODataDatasetReader", lambda settings: InMemoryDatasetReader(datasets))
    output = tmp_path / "items.csv"

    code = cli.main(["--date", "2024-03-07", "--output", str(output)])

    assert code == 0
    out = capsys.readouterr().out
    assert "Data Loaded Successfully" in out
    assert "COUPLER" in out
    assert "100" in output.read_text()


def test_main_reports_fetch_failure(monkeypatch, capsys):
    reader = InMemoryDatasetReader({"dtm": [], "combine": [], "dispatch": []})
    monkeypatch.setattr(cli, "ODataDatasetReader", lambda settings: reader)

    assert cli.main(["--date", "2024-03-07"]) == 1
    assert "Error loading data" in capsys.readouterr().out
    assert reader.closed
