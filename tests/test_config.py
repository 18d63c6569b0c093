from pathlib import Path

import pytest
import yaml

from expensetracker.config import default_config_path, default_csv_path, load_config


@pytest.fixture
def xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


def test_default_config_path_uses_xdg(xdg):
    assert default_config_path() == xdg / "cfg" / "expense" / "expense-config.yaml"


def test_default_config_path_falls_back_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert default_config_path() == tmp_path / ".config" / "expense" / "expense-config.yaml"


def test_default_csv_path_uses_xdg(xdg):
    assert default_csv_path() == xdg / "data" / "expense-tracker" / "expenses.csv"


def test_default_csv_path_falls_back_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    expected = tmp_path / ".local" / "share" / "expense-tracker" / "expenses.csv"
    assert default_csv_path() == expected


def test_load_config_creates_default_file(xdg):
    config = load_config(None, "expense")
    path = default_config_path()
    assert path.is_file()
    assert yaml.safe_load(path.read_text()) == {"appname": "expense"}
    assert config["file"] == str(default_csv_path())


def test_load_config_reads_file_entry(xdg):
    path = xdg / "custom.yaml"
    path.write_text("File: /some/where.csv\n")
    config = load_config(path, "expense")
    assert config["file"] == "/some/where.csv"


def test_load_config_empty_file_value_uses_default(xdg):
    path = xdg / "custom.yaml"
    path.write_text("file: ''\n")
    assert load_config(str(path), "expense")["file"] == str(default_csv_path())


def test_load_config_creates_missing_directory(xdg):
    path = xdg / "nested" / "dir" / "conf.yaml"
    load_config(path, "tracker")
    assert yaml.safe_load(Path(path).read_text()) == {"appname": "tracker"}


def test_load_config_unreadable_existing_file_raises(xdg):
    path = xdg / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(FileExistsError):
        load_config(path, "expense")