"""Shared pytest fixtures for fmrl tests."""

import pytest

SAMPLE_LINES = {
    "header": "Timestamp\tFilename\tError\tMessage",
    "start": "2022-11-08 11:44:49.725 -0600\tImport.fmp12\t0\tImport of \"Contacts\" started",
    "success": "2022-11-08 11:44:50.100 -0600\tImport.fmp12\t0\tTable \"Contacts\" imported.",
    "warning": "2022-11-08 11:44:50.200 -0600\tImport.fmp12\t0\tField \"Name\" already exists.",
    "error": "2022-11-08 11:44:50.300 -0600\tImport.fmp12\t102\tField \"Missing\" not found.",
}


@pytest.fixture
def sample_lines():
    """Raw lines of each kind, keyed by name."""
    return dict(SAMPLE_LINES)


@pytest.fixture
def import_log_lines():
    """One import: header, start, a success, a warning and an error."""
    return [SAMPLE_LINES[name] for name in ("header", "start", "success", "warning", "error")]


@pytest.fixture
def import_log(tmp_path, import_log_lines):
    """Import.log written with CRLF line endings, as FileMaker does."""
    f = tmp_path / "Import.log"
    f.write_bytes(("\r\n".join(import_log_lines) + "\r\n").encode("utf-8"))
    return f


@pytest.fixture
def config_dir(tmp_path):
    """Empty user config directory."""
    d = tmp_path / "config"
    d.mkdir()
    return d


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/fmrl and ~/Documents."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


# Pytest markers
def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow running")
