"""Tests for locating Import.log."""

import pytest

from fmrl.utils.paths import LogPathSource, find_import_log


def test_explicit_path_used_as_is(tmp_path):
    """An explicit path isn't checked for existence here."""
    target = tmp_path / "custom.log"
    log_path = find_import_log(str(target))

    assert log_path.path == target
    assert log_path.source is LogPathSource.CUSTOM
    assert log_path.message == ""


def test_current_directory(tmp_path):
    (tmp_path / "Import.log").write_text("")

    log_path = find_import_log(cwd=tmp_path)

    assert log_path.path == tmp_path / "Import.log"
    assert log_path.source is LogPathSource.CURRENT_DIR
    assert log_path.message == f"using current directory: {tmp_path / 'Import.log'}"


def test_current_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="current directory"):
        find_import_log(cwd=tmp_path)


def test_documents_directory(isolated_home):
    docs = isolated_home / "Documents"
    docs.mkdir()
    (docs / "Import.log").write_text("")

    log_path = find_import_log(use_docs_dir=True)

    assert log_path.path == docs / "Import.log"
    assert log_path.source is LogPathSource.DOCS_DIR
    assert log_path.message.startswith("using documents directory: ")


def test_documents_directory_missing(isolated_home):
    with pytest.raises(FileNotFoundError, match="documents directory"):
        find_import_log(use_docs_dir=True)


def test_explicit_path_wins_over_docs(tmp_path):
    log_path = find_import_log(str(tmp_path / "x.log"), use_docs_dir=True)
    assert log_path.source is LogPathSource.CUSTOM
