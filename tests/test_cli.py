import os
import logging

import pytest

from docindex.cli import create_parser, main

from conftest import make_files


def test_parser_accepts_no_arguments():
    args = create_parser().parse_args([])
    assert args.verbose is False


def test_missing_docs_directory(tmp_path, monkeypatch, capfd):
    monkeypatch.chdir(tmp_path)

    assert main([]) == 1

    out, err = capfd.readouterr()
    assert out == ""
    assert "Error" in err
    assert "docs" in err
    assert not (tmp_path / "docs" / "index.html").exists()


def test_missing_docs_directory_reported_at_any_log_level(tmp_path, monkeypatch, capfd):
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 1

    out, err = capfd.readouterr()
    assert out == ""
    assert "docs" in err


def test_success_reports_count_on_stdout(docs_dir, monkeypatch, capfd):
    make_files(docs_dir, ["02.pdf", "01.pdf", "10.pdf"])
    monkeypatch.chdir(docs_dir.parent)

    assert main([]) == 0

    out, err = capfd.readouterr()
    lines = out.splitlines()
    assert len(lines) == 1
    assert "index.html" in lines[0]
    assert "3" in lines[0]
    assert "Error" not in err and "Failed" not in err
    assert (docs_dir / "index.html").exists()


def test_unexpected_failure_is_caught(docs_dir, monkeypatch, capfd):
    make_files(docs_dir, ["a.pdf"])
    (docs_dir / "index.html").mkdir()
    monkeypatch.chdir(docs_dir.parent)

    assert main([]) == 1

    out, err = capfd.readouterr()
    assert out == ""
    assert "Failed" in err


def test_unexpected_failure_reported_at_any_log_level(docs_dir, monkeypatch, capfd):
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    (docs_dir / "index.html").mkdir()
    monkeypatch.chdir(docs_dir.parent)

    assert main([]) == 1
    assert "Failed" in capfd.readouterr().err


def test_unknown_log_level_still_builds_index(docs_dir, monkeypatch, capfd, caplog):
    make_files(docs_dir, ["a.pdf"])
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.chdir(docs_dir.parent)

    with caplog.at_level(logging.WARNING):
        assert main([]) == 0

    assert "LOG_LEVEL" in caplog.text
    assert "1" in capfd.readouterr().out
    assert "a.pdf" in (docs_dir / "index.html").read_text(encoding="utf-8")


@pytest.mark.skipif(os.name != "posix", reason="byte file names are POSIX only")
def test_non_utf8_file_name_does_not_abort(docs_dir, monkeypatch, capfd):
    make_files(docs_dir, ["a.pdf"])
    try:
        with open(os.path.join(os.fsencode(docs_dir), b"scan\xff.pdf"), "wb"):
            pass
    except OSError:
        pytest.skip("file system rejects non-UTF-8 names")
    monkeypatch.chdir(docs_dir.parent)

    assert main([]) == 0

    assert "2" in capfd.readouterr().out
    content = (docs_dir / "index.html").read_text(encoding="utf-8")
    assert "scan�.pdf</a>" in content
    assert 'href="scan%EF%BF%BD.pdf"' in content


def test_verbose_flag(docs_dir, monkeypatch):
    monkeypatch.chdir(docs_dir.parent)
    assert main(["--verbose"]) == 0
