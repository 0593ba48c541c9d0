"""Shared fixtures for docindex tests."""

from pathlib import Path

import pytest

from docindex import Config


def make_files(root: Path, names):
    """root 아래에 빈 파일들을 만듭니다 (하위 경로 포함)."""
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")


@pytest.fixture
def docs_dir(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()
    return docs


@pytest.fixture
def config(tmp_path, docs_dir):
    return Config.for_directory(tmp_path)
