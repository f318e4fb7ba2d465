# tests/sources/test_local.py
"""Tests for LocalDirectorySource."""

import os
from pathlib import Path

import pytest

from campusqa.sources import DocumentSource, LocalDirectorySource


@pytest.fixture
def docs(temp_dir):
    root = Path(temp_dir)
    (root / "seed" / "dorm").mkdir(parents=True)
    (root / "seed" / "handbook.txt").write_text("学生手册", encoding="utf-8")
    (root / "seed" / "dorm" / "rules 2024.md").write_text("宿舍规定", encoding="utf-8")
    (root / "other.txt").write_text("other", encoding="utf-8")
    return root


class TestLocalDirectorySource:
    def test_is_document_source(self, docs):
        assert isinstance(LocalDirectorySource(docs), DocumentSource)

    def test_missing_root(self, temp_dir):
        with pytest.raises(NotADirectoryError):
            LocalDirectorySource(os.path.join(temp_dir, "nope"))

    def test_list_documents(self, docs):
        source = LocalDirectorySource(docs)
        assert source.list_documents() == [
            "other.txt",
            "seed/dorm/rules 2024.md",
            "seed/handbook.txt",
        ]

    def test_list_documents_with_prefix(self, docs):
        source = LocalDirectorySource(docs)
        assert source.list_documents("seed/dorm/") == ["seed/dorm/rules 2024.md"]
        assert source.list_documents("missing/") == []

    def test_read_text(self, docs):
        source = LocalDirectorySource(docs)
        assert source.read_text("seed/handbook.txt") == "学生手册"

    def test_read_missing(self, docs):
        with pytest.raises(FileNotFoundError):
            LocalDirectorySource(docs).read_text("seed/missing.txt")

    def test_read_outside_root(self, docs):
        with pytest.raises(ValueError):
            LocalDirectorySource(docs / "seed").read_text("../other.txt")

    def test_title_is_last_segment(self, docs):
        source = LocalDirectorySource(docs)
        assert source.title_for("seed/dorm/rules 2024.md") == "rules 2024.md"
        assert source.title_for("top.txt") == "top.txt"

    def test_url_with_base_url(self, docs):
        source = LocalDirectorySource(docs, base_url="https://storage.googleapis.com/campus/")
        assert (
            source.url_for("seed/dorm/rules 2024.md")
            == "https://storage.googleapis.com/campus/seed%2Fdorm%2Frules%202024.md"
        )

    def test_url_defaults_to_file_uri(self, docs):
        source = LocalDirectorySource(docs)
        url = source.url_for("seed/handbook.txt")
        assert url.startswith("file://")
        assert url.endswith("/seed/handbook.txt")
