# tests/test_cli.py
"""Tests for the CLI."""

import logging
import os
from unittest.mock import patch

import pytest

pytest.importorskip("typer", reason="Tests require typer package (pip install campus-qa[cli])")

from typer.testing import CliRunner

from campusqa.campusqa import CampusQA
from campusqa.cli import app
from campusqa.commands import AskResult, SourceHit
from campusqa.stores import InMemoryChunkStore, SQLiteChunkStore


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI callback installs a handler; drop it after each test."""
    logger = logging.getLogger("campusqa")
    saved = (list(logger.handlers), logger.level)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "campus-qa" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestIngestCommand:
    def test_ingest_help(self, runner):
        result = runner.invoke(app, ["ingest", "--help"])
        assert result.exit_code == 0
        assert "path" in result.output.lower()

    def test_ingest_nonexistent_path(self, runner, isolated_env):
        result = runner.invoke(app, ["ingest", "/nonexistent/docs"])
        assert result.exit_code != 0
        assert "not found" in result.output.lower()

    def test_ingest_directory(self, runner, isolated_env, mock_provider):
        os.makedirs("docs")
        with open(os.path.join("docs", "library.txt"), "w", encoding="utf-8") as f:
            f.write("图书馆周末开放。")
        qa = CampusQA(provider=mock_provider, chunk_store=InMemoryChunkStore())

        with patch("campusqa.commands.ingest.create_campusqa", return_value=qa):
            result = runner.invoke(app, ["ingest", "docs", "--plain", "-t", "library"])

        assert result.exit_code == 0
        assert "Ingested 1 documents (1 chunks)" in result.output


class TestAskCommand:
    def test_ask_help(self, runner):
        result = runner.invoke(app, ["ask", "--help"])
        assert result.exit_code == 0
        assert "question" in result.output.lower()

    def test_ask_no_data_dir(self, runner, isolated_env):
        data_dir = os.path.join(isolated_env, "data")

        result = runner.invoke(app, ["ask", "食堂几点开门？", "--data-dir", data_dir])

        assert result.exit_code != 0
        assert "not found" in result.output.lower()

    def test_ask_plain(self, runner, isolated_env, mock_provider, mock_llm_client):
        qa = CampusQA(provider=mock_provider, chunk_store=InMemoryChunkStore())
        qa.ingest_document(
            "食堂早上六点半开门。", title="canteen.txt", source_url="https://x/canteen.txt"
        )
        mock_llm_client.parts = ["六点半。"]

        with patch("campusqa.commands.ask.create_campusqa", return_value=qa):
            result = runner.invoke(
                app, ["ask", "食堂几点开门？", "--data-dir", isolated_env, "--plain"]
            )

        assert result.exit_code == 0
        assert "Answer: 六点半。" in result.output
        assert "canteen.txt" in result.output
        assert "https://x/canteen.txt" in result.output


class TestStatusCommand:
    def test_status_empty(self, runner, isolated_env):
        result = runner.invoke(app, ["status", "--data-dir", isolated_env, "--plain"])
        assert result.exit_code == 0
        assert "No documents indexed." in result.output

    def test_status_with_chunks(self, runner, isolated_env, make_chunk):
        store = SQLiteChunkStore(os.path.join(isolated_env, "chunks.db"))
        store.upsert_many([make_chunk("handbook_0"), make_chunk("handbook_1")])

        result = runner.invoke(app, ["status", "--data-dir", isolated_env, "--plain"])

        assert result.exit_code == 0
        assert "Chunks: 2" in result.output
        assert "handbook.txt (2 chunks)" in result.output


class TestMarkupInValues:
    def test_ask_bracketed_source_title(self, runner):
        answer = AskResult(
            success=True,
            question="q",
            answer="ok",
            sources=[
                SourceHit(
                    title="notes[/b].txt",
                    source_url="https://x/notes[v2].txt",
                    updated_at="2024-09-01T08:00:00.000Z",
                    score=0.9,
                )
            ],
        )

        with patch("campusqa.commands.ask.ask", return_value=answer):
            result = runner.invoke(app, ["ask", "q"])

        assert result.exit_code == 0
        assert "notes[/b].txt" in result.output
        assert "notes[v2].txt" in result.output

    def test_status_bracketed_source_title(self, runner, isolated_env, make_chunk):
        store = SQLiteChunkStore(os.path.join(isolated_env, "chunks.db"))
        store.upsert(make_chunk("rules_0", title="rules[v2].txt", source_url="u[/b]"))

        result = runner.invoke(app, ["status", "--data-dir", isolated_env])

        assert result.exit_code == 0
        assert "rules[v2].txt" in result.output
        assert "u[/b]" in result.output

    def test_config_error_shows_suggestion(self, runner, isolated_env):
        with open("campusqa.yaml", "w", encoding="utf-8") as f:
            f.write("provider: bedrock\n")

        result = runner.invoke(app, ["status"])

        assert result.exit_code != 0
        assert "Unknown provider 'bedrock'" in result.output
        assert "Supported providers: litellm" in result.output
