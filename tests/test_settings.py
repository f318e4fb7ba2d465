# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel (no env var reading). Env vars are read by
the application layer in campusqa.config.
"""

import pytest
from pydantic import ValidationError

from campusqa.settings import Settings


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.min_chars == 300
        assert settings.max_chars == 600
        assert settings.top_k == 5
        assert settings.max_context_chars == 2500
        assert settings.embedding_batch_size == 250
        assert settings.num_retries == 3
        assert settings.generation_temperature is None
        assert settings.prompt_header is None
        assert settings.max_concurrent_ingest == 4

    def test_custom_values(self):
        settings = Settings(top_k=8, max_context_chars=4000, prompt_header="Be brief.")
        assert settings.top_k == 8
        assert settings.max_context_chars == 4000
        assert settings.prompt_header == "Be brief."

    def test_does_not_read_env(self, monkeypatch):
        monkeypatch.setenv("CAMPUSQA_TOP_K", "42")
        assert Settings().top_k == 5

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            Settings(min_chars=700, max_chars=600)

    @pytest.mark.parametrize(
        "field",
        ["max_chars", "embedding_batch_size", "max_concurrent_ingest"],
    )
    def test_positive_fields(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})
