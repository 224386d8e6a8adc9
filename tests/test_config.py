"""Tests for EditorConfig."""

import pytest

from cssedit.config import EditorConfig


class TestDefaults:
    def test_defaults(self):
        config = EditorConfig()
        assert config.max_history_size == 50
        assert config.debounce_ms == 1000
        assert config.saved_reset_ms == 2000
        assert config.storage_key == "cssRules"
        assert config.db_path == ":memory:"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            EditorConfig().port = 1  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env_gives_defaults(self):
        assert EditorConfig.from_env({}) == EditorConfig()

    def test_reads_prefixed_variables(self):
        config = EditorConfig.from_env(
            {
                "CSSEDIT_MAX_HISTORY_SIZE": "10",
                "CSSEDIT_STORAGE_KEY": "theme",
                "CSSEDIT_DB_PATH": "/tmp/x.db",
                "CSSEDIT_PORT": "8080",
                "UNRELATED": "1",
            }
        )
        assert config.max_history_size == 10
        assert config.storage_key == "theme"
        assert config.db_path == "/tmp/x.db"
        assert config.port == 8080

    def test_blank_value_ignored(self):
        assert EditorConfig.from_env({"CSSEDIT_PORT": ""}).port == 5000

    def test_bad_integer(self):
        with pytest.raises(ValueError, match="CSSEDIT_DEBOUNCE_MS"):
            EditorConfig.from_env({"CSSEDIT_DEBOUNCE_MS": "soon"})
