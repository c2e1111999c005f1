"""
Tests for environment-driven configuration.
"""

from schema_builder.config import _int_env, _level_env


def test_int_env_default(monkeypatch):
    monkeypatch.delenv("SCHEMA_BUILDER_TEST_INT", raising=False)
    assert _int_env("SCHEMA_BUILDER_TEST_INT", 5) == 5


def test_int_env_value(monkeypatch):
    monkeypatch.setenv("SCHEMA_BUILDER_TEST_INT", "8080")
    assert _int_env("SCHEMA_BUILDER_TEST_INT", 5) == 8080


def test_int_env_malformed_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SCHEMA_BUILDER_TEST_INT", "eighty")
    assert _int_env("SCHEMA_BUILDER_TEST_INT", 5) == 5
    assert "SCHEMA_BUILDER_TEST_INT" in caplog.text


def test_level_env_value(monkeypatch):
    monkeypatch.setenv("SCHEMA_BUILDER_TEST_LEVEL", "debug")
    assert _level_env("SCHEMA_BUILDER_TEST_LEVEL", "INFO") == "DEBUG"


def test_level_env_unknown_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SCHEMA_BUILDER_TEST_LEVEL", "VERBOSE")
    assert _level_env("SCHEMA_BUILDER_TEST_LEVEL", "INFO") == "INFO"
    assert "SCHEMA_BUILDER_TEST_LEVEL" in caplog.text
