"""
Tests for environment-driven settings
"""

from bookshelf.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.graphiql is True
    assert settings.seed_data_path is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_API_PORT", "5050")
    monkeypatch.setenv("BOOKSHELF_SEED_DATA_PATH", "/tmp/books.yaml")
    monkeypatch.setenv("bookshelf_graphiql", "false")

    settings = Settings(_env_file=None)

    assert settings.api_port == 5050
    assert settings.seed_data_path == "/tmp/books.yaml"
    assert settings.graphiql is False
