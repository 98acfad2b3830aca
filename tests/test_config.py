"""Tests for configuration loading."""

from pathlib import Path

import pytest

from barista.config import Config

ENV_VARS = (
    "BARISTA_CONTEXT_TIMEOUT_SECONDS",
    "BARISTA_PAGE_SIZE",
    "BARISTA_MAX_RECENT_ITEMS",
    "BARISTA_MAX_QUERY_LENGTH",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values written by load_dotenv
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(tmp_path: Path) -> None:
    config = Config.from_env(tmp_path / "missing.env")

    assert config == Config()
    assert config.context_timeout_seconds == 300.0
    assert config.page_size == 5


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BARISTA_CONTEXT_TIMEOUT_SECONDS", "90")
    monkeypatch.setenv("BARISTA_PAGE_SIZE", "10")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env(tmp_path / "missing.env")

    assert config.context_timeout_seconds == 90.0
    assert config.page_size == 10
    assert config.max_recent_items == 5
    assert config.log_level == "DEBUG"


def test_values_from_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("BARISTA_MAX_QUERY_LENGTH=200\n")

    config = Config.from_env(env_file)

    assert config.max_query_length == 200


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("BARISTA_PAGE_SIZE", "five"),
        ("BARISTA_PAGE_SIZE", "0"),
        ("BARISTA_CONTEXT_TIMEOUT_SECONDS", "-1"),
        ("BARISTA_MAX_RECENT_ITEMS", "2.5"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        Config.from_env(tmp_path / "missing.env")
