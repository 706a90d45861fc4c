import os
from pathlib import Path

import pytest

from zerogravity.config import DEFAULT_SUMMARY_ENDPOINT, AppConfig, load_config

ENV_VARS = (
    "ZEROG_ASSET_DIR",
    "ZEROG_PROGRESS_FILE",
    "ZEROG_LESSON_NAME",
    "ZEROG_SUMMARY_ENDPOINT",
    "ZEROG_USER_AGENT",
    "ZEROG_REQUEST_TIMEOUT",
    "ZEROG_DEBUG",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return str(tmp_path / "missing.env")


def test_defaults(clean_env) -> None:
    config = load_config(clean_env)
    assert config == AppConfig()
    assert config.summary_endpoint == DEFAULT_SUMMARY_ENDPOINT
    assert config.asset("kid.png") == Path("kid.png")


def test_environment_overrides(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("ZEROG_ASSET_DIR", "assets")
    monkeypatch.setenv("ZEROG_PROGRESS_FILE", "scores.txt")
    monkeypatch.setenv("ZEROG_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("ZEROG_DEBUG", "off")

    config = load_config(clean_env)

    assert config.asset("gold.png") == Path("assets") / "gold.png"
    assert config.progress_file == "scores.txt"
    assert config.request_timeout == 2.5
    assert config.debug is False


def test_env_file_is_read(clean_env, monkeypatch, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("ZEROG_LESSON_NAME=Orbits\n", encoding="utf-8")

    try:
        config = load_config(str(env_file))
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("ZEROG_LESSON_NAME", None)

    assert config.lesson_name == "Orbits"


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_uses_default(clean_env, monkeypatch, raw) -> None:
    monkeypatch.setenv("ZEROG_REQUEST_TIMEOUT", raw)
    assert load_config(clean_env).request_timeout == 10.0
