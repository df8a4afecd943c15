from argparse import Namespace

import pytest

LOG_ENV_VARS = (
    "LOG_PARSER_SEVERITY",
    "LOG_PARSER_OUTPUT",
    "LOG_PARSER_COLOR",
    "LOG_PARSER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's LOG_PARSER_* variables out of every test."""
    for name in LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_args():
    """Namespace with no CLI overrides set."""
    return Namespace(
        severity=None,
        output=None,
        color=False,
        verbose=False,
    )


@pytest.fixture
def yaml_file(tmp_path):
    """Write YAML text to a temp file and return its path."""
    def _write(text: str) -> str:
        path = tmp_path / "config.yml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
