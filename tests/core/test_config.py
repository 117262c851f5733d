import os
import subprocess
import sys

import pytest
from pydantic import ValidationError
from safeseq.core.config import DEFAULT_LOG_FORMAT, Settings


def test_defaults_from_empty_environment():
    settings = Settings.load({})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == DEFAULT_LOG_FORMAT


def test_package_variable_wins_over_generic_level():
    env = {"LOG_LEVEL": "error", "SAFESEQ_LOG_LEVEL": "debug"}
    assert Settings.load(env).LOG_LEVEL == "DEBUG"
    assert Settings.load({"LOG_LEVEL": " warning "}).LOG_LEVEL == "WARNING"


def test_custom_format():
    settings = Settings.load({"SAFESEQ_LOG_FORMAT": "%(message)s"})
    assert settings.LOG_FORMAT == "%(message)s"


def test_invalid_level_rejected():
    with pytest.raises(ValidationError):
        Settings.load({"SAFESEQ_LOG_LEVEL": "LOUD"})


def test_load_reads_process_environment(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("SAFESEQ_LOG_LEVEL", "critical")
    assert Settings.load().LOG_LEVEL == "CRITICAL"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("warn", "WARNING"),
        ("fatal", "CRITICAL"),
        ("10", "DEBUG"),
        ("25", "INFO"),
        ("notset", "DEBUG"),
    ],
)
def test_level_aliases_and_numbers_accepted(raw, expected):
    assert Settings.load({"LOG_LEVEL": raw}).LOG_LEVEL == expected
    assert Settings.load({"SAFESEQ_LOG_LEVEL": raw}).LOG_LEVEL == expected


def test_unusable_generic_level_falls_back_to_default():
    assert Settings.load({"LOG_LEVEL": "verbose"}).LOG_LEVEL == "INFO"
    env = {"LOG_LEVEL": "verbose", "SAFESEQ_LOG_FORMAT": "%(message)s"}
    assert Settings.load(env).LOG_FORMAT == "%(message)s"


def test_package_imports_with_shared_level_alias():
    env = {**os.environ, "LOG_LEVEL": "warn"}
    env.pop("SAFESEQ_LOG_LEVEL", None)
    src = os.path.join(os.path.dirname(__file__), "..", "..", "src")
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [os.path.abspath(src), env.get("PYTHONPATH")])
    )
    result = subprocess.run(
        [sys.executable, "-c", "import safeseq; print(safeseq.head_maybe([]))"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "None"
