# Standard library imports
import shutil

# Third-party imports
import pytest

# Local/package imports
from hushrun.logging import HushrunLogger


@pytest.fixture(autouse=True)
def reset_logging():
    """Handlers bound to a captured stream must not outlive the test."""
    yield
    HushrunLogger.reset()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HUSHRUN_RUNNING_LABEL",
        "HUSHRUN_SUCCESS_LABEL",
        "HUSHRUN_FAILURE_LABEL",
        "HUSHRUN_SHOW_ELAPSED_TIME",
        "HUSHRUN_SHELL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shell():
    """A shell that exists on this machine."""
    return shutil.which("bash") or "/bin/sh"
