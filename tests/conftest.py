# tests/conftest.py
import pytest

_ENV_VARS = ("SMARTINIT_LOG_LEVEL", "SMARTINIT_VERBOSE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Every test starts from built-in defaults, unaffected by the host environment."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_smartinit_logging():
    """Undo handlers/levels that in-process CLI invocations attach to the smartinit logger."""
    import smartinit.logging as slog

    root = slog._root
    handlers = list(root.handlers)
    level = root.level
    stderr_handler = slog._stderr_handler
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    slog._stderr_handler = stderr_handler
