"""Global pytest fixtures for PURSE."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest


@pytest.fixture
def recorder() -> tuple[list[str], Callable[[str], None]]:
    """Return a list and a callback that appends every token it is given.

    Example:
        ```py
        def test_something(recorder):
            seen, fn = recorder
            work_on_str_chunks("a b", fn)
            assert seen == ["a", "b"]
        ```
    """
    seen: list[str] = []
    return seen, seen.append


@pytest.fixture(autouse=True)
def _restore_logging_state():
    """Undo root-logger handlers and logger levels a test (or CLI run) installed.

    `configure_logging` replaces the root handlers process-wide; without this,
    a `--log-file` handler pointing into a removed temp dir leaks into later tests.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    levels = {
        name: lg.level
        for name, lg in logging.Logger.manager.loggerDict.items()
        if isinstance(lg, logging.Logger)
    }
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(root_level)
    for name, lg in logging.Logger.manager.loggerDict.items():
        if isinstance(lg, logging.Logger):
            lg.setLevel(levels.get(name, logging.NOTSET))
