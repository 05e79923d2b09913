from __future__ import annotations

import logging
from typing import Iterator

import pytest

from phonevalidator.config import _ENV_MAP


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Keep the developer's shell and ./.env out of settings-driven tests.
    for key in (*_ENV_MAP, "PHONEVALIDATOR_CONFIG"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    # The CLI reconfigures the root logger; undo it after each test.
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    for h in list(root.handlers):
        if type(h) is logging.StreamHandler and h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
