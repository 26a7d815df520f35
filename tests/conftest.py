import logging
import os
import sys

import pytest

# Allow `pytest` from a plain checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from recursion_exercises.config import CONFIG_ENV_VAR, reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Each test starts without a config file or cached ConfigManager"""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by cli.setup_logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("recursion_exercises", "recursion_exercises.timing"):
        logging.getLogger(name).setLevel(logging.NOTSET)
