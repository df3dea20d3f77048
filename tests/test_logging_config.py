import logging

import pytest

from xpathgen import logging_config
from xpathgen.config import ConfigManager


@pytest.fixture(autouse=True)
def restore_logging():
    """Keep logging changes made by setup_logging() local to each test."""
    root = logging.getLogger()
    saved_root = (root.level, list(root.handlers))
    target = logging.getLogger("xpathgen.core.path_builder")
    saved_target = (target.level, list(target.handlers))
    pkg = logging.getLogger("xpathgen")
    saved_pkg = (pkg.level, list(pkg.handlers), pkg.propagate)
    yield
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
    target.setLevel(saved_target[0])
    target.handlers[:] = saved_target[1]
    pkg.setLevel(saved_pkg[0])
    pkg.handlers[:] = saved_pkg[1]
    pkg.propagate = saved_pkg[2]


def test_setup_from_packaged_config():
    logging_config.setup_logging()
    pkg = logging.getLogger("xpathgen")
    assert pkg.level == logging.INFO
    assert any(isinstance(h, logging.StreamHandler) for h in pkg.handlers)


def test_falls_back_to_minimal_config(monkeypatch):
    monkeypatch.setattr(ConfigManager, "get_logging_config", lambda self: {})
    logging_config.setup_logging()
    assert logging.getLogger().level == logging.INFO


def test_invalid_config_falls_back(monkeypatch):
    bad = {"version": 1, "handlers": {"x": {"class": "no.such.Handler"}}}
    monkeypatch.setattr(ConfigManager, "get_logging_config", lambda self: bad)
    logging_config.setup_logging()
    assert logging.getLogger().level == logging.INFO


def test_debug_override_from_environment(monkeypatch):
    monkeypatch.setenv("XPATHGEN_DEBUG_MODULES", "xpathgen.core.path_builder, ")
    logging_config.setup_logging()
    target = logging.getLogger("xpathgen.core.path_builder")
    assert target.level == logging.DEBUG
    assert any(h.level <= logging.DEBUG for h in target.handlers)
