"""Shared fixtures for recstore tests."""

import logging
import os

import pytest

from recstore.config import reset_store_config
from recstore.store import MonotonicIds, RecordStore


@pytest.fixture(autouse=True)
def _clean_store_env(monkeypatch):
    """Keep RECSTORE_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("RECSTORE_"):
            monkeypatch.delenv(key)
    reset_store_config()
    yield
    reset_store_config()


@pytest.fixture
def store():
    return RecordStore("Work", id_strategy=MonotonicIds())


@pytest.fixture
def work_store(store):
    """Store holding one done and two open records."""
    store.add("Learn TS", 1)
    store.add("Write spec", 2)
    store.add("Buy milk", 3)
    store.complete(1)
    return store


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers, filters, level = root.handlers[:], root.filters[:], root.level
    yield
    root.handlers[:] = handlers
    root.filters[:] = filters
    root.setLevel(level)
