"""Shared fixtures."""

import os
import tempfile

import pytest

# Settings are read at import time, so point them at a scratch dir first
_scratch = tempfile.mkdtemp(prefix="habitflow-tests-")
os.environ.setdefault("STORAGE_PATH", os.path.join(_scratch, "habitflow.db"))
os.environ.setdefault("DASHBOARD_OUTPUT_DIR", os.path.join(_scratch, "images"))

from habitflow.habits.storage import KeyValueStorage  # noqa: E402
from habitflow.habits.store import HabitStore  # noqa: E402


@pytest.fixture
def storage(tmp_path):
    return KeyValueStorage(str(tmp_path / "store.db"))


@pytest.fixture
def store(storage):
    return HabitStore(storage)
