import sys
import os

import pytest

# Make tests/samples.py importable from every test subdirectory
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)

from paletter.state import LocalStore


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "paletter" / "store.json"


@pytest.fixture
def file_store(store_path):
    return LocalStore(store_path)


class FailingStore(LocalStore):
    """Store that can be read but refuses every write."""

    def set_item(self, key, value):
        raise OSError("disk full")


@pytest.fixture
def failing_store():
    return FailingStore()
