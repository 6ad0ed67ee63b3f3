import sys
import os
from tempfile import TemporaryDirectory
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

PROTO_DIR = os.path.join(os.path.dirname(__file__), "proto")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path


@pytest.fixture
def proto_path():
    """Path of a schema file under tests/proto."""
    def _path(name):
        return os.path.join(PROTO_DIR, name)
    return _path
