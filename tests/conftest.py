"""
Shared fixtures for the longpaths tests.
"""

import uuid

import pytest

from longpaths import io_helper
from longpaths.safe_operations import SafeFileOperations

TOKEN = uuid.UUID("12345678-1234-5678-1234-567812345678")


class CapturingLogger:
    """Stands in for a logging.Logger, keeping the formatted messages."""

    def __init__(self):
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def info(self, msg, *args):
        self.infos.append(msg % args)

    def warning(self, msg, *args):
        self.warnings.append(msg % args)


@pytest.fixture
def logger():
    return CapturingLogger()


@pytest.fixture
def ops(logger):
    """SafeFileOperations over the real io_helper module, so monkeypatching io_helper injects faults."""
    return SafeFileOperations(io=io_helper, logger=logger, new_token=lambda: TOKEN)


@pytest.fixture
def make_file(tmp_path):
    def make(relative: str, content: str = "content"):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)
    return make
