# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import docmanager` works without installing.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from docmanager.infrastructure.stores import (  # noqa: E402
    InMemoryDocumentRepository,
    InMemoryEmployeeRepository,
    InMemoryRoleRepository,
)


class FakeFileStorage:
    """Records presign requests; optionally fails."""

    def __init__(self, error: Exception | None = None):
        self.keys = []
        self.error = error

    def generate_presigned_upload_url(self, key):
        if self.error is not None:
            raise self.error
        self.keys.append(key)
        return f"https://uploads.example.test/{key}?signature=fake", key


class SteppingClock:
    """Returns a fixed start time, advancing by `step` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def document_repo():
    return InMemoryDocumentRepository()


@pytest.fixture
def employee_repo():
    return InMemoryEmployeeRepository()


@pytest.fixture
def role_repo():
    return InMemoryRoleRepository()


@pytest.fixture
def file_storage():
    return FakeFileStorage()


@pytest.fixture
def clock():
    return SteppingClock()
