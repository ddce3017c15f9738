"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from tests.builders import make_record  # noqa: E402


@pytest.fixture
def acme_record():
    return make_record()
