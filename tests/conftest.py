# Shared fixtures. Widget tests use pytest-qt's 'qtbot' on the offscreen
# platform so they run without a display.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from admin_console.services.service_locator import services  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_services():
    """Each test starts and ends with an empty service registry."""
    services.clear()
    yield
    services.clear()


@pytest.fixture
def people():
    return [
        {"id": 1, "name": "Charlie", "age": 30, "active": True},
        {"id": 2, "name": "alice", "age": 25, "active": False},
        {"id": 3, "name": None, "age": 41, "active": True},
        {"id": 4, "name": "Bob", "age": 25, "active": True},
        {"id": 5, "name": "dave", "active": False},
    ]
