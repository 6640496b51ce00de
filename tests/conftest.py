"""
Shared pytest fixtures: an app wired to an in-memory store and its client.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import MemoryStorage
from webapp.app import create_app
from webapp.services.user_store import UserRepository


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def repository(storage):
    return UserRepository(storage)


@pytest.fixture
def app(storage):
    app = create_app(storage=storage, config={'TESTING': True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ann():
    """Form fields for a valid signup."""
    return {
        'fullName': 'Ann',
        'signupEmail': 'Ann@Example.com',
        'phone': '',
        'signupPassword': 'secret1',
        'confirmPassword': 'secret1',
    }
