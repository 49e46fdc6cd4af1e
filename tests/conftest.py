"""
Pytest configuration and fixtures.
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Keep feature flags and settings deterministic
os.environ.setdefault("MAP_PINS_ENABLED", "true")
os.environ.setdefault("WEB_MAP_ENABLED", "true")
os.environ.setdefault("PERSIST_SESSIONS", "false")

import pytest

from core.services.profile_store import ProfileStore
from fakes import (
    FakeBackend, FakeAuthProvider, FakeProfileRepository, FakeStadiumRepository,
)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def auth(backend):
    return FakeAuthProvider(backend)


@pytest.fixture
def profile_repo(backend):
    return FakeProfileRepository(backend)


@pytest.fixture
def stadium_repo(backend):
    return FakeStadiumRepository(backend)


@pytest.fixture
def store(auth, profile_repo, stadium_repo):
    return ProfileStore(auth=auth, profile_repo=profile_repo, stadium_repo=stadium_repo)
