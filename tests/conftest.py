"""Shared fixtures: a store that records saves and services built on it."""

import pytest
from helpers import RecordingStore, person

from cadastro.application import DirectoryService
from cadastro.infrastructure import InMemoryDirectoryRepository


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def service(store: RecordingStore) -> DirectoryService:
    return DirectoryService(InMemoryDirectoryRepository(), store)


@pytest.fixture
def populated(store: RecordingStore) -> DirectoryService:
    """Service holding Ana, Ana Paula and Bruno; nothing saved yet."""
    people = {p.name: p for p in (person("Ana"), person("Bruno"), person("Ana Paula"))}
    return DirectoryService(InMemoryDirectoryRepository(people), store)
