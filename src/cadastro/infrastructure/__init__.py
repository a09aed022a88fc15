"""Infrastructure layer: concrete implementations of application ports."""

from cadastro.infrastructure.memory_repository import InMemoryDirectoryRepository
from cadastro.infrastructure.persistence.json_store import JsonFileStore
from cadastro.infrastructure.phone import format_phone

__all__ = [
    "InMemoryDirectoryRepository",
    "JsonFileStore",
    "format_phone",
]
