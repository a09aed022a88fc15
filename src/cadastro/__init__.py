"""
Cadastro core: clean-architecture layout.

- domain: Person entity, validation rules, errors. No outer dependencies.
- application: use cases (DirectoryService), ports (DirectoryRepository, PersistenceProvider), DTOs.
- infrastructure: adapters (InMemoryDirectoryRepository, JsonFileStore), phone display formatting.
- cli: interactive menu and record workflows.
"""

from cadastro.application import (
    DirectoryLoaded,
    DirectoryRepository,
    DirectoryService,
    FieldWarning,
    PersistenceProvider,
    RecordCreated,
    RecordDeleted,
    RecordUpdated,
)
from cadastro.domain import (
    CadastroError,
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    Person,
    ValidationError,
)
from cadastro.infrastructure import InMemoryDirectoryRepository, JsonFileStore

__all__ = [
    "CadastroError",
    "DirectoryLoaded",
    "DirectoryRepository",
    "DirectoryService",
    "DuplicateNameError",
    "FieldWarning",
    "InMemoryDirectoryRepository",
    "JsonFileStore",
    "NotFoundError",
    "PersistenceError",
    "PersistenceProvider",
    "Person",
    "RecordCreated",
    "RecordDeleted",
    "RecordUpdated",
    "ValidationError",
]
