"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from cadastro.application.directory_service import DirectoryService
from cadastro.application.dto import (
    DirectoryLoaded,
    FieldWarning,
    RecordCreated,
    RecordDeleted,
    RecordUpdated,
)
from cadastro.application.ports import DirectoryRepository, PersistenceProvider

__all__ = [
    "DirectoryLoaded",
    "DirectoryRepository",
    "DirectoryService",
    "FieldWarning",
    "PersistenceProvider",
    "RecordCreated",
    "RecordDeleted",
    "RecordUpdated",
]
