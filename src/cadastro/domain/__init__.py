"""Domain layer: entities, validation rules and errors. No dependencies on outer layers."""

from cadastro.domain.entities import Person
from cadastro.domain.errors import (
    CadastroError,
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "CadastroError",
    "DuplicateNameError",
    "NotFoundError",
    "PersistenceError",
    "Person",
    "ValidationError",
]
