"""Result types returned by DirectoryService."""

from dataclasses import dataclass

from cadastro.domain import Person


@dataclass(frozen=True)
class FieldWarning:
    """A replacement value that was rejected during an update; the old value was kept."""

    field: str
    value: str
    reason: str


@dataclass(frozen=True)
class RecordCreated:
    """Person was validated, stored and persisted."""

    person: Person


@dataclass(frozen=True)
class RecordUpdated:
    """Update applied (possibly with no changes) and persisted."""

    person: Person
    previous_name: str
    warnings: tuple[FieldWarning, ...] = ()

    @property
    def renamed(self) -> bool:
        return self.person.name != self.previous_name


@dataclass(frozen=True)
class RecordDeleted:
    """Person was removed and the directory persisted."""

    name: str


@dataclass(frozen=True)
class DirectoryLoaded:
    """Directory replaced with the persisted contents."""

    count: int
