"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from cadastro.domain import Person


class DirectoryRepository(Protocol):
    """Holds the directory in memory, keyed by name in its original casing.
    Name comparisons are case- and whitespace-insensitive; stored keys are not normalized.
    """

    def exists(self, name: str) -> bool:
        """Return True if some stored name normalizes to the same key as name."""
        ...

    def find_exact(self, name: str) -> str | None:
        """Return the stored key matching name after normalization, or None."""
        ...

    def search_fragment(self, fragment: str) -> list[str]:
        """Return stored keys containing the normalized fragment, sorted by key."""
        ...

    def get(self, name: str) -> Person | None:
        """Return the person stored under exactly this key, or None."""
        ...

    def upsert(self, name: str, person: Person) -> None:
        """Insert or overwrite the entry under name as given."""
        ...

    def remove(self, name: str) -> None:
        """Delete the entry whose key is exactly name. Missing keys are ignored."""
        ...

    def all(self) -> list[tuple[str, Person]]:
        """Return (name, person) pairs sorted by name."""
        ...

    def replace_all(self, people: dict[str, Person]) -> None:
        """Replace the whole directory (used when loading)."""
        ...

    def snapshot(self) -> dict[str, Person]:
        """Return a copy of the directory (used when saving)."""
        ...

    def __len__(self) -> int: ...


class PersistenceProvider(Protocol):
    """Loads and saves the full directory. Raises PersistenceError on failure."""

    def load(self) -> dict[str, Person]:
        """Return the stored directory; empty when nothing was saved yet."""
        ...

    def save(self, people: dict[str, Person]) -> None:
        """Overwrite the backing store with people."""
        ...
