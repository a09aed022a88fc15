"""In-memory implementation of DirectoryRepository."""

from cadastro.domain import Person
from cadastro.domain.validation import normalize_name


class InMemoryDirectoryRepository:
    """Stores people in a dict keyed by the name as typed.
    Lookups re-normalize stored keys on every call; the directory is small.
    """

    def __init__(self, people: dict[str, Person] | None = None) -> None:
        self._by_name: dict[str, Person] = dict(people or {})

    def __len__(self) -> int:
        return len(self._by_name)

    def exists(self, name: str) -> bool:
        return self.find_exact(name) is not None

    def find_exact(self, name: str) -> str | None:
        key = normalize_name(name)
        for stored in self._by_name:
            if normalize_name(stored) == key:
                return stored
        return None

    def search_fragment(self, fragment: str) -> list[str]:
        needle = normalize_name(fragment)
        return sorted(
            stored for stored in self._by_name if needle in normalize_name(stored)
        )

    def get(self, name: str) -> Person | None:
        return self._by_name.get(name)

    def upsert(self, name: str, person: Person) -> None:
        if person.name != name:
            person = person.renamed(name)
        self._by_name[name] = person

    def remove(self, name: str) -> None:
        self._by_name.pop(name, None)

    def all(self) -> list[tuple[str, Person]]:
        return sorted(self._by_name.items(), key=lambda item: item[0])

    def replace_all(self, people: dict[str, Person]) -> None:
        self._by_name = dict(people)

    def snapshot(self) -> dict[str, Person]:
        return dict(self._by_name)
