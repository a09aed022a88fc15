"""Test doubles shared by the test modules."""

from cadastro.domain import PersistenceError, Person


class RecordingStore:
    """PersistenceProvider double. Keeps the last saved directory and counts saves."""

    def __init__(self, people: dict[str, Person] | None = None) -> None:
        self.people = dict(people or {})
        self.saves = 0

    def load(self) -> dict[str, Person]:
        return dict(self.people)

    def save(self, people: dict[str, Person]) -> None:
        self.saves += 1
        self.people = dict(people)


class FailingStore(RecordingStore):
    """Every save fails as if the disk were read-only."""

    def save(self, people: dict[str, Person]) -> None:
        raise PersistenceError("pessoas.json", "Read-only file system")


class Script:
    """Line reader fed from a fixed list. Raises EOFError once the lines run out."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


def person(
    name: str, email: str = "", phone: str = "11987654321", age: str = "30"
) -> Person:
    return Person(
        name=name,
        email=email or f"{name.split()[0].lower()}@example.com",
        phone=phone,
        age=age,
    )
