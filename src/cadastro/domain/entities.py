"""Domain entity: Person (one directory record)."""

from collections.abc import Sequence
from dataclasses import dataclass

# Number of fields in the persisted row: [email, phone, age].
ROW_LENGTH = 3


@dataclass(frozen=True)
class Person:
    """
    Represents one person in the directory.
    The name is the storage key; email, phone and age are kept as strings
    exactly as they are persisted.
    """

    name: str
    email: str
    phone: str
    age: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Person name must be non-empty.")

    def as_row(self) -> list[str]:
        """Return the persisted triple [email, phone, age]."""
        return [self.email, self.phone, self.age]

    @classmethod
    def from_row(cls, name: str, row: Sequence[str]) -> "Person":
        """Build a Person from a persisted [email, phone, age] triple."""
        if len(row) != ROW_LENGTH or not all(isinstance(v, str) for v in row):
            raise ValueError(
                f"Record for {name!r} must be a list of {ROW_LENGTH} strings."
            )
        email, phone, age = row
        return cls(name=name, email=email, phone=phone, age=age)

    def renamed(self, name: str) -> "Person":
        return Person(name=name, email=self.email, phone=self.phone, age=self.age)
