"""Record tables."""

from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from cadastro.cli.console import console, create_table
from cadastro.domain import Person
from cadastro.infrastructure import format_phone

COLUMNS: list[tuple[str, str | dict]] = [
    ("#", {"style": "yellow", "justify": "right"}),
    ("Nome", {}),
    ("Email", {}),
    ("Celular", {"no_wrap": True}),
    ("Idade", {"justify": "right"}),
]


def people_table(people: Sequence[Person], title: str | None = None) -> Table:
    """Numbered table, one row per person in the given order (numbers start at 1)."""
    table = create_table(title, COLUMNS)
    for index, person in enumerate(people, start=1):
        table.add_row(
            str(index),
            escape(person.name),
            escape(person.email),
            escape(format_phone(person.phone)),
            escape(person.age),
        )
    return table


def show_people(people: Sequence[Person], title: str | None = None) -> None:
    if not people:
        return
    console.print(people_table(people, title))
