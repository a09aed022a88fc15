"""JSON file implementation of PersistenceProvider.

File shape: {"<name>": ["<email>", "<phone>", "<age>"], ...}
"""

import json
import logging
from pathlib import Path

from cadastro.domain import PersistenceError, Person

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Reads and writes the whole directory as one pretty-printed JSON object."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> dict[str, Person]:
        if not self._path.exists():
            logger.info("No data file at %s, starting empty", self._path)
            return {}
        try:
            obj = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Failed to read %s: %s", self._path, e)
            raise PersistenceError(str(self._path), str(e)) from e
        if not isinstance(obj, dict):
            raise PersistenceError(str(self._path), "expected a JSON object")
        people = {}
        for name, row in obj.items():
            if not name.strip():
                logger.warning("Skipping record with blank name in %s", self._path)
                continue
            if not isinstance(row, list):
                raise PersistenceError(
                    str(self._path), f"record for {name!r} must be a list"
                )
            try:
                people[name] = Person.from_row(name, row)
            except ValueError as e:
                raise PersistenceError(str(self._path), str(e)) from e
        logger.info("Loaded %d person(s) from %s", len(people), self._path)
        return people

    def save(self, people: dict[str, Person]) -> None:
        obj = {name: person.as_row() for name, person in people.items()}
        data = json.dumps(obj, indent=2, ensure_ascii=False)
        try:
            self._path.write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", self._path, e)
            raise PersistenceError(str(self._path), str(e)) from e
        logger.info("Saved %d person(s) to %s", len(people), self._path)
