"""Directory use cases: create, search, update, delete and list people. Persists after every mutation."""

import logging

from cadastro.application.dto import (
    DirectoryLoaded,
    FieldWarning,
    RecordCreated,
    RecordDeleted,
    RecordUpdated,
)
from cadastro.application.ports import DirectoryRepository, PersistenceProvider
from cadastro.domain import DuplicateNameError, NotFoundError, Person, ValidationError
from cadastro.domain.validation import (
    canonical_age,
    is_valid_age,
    is_valid_email,
    is_valid_phone,
    normalize_name,
    normalize_phone,
)

logger = logging.getLogger(__name__)

FIELD_NAME = "name"
FIELD_EMAIL = "email"
FIELD_PHONE = "phone"
FIELD_AGE = "age"
FIELDS = (FIELD_NAME, FIELD_EMAIL, FIELD_PHONE, FIELD_AGE)

REASON_INVALID = "invalid"
REASON_DUPLICATE = "duplicate"

_VALIDATORS = {
    FIELD_EMAIL: is_valid_email,
    FIELD_PHONE: is_valid_phone,
    FIELD_AGE: is_valid_age,
}


def is_valid_field(field: str, value: str) -> bool:
    """Syntax check for email, phone or age. Names only need to be non-empty."""
    if field == FIELD_NAME:
        return bool(value.strip())
    return _VALIDATORS[field](value)


def _stored_value(field: str, value: str) -> str:
    if field == FIELD_PHONE:
        return normalize_phone(value)
    if field == FIELD_AGE:
        return canonical_age(value)
    return value


class DirectoryService:
    """Core flow over the in-memory directory. Every successful mutation is saved through the store."""

    def __init__(
        self,
        repository: DirectoryRepository,
        store: PersistenceProvider,
    ) -> None:
        self._repo = repository
        self._store = store

    def load(self) -> DirectoryLoaded:
        """Replace the directory with the store's contents. On PersistenceError nothing changes."""
        people = self._store.load()
        self._repo.replace_all(people)
        return DirectoryLoaded(count=len(people))

    def count(self) -> int:
        return len(self._repo)

    def exists(self, name: str) -> bool:
        return self._repo.exists(name)

    def candidates(self, term: str) -> list[str]:
        """Return stored names containing term (case-insensitive), sorted.

        An empty term matches everyone. Raises NotFoundError when nothing matches.
        """
        matches = self._repo.search_fragment(term)
        if not matches:
            raise NotFoundError(term)
        return matches

    def get(self, name: str) -> Person:
        """Return the person stored under exactly this name."""
        person = self._repo.get(name)
        if person is None:
            raise NotFoundError(name)
        return person

    def list_all(self) -> list[Person]:
        """Return every person sorted by name."""
        return [person for _, person in self._repo.all()]

    def create(self, name: str, email: str, phone: str, age: str) -> RecordCreated:
        """Validate and store a new person. Raises DuplicateNameError or ValidationError."""
        name = (name or "").strip()
        if not name:
            raise ValidationError(FIELD_NAME, name)
        if self._repo.exists(name):
            raise DuplicateNameError(name)
        values = {FIELD_EMAIL: email, FIELD_PHONE: phone, FIELD_AGE: age}
        for field, value in values.items():
            if not is_valid_field(field, value):
                raise ValidationError(field, value)

        person = Person(
            name=name,
            email=email,
            phone=_stored_value(FIELD_PHONE, phone),
            age=_stored_value(FIELD_AGE, age),
        )
        self._repo.upsert(name, person)
        logger.info("Created %s", name)
        self._persist()
        return RecordCreated(person=person)

    def check_replacement(
        self, target: str, field: str, value: str
    ) -> FieldWarning | None:
        """Return why value cannot replace field on target, or None if it can.

        A new name may not belong to a different person; renaming a person to
        another casing of its own name is allowed.
        """
        if field == FIELD_NAME:
            if self._repo.exists(value) and normalize_name(value) != normalize_name(
                target
            ):
                return FieldWarning(field=field, value=value, reason=REASON_DUPLICATE)
            return None
        if not is_valid_field(field, value):
            return FieldWarning(field=field, value=value, reason=REASON_INVALID)
        return None

    def update(
        self,
        target: str,
        *,
        name: str = "",
        email: str = "",
        phone: str = "",
        age: str = "",
    ) -> RecordUpdated:
        """Apply a partial update to target and persist.

        Empty values keep the current field. Rejected values keep the current
        field too and are reported as warnings; the rest of the update still
        goes through.
        """
        current = self.get(target)
        stored = {
            FIELD_NAME: current.name,
            FIELD_EMAIL: current.email,
            FIELD_PHONE: current.phone,
            FIELD_AGE: current.age,
        }
        requested = {
            FIELD_NAME: name,
            FIELD_EMAIL: email,
            FIELD_PHONE: phone,
            FIELD_AGE: age,
        }
        warnings = []
        for field in FIELDS:
            value = (requested[field] or "").strip()
            if not value:
                continue
            warning = self.check_replacement(target, field, value)
            if warning is not None:
                warnings.append(warning)
                continue
            stored[field] = _stored_value(field, value)

        person = Person(
            name=stored[FIELD_NAME],
            email=stored[FIELD_EMAIL],
            phone=stored[FIELD_PHONE],
            age=stored[FIELD_AGE],
        )
        if person.name != target:
            self._repo.remove(target)
        self._repo.upsert(person.name, person)
        logger.info(
            "Updated %s (now %s), %d field(s) rejected",
            target,
            person.name,
            len(warnings),
        )
        self._persist()
        return RecordUpdated(
            person=person, previous_name=target, warnings=tuple(warnings)
        )

    def delete(self, name: str) -> RecordDeleted:
        """Remove the person stored under exactly this name and persist."""
        self.get(name)
        self._repo.remove(name)
        logger.info("Deleted %s", name)
        self._persist()
        return RecordDeleted(name=name)

    def _persist(self) -> None:
        self._store.save(self._repo.snapshot())
