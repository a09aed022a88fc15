"""Error kinds raised by the directory. All of them end the current operation only."""


class CadastroError(Exception):
    """Base class for directory errors."""


class ValidationError(CadastroError):
    """A field value failed its validation rule."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class DuplicateNameError(CadastroError):
    """Another person already uses this name (case- and whitespace-insensitive)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A person named {name!r} already exists.")


class NotFoundError(CadastroError):
    """A search term matched no person."""

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f"No person matches {term!r}.")


class PersistenceError(CadastroError):
    """The backing file could not be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
