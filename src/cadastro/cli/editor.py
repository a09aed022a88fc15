"""Interactive record workflows: create, update, delete, view one, view all.

Every prompt reads one line through the injected ``ask`` callable. Loops
that wait for a valid value have no retry limit; they end when the input
stream does (``ask`` raises EOFError, which is left to the menu).
"""

import re
from collections.abc import Callable

from rich.markup import escape

from cadastro.application import DirectoryService, FieldWarning
from cadastro.application.directory_service import (
    FIELD_AGE,
    FIELD_EMAIL,
    FIELD_NAME,
    FIELD_PHONE,
    REASON_DUPLICATE,
    is_valid_field,
)
from cadastro.cli.console import console, error, header, info, success, warning
from cadastro.cli.tables import show_people
from cadastro.domain import (
    CadastroError,
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

# Positions are ASCII digits with an optional sign, like ages.
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")

CONFIRM_YES = "S"
CONFIRM_NO = "N"

CREATE_RETRY_MESSAGES = {
    FIELD_EMAIL: "✗ Email inválido. Ex.: nome@dominio.com",
    FIELD_PHONE: (
        "✗ Celular inválido. Use DDD + número (10 ou 11 dígitos), com ou sem 55."
    ),
    FIELD_AGE: "✗ Insira um número inteiro positivo.",
}

UPDATE_PROMPTS = (
    (FIELD_NAME, "Novo nome: "),
    (FIELD_EMAIL, "Novo email: "),
    (FIELD_PHONE, "Novo celular: "),
    (FIELD_AGE, "Nova idade: "),
)

FIELD_LABELS = {
    FIELD_NAME: "nome",
    FIELD_EMAIL: "email",
    FIELD_PHONE: "celular",
    FIELD_AGE: "idade",
}

KEPT_MESSAGES = {
    FIELD_NAME: "✗ Nome inválido. Mantendo o anterior.",
    FIELD_EMAIL: "✗ Email inválido. Mantendo o anterior.",
    FIELD_PHONE: "✗ Celular inválido. Mantendo o anterior.",
    FIELD_AGE: "✗ Idade inválida. Mantendo a anterior.",
}


def describe_error(exc: CadastroError) -> str:
    """Operator-facing text for a directory error."""
    if isinstance(exc, DuplicateNameError):
        return "✗ Já existe uma pessoa com esse nome!"
    if isinstance(exc, NotFoundError):
        return "✗ Nenhuma correspondência encontrada."
    if isinstance(exc, PersistenceError):
        return f"✗ Erro ao salvar dados: {exc.reason}"
    if isinstance(exc, ValidationError):
        return f"✗ Valor inválido para {FIELD_LABELS.get(exc.field, exc.field)}."
    return f"✗ {exc}"


def describe_warning(w: FieldWarning) -> str:
    if w.reason == REASON_DUPLICATE:
        return "✗ Nome já existe. Mantendo o anterior."
    return KEPT_MESSAGES[w.field]


class RecordEditor:
    """Drives DirectoryService from operator input."""

    def __init__(
        self,
        service: DirectoryService,
        ask: Callable[[str], str] | None = None,
    ) -> None:
        self._service = service
        self._ask = ask or console.input

    # --- prompts ---

    def read(self, prompt: str) -> str:
        return self._ask(prompt).strip()

    def read_non_empty(self, prompt: str) -> str:
        while True:
            text = self.read(prompt)
            if text:
                return text
            error("✗ Valor obrigatório. Tente novamente.")

    def read_valid(self, prompt: str, field: str) -> str:
        """Re-prompt until the value passes the field's validation rule."""
        while True:
            text = self.read_non_empty(prompt)
            if is_valid_field(field, text):
                return text
            error(CREATE_RETRY_MESSAGES[field])

    def confirm(self, prompt: str) -> bool:
        """Accept only S (yes) or N (no), any casing."""
        while True:
            answer = self.read(prompt).upper()
            if answer == CONFIRM_YES:
                return True
            if answer == CONFIRM_NO:
                return False
            console.print("Digite 'S' para Sim ou 'N' para Não.")

    def pause(self) -> None:
        info("\nTecle ENTER para continuar...")
        self._ask("")

    # --- target resolution ---

    def choose(self, matches: list[str]) -> str:
        """Ask for a 1-based position in matches until a valid one is given."""
        while True:
            text = self.read("\nEscolha o número: ")
            choice = int(text) if INDEX_PATTERN.fullmatch(text) else 0
            if 1 <= choice <= len(matches):
                return matches[choice - 1]
            error("Escolha inválida.")

    def resolve_target(self, term: str) -> str:
        """Collapse a typed name fragment into one stored name.

        Raises NotFoundError when nothing matches. A single match is returned
        directly; several matches are listed (sorted) for the operator to pick.
        """
        matches = self._service.candidates(term)
        if len(matches) == 1:
            return matches[0]
        warning(f"\nForam encontradas {len(matches)} correspondências:\n")
        show_people([self._service.get(name) for name in matches])
        return self.choose(matches)

    def _prompt_target(self, prompt: str) -> str:
        return self.resolve_target(self.read(prompt))

    def _has_people(self) -> bool:
        if self._service.count() == 0:
            error("Nenhuma pessoa cadastrada.")
            return False
        return True

    # --- operations ---

    def create(self) -> None:
        header("CRIAR NOVA PESSOA", "green")
        try:
            name = self.read_non_empty("Nome: ")
            if self._service.exists(name):
                raise DuplicateNameError(name)
            email = self.read_valid("Email: ", FIELD_EMAIL)
            phone = self.read_valid("Celular: ", FIELD_PHONE)
            age = self.read_valid("Idade: ", FIELD_AGE)
            self._service.create(name, email, phone, age)
        except CadastroError as e:
            error("\n" + describe_error(e))
            return
        success("\n✓ Pessoa cadastrada com sucesso!")

    def update(self) -> None:
        header("ALTERAR PESSOA", "yellow")
        if not self._has_people():
            return
        try:
            target = self._prompt_target("Nome (ou parte) da pessoa: ")
            info("\nDados atuais:")
            show_people([self._service.get(target)])
            info("\n--- Deixe em branco para manter o valor atual ---")
            values = {}
            for field, prompt in UPDATE_PROMPTS:
                value = self.read(prompt)
                if value:
                    rejected = self._service.check_replacement(target, field, value)
                    if rejected is not None:
                        error(describe_warning(rejected))
                values[field] = value
            self._service.update(target, **values)
        except CadastroError as e:
            error(describe_error(e))
            return
        success("\n✓ Dados atualizados com sucesso!")

    def delete(self) -> None:
        header("APAGAR PESSOA", "red")
        if not self._has_people():
            return
        try:
            target = self._prompt_target("Nome (ou parte) da pessoa: ")
            if not self.confirm(
                f"Tem certeza que deseja apagar '{escape(target)}'? (S/N): "
            ):
                warning("\n✗ Operação cancelada.")
                return
            self._service.delete(target)
        except CadastroError as e:
            error(describe_error(e))
            return
        success("\n✓ Pessoa apagada com sucesso!")

    def view_one(self) -> None:
        header("EXIBIR UMA PESSOA", "blue")
        if not self._has_people():
            return
        try:
            target = self._prompt_target("Nome (ou parte): ")
        except NotFoundError as e:
            error(describe_error(e))
            return
        console.print()
        show_people([self._service.get(target)])

    def view_all(self) -> None:
        header("TODAS AS PESSOAS", "magenta")
        if not self._has_people():
            return
        people = self._service.list_all()
        info(f"Total: {len(people)} pessoa(s) cadastrada(s)\n")
        show_people(people)
