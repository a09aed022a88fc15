"""Wire the directory together and run the interactive session."""

import logging
from collections.abc import Callable

from cadastro.application import DirectoryService
from cadastro.cli.console import console, error, success
from cadastro.cli.editor import RecordEditor
from cadastro.cli.menu import run_menu
from cadastro.config import Settings
from cadastro.domain import PersistenceError
from cadastro.infrastructure import InMemoryDirectoryRepository, JsonFileStore

logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> DirectoryService:
    return DirectoryService(
        InMemoryDirectoryRepository(), JsonFileStore(settings.data_file)
    )


def load_directory(service: DirectoryService) -> None:
    """Load saved people. A missing file is a first run; a broken one leaves the directory empty."""
    try:
        loaded = service.load()
    except PersistenceError as e:
        error(f"Erro ao carregar dados: {e.reason}")
        return
    if loaded.count:
        success(f"✓ {loaded.count} pessoa(s) carregada(s) do banco de dados")


def run(settings: Settings, ask: Callable[[str], str] | None = None) -> int:
    """Run the menu until exit or end of input. Always returns exit code 0."""
    service = build_service(settings)
    load_directory(service)
    editor = RecordEditor(service, ask=ask)
    try:
        run_menu(editor)
    except (EOFError, KeyboardInterrupt):
        console.print()
        logger.info("Input closed, leaving")
    return 0
