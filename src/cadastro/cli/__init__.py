"""Terminal interface: menu, record workflows and tables."""

from cadastro.cli.app import run
from cadastro.cli.editor import RecordEditor

__all__ = ["RecordEditor", "run"]
