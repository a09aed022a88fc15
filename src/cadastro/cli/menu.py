"""Main menu loop."""

from collections.abc import Callable

from cadastro.cli.console import console, error, success
from cadastro.cli.editor import RecordEditor

EXIT_OPTION = "0"

# (key, label, color, action)
MenuOption = tuple[str, str, str, Callable[[], None]]


def menu_options(editor: RecordEditor) -> list[MenuOption]:
    """Every menu entry except exit."""
    return [
        ("1", "Cadastrar nova pessoa", "green", editor.create),
        ("2", "Alterar dados da pessoa", "yellow", editor.update),
        ("3", "Apagar dados da pessoa", "red", editor.delete),
        ("4", "Exibir dados da pessoa", "blue", editor.view_one),
        ("5", "Exibir todas as pessoas cadastradas", "magenta", editor.view_all),
    ]


def show_menu(options: list[MenuOption]) -> None:
    console.print()
    console.rule("[bold]SISTEMA DE CADASTRO DE PESSOAS[/bold]", style="cyan")
    console.print()
    for key, label, color, _ in options:
        console.print(f"  [{color}]{key}[/{color}] │ {label}")
    console.print(f"  [bold red]{EXIT_OPTION}[/bold red] │ Sair do sistema")
    console.print()
    console.rule(style="cyan")


def run_menu(editor: RecordEditor) -> None:
    """Show the menu until the operator picks exit. EOFError from input propagates."""
    options = menu_options(editor)
    actions = {key: action for key, _, _, action in options}
    while True:
        show_menu(options)
        choice = editor.read("Escolha uma opção: ")
        if choice == EXIT_OPTION:
            success("Encerrando o sistema... Até breve!")
            return
        action = actions.get(choice)
        if action is None:
            error("\n✗ Opção inválida!")
        else:
            action()
        editor.pause()
