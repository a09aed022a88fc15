"""Tests for the interactive record workflows. Input is scripted; output captured from the shared console."""

import pytest
from helpers import FailingStore, Script

from cadastro.application import DirectoryService
from cadastro.cli import RecordEditor
from cadastro.domain import NotFoundError
from cadastro.infrastructure import InMemoryDirectoryRepository


def _editor(service: DirectoryService, *lines: str) -> tuple[RecordEditor, Script]:
    script = Script(list(lines))
    return RecordEditor(service, ask=script), script


# --- create ---


def test_create_retries_until_each_field_is_valid(service, store, capsys) -> None:
    editor, script = _editor(
        service,
        "",
        "Ana",
        "ana@",
        "ana@example.com",
        "123",
        "(11) 98765-4321",
        "0",
        "trinta",
        "30",
    )
    editor.create()

    out = capsys.readouterr().out
    assert "Valor obrigatório" in out
    assert "Email inválido" in out
    assert "Celular inválido" in out
    assert "Insira um número inteiro positivo" in out
    assert "Pessoa cadastrada com sucesso" in out

    ana = service.get("Ana")
    assert ana.as_row() == ["ana@example.com", "11987654321", "30"]
    assert store.saves == 1
    assert script.remaining == 0


def test_create_duplicate_aborts_before_other_fields(service, store, capsys) -> None:
    editor, _ = _editor(service, "Ana", "ana@example.com", "11987654321", "30")
    editor.create()
    editor, script = _editor(service, "ana", "never@example.com")
    editor.create()

    assert "Já existe uma pessoa com esse nome" in capsys.readouterr().out
    assert service.count() == 1
    assert store.saves == 1
    assert script.prompts == ["Nome: "]
    assert script.remaining == 1


def test_create_save_failure_is_reported(capsys) -> None:
    service = DirectoryService(InMemoryDirectoryRepository(), FailingStore())
    editor, _ = _editor(service, "Ana", "ana@example.com", "11987654321", "30")
    editor.create()

    out = capsys.readouterr().out
    assert "Erro ao salvar dados" in out
    assert "Read-only file system" in out
    assert service.exists("Ana")


def test_create_stops_when_input_ends(service) -> None:
    editor, _ = _editor(service, "Ana", "bad-email")
    with pytest.raises(EOFError):
        editor.create()
    assert service.count() == 0


# --- target resolution ---


def test_resolve_single_match_without_prompt(populated) -> None:
    editor, script = _editor(populated)
    assert editor.resolve_target("bru") == "Bruno"
    assert script.prompts == []


def test_resolve_multiple_matches_by_position(populated, capsys) -> None:
    editor, script = _editor(populated, "0", "3", "x", "", "2")
    assert editor.resolve_target("ana") == "Ana Paula"

    out = capsys.readouterr().out
    assert "Foram encontradas 2 correspondências" in out
    assert out.count("Escolha inválida.") == 4
    assert "Bruno" not in out
    assert script.remaining == 0


def test_resolve_empty_term_lists_everyone_sorted(populated) -> None:
    editor, _ = _editor(populated, "1")
    assert editor.resolve_target("") == "Ana"
    editor, _ = _editor(populated, "3")
    assert editor.resolve_target("") == "Bruno"


def test_resolve_no_match(populated) -> None:
    editor, _ = _editor(populated)
    with pytest.raises(NotFoundError):
        editor.resolve_target("zzz")


def test_resolve_rejects_positions_that_are_not_plain_digits(populated, capsys) -> None:
    editor, script = _editor(populated, "0_2", "２", "2.0", " 1 x", "+2")
    assert editor.resolve_target("ana") == "Ana Paula"

    assert capsys.readouterr().out.count("Escolha inválida.") == 4
    assert script.prompts.count("\nEscolha o número: ") == 5
    assert script.remaining == 0


# --- update ---


def test_update_invalid_email_warns_and_still_persists(populated, store, capsys) -> None:
    editor, script = _editor(
        populated, "bruno", "", "not-an-email", "+55 11 91234-5678", ""
    )
    editor.update()

    out = capsys.readouterr().out
    assert "Email inválido. Mantendo o anterior." in out
    assert "Dados atualizados com sucesso" in out

    bruno = populated.get("Bruno")
    assert bruno.email == "bruno@example.com"
    assert bruno.phone == "+5511912345678"
    assert bruno.age == "30"
    assert store.saves == 1
    assert script.remaining == 0


def test_update_after_disambiguation_renames(populated, store) -> None:
    editor, _ = _editor(populated, "ana", "2", "Paula", "", "", "29")
    editor.update()

    assert not populated.exists("Ana Paula")
    paula = populated.get("Paula")
    assert paula.email == "ana@example.com"
    assert paula.age == "29"
    assert sorted(store.people) == ["Ana", "Bruno", "Paula"]


def test_update_rejects_name_of_other_person(populated, capsys) -> None:
    editor, _ = _editor(populated, "bruno", "ANA", "", "", "")
    editor.update()

    assert "Nome já existe. Mantendo o anterior." in capsys.readouterr().out
    assert populated.candidates("") == ["Ana", "Ana Paula", "Bruno"]


def test_update_no_match_aborts(populated, store, capsys) -> None:
    editor, script = _editor(populated, "zzz", "unused")
    editor.update()

    assert "Nenhuma correspondência encontrada" in capsys.readouterr().out
    assert store.saves == 0
    assert script.remaining == 1


def test_update_on_empty_directory_does_not_prompt(service, capsys) -> None:
    editor, script = _editor(service)
    editor.update()
    assert "Nenhuma pessoa cadastrada" in capsys.readouterr().out
    assert script.prompts == []


# --- delete ---


def test_delete_declined_keeps_entry(populated, store, capsys) -> None:
    editor, script = _editor(populated, "bruno", "talvez", "n")
    editor.delete()

    out = capsys.readouterr().out
    assert "Digite 'S' para Sim ou 'N' para Não." in out
    assert "Operação cancelada" in out
    assert populated.count() == 3
    assert store.saves == 0
    assert script.remaining == 0


def test_delete_confirmed(populated, store, capsys) -> None:
    editor, _ = _editor(populated, "ana", "1", "s")
    editor.delete()

    assert "Pessoa apagada com sucesso" in capsys.readouterr().out
    assert populated.candidates("") == ["Ana Paula", "Bruno"]
    assert store.saves == 1


# --- view ---


def test_view_one_is_read_only(populated, store, capsys) -> None:
    editor, _ = _editor(populated, "paula")
    editor.view_one()

    out = capsys.readouterr().out
    assert "Ana Paula" in out
    assert "ana@example.com" in out
    assert store.saves == 0


def test_view_all_lists_everyone(populated, capsys) -> None:
    editor, script = _editor(populated)
    editor.view_all()

    out = capsys.readouterr().out
    assert "Total: 3 pessoa(s) cadastrada(s)" in out
    assert out.index("Ana Paula") < out.index("Bruno")
    assert script.prompts == []


def test_view_all_empty(service, capsys) -> None:
    editor, _ = _editor(service)
    editor.view_all()
    assert "Nenhuma pessoa cadastrada" in capsys.readouterr().out