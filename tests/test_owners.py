import io

import pytest

from vetclinic.console import Console
from vetclinic.entities import Owner
from vetclinic.owners import (
    add_owner,
    edit_owner,
    find_owner_by_dui,
    search_owner,
    validate_dui,
    validate_phone,
)
from vetclinic.storage import DataStore

SEED_OWNERS = [
    Owner(1, "Ana López", "Calle El Mirador #123", "00000001-1", "00000001"),
    Owner(2, "Carlos Pérez", "Av. Independencia #45", "00000002-2", "00000002"),
    Owner(3, "Laura Ramírez", "Col. Escalón, Casa 12", "00000003-3", "00000003"),
]


@pytest.fixture
def store(tmp_path):
    data = DataStore(tmp_path / "data")
    for owner in SEED_OWNERS:
        data.owners.append(owner)
    return data


def make_console(*lines):
    out = io.StringIO()
    return Console(io.StringIO("".join(f"{line}\n" for line in lines)), out), out


@pytest.mark.parametrize(
    "dui, expected",
    [
        ("00000001-1", True),
        ("000000011", False),
        ("0000001-1", False),
        ("00000001-12", False),
        ("abcdefgh-1", False),
        ("00000001-1\n", False),
        ("", False),
    ],
)
def test_validate_dui(dui, expected):
    assert validate_dui(dui) is expected


@pytest.mark.parametrize(
    "phone, expected",
    [("00000000", True), ("0000000", False), ("000000000", False), ("0000-000", False)],
)
def test_validate_phone(phone, expected):
    assert validate_phone(phone) is expected


def test_find_owner_by_dui(store):
    assert find_owner_by_dui(store, "00000002-2") == SEED_OWNERS[1]
    assert find_owner_by_dui(store, "00000009-9") is None


def test_find_owner_by_dui_without_file(tmp_path):
    assert find_owner_by_dui(DataStore(tmp_path), "00000001-1") is None


def test_add_owner_stores_with_next_id(store):
    console, out = make_console("00000004-4", "Jorge Torres", "00000004", "Barrio San Miguel")
    owner = add_owner(store, console)
    assert owner == Owner(4, "Jorge Torres", "Barrio San Miguel", "00000004-4", "00000004")
    assert list(store.owners.records())[-1] == owner
    assert "DUEÑO AGREGADO CORRECTAMENTE" in out.getvalue()


def test_add_owner_retries_invalid_dui_and_phone(store):
    console, out = make_console("bad", "00000005-5", "María", "123", "00000005", "Casa")
    owner = add_owner(store, console)
    assert owner.dui == "00000005-5"
    assert owner.phone == "00000005"
    text = out.getvalue()
    assert "FORMATO INVÁLIDO" in text
    assert "TELÉFONO INVÁLIDO" in text


def test_add_owner_rejects_duplicate_dui(store):
    console, out = make_console("00000001-1")
    assert add_owner(store, console) is None
    assert len(list(store.owners.records())) == 3
    text = out.getvalue()
    assert "YA EXISTE UN DUEÑO CON ESE DUI" in text
    assert "Ana López" in text


def test_add_owner_first_in_empty_store(tmp_path):
    data = DataStore(tmp_path / "data")
    console, _ = make_console("00000001-1", "Ana", "00000001", "Calle")
    owner = add_owner(data, console)
    assert owner.id == 1
    assert list(data.owners.records()) == [owner]


def test_search_owner_found(store):
    console, out = make_console("2")
    assert search_owner(store, console) == SEED_OWNERS[1]
    assert "Carlos Pérez" in out.getvalue()


def test_search_owner_not_found(store):
    console, out = make_console("42")
    assert search_owner(store, console) is None
    assert "DUEÑO NO ENCONTRADO" in out.getvalue()


def test_search_owner_without_file(tmp_path):
    console, out = make_console("1")
    assert search_owner(DataStore(tmp_path), console) is None
    assert "NO SE PUDO ABRIR EL ARCHIVO DE DUEÑOS" in out.getvalue()


def test_edit_owner_replaces_data(store):
    console, out = make_console("2", "Carlos P.", "Nueva Dir", "00000022-2", "00000022")
    edited = edit_owner(store, console)
    assert edited == Owner(2, "Carlos P.", "Nueva Dir", "00000022-2", "00000022")
    records = list(store.owners.records())
    assert records == [SEED_OWNERS[0], edited, SEED_OWNERS[2]]
    assert "DUEÑO EDITADO CORRECTAMENTE" in out.getvalue()


def test_edit_owner_not_found(store):
    console, out = make_console("9")
    assert edit_owner(store, console) is None
    assert list(store.owners.records()) == SEED_OWNERS
    assert "DUEÑO NO ENCONTRADO" in out.getvalue()


def test_edit_owner_without_file(tmp_path):
    console, out = make_console("1")
    assert edit_owner(DataStore(tmp_path), console) is None
    assert "NO SE PUDO ABRIR EL ARCHIVO DE DUEÑOS" in out.getvalue()