"""Owner registration, lookup and editing."""

from __future__ import annotations

import re
from typing import Optional

from vetclinic.console import Console
from vetclinic.entities import Owner
from vetclinic.storage import DataStore

_DUI_PATTERN = re.compile(r"[0-9]{8}-[0-9]")
_PHONE_PATTERN = re.compile(r"[0-9]{8}")

_DATA_HEADER = (
    "\n\n======================================\n"
    "============ DATOS NUEVOS ============\n"
    "======================================\n"
)
_CURRENT_HEADER = (
    "\n======================================\n"
    "=========== DATOS ACTUALES ===========\n"
    "======================================\n"
)
_NOT_FOUND = (
    "\n~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "❌ DUEÑO NO ENCONTRADO ❌\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~"
)


def validate_dui(dui: str) -> bool:
    """Whether ``dui`` has the form ########-#."""
    return _DUI_PATTERN.fullmatch(dui) is not None


def validate_phone(phone: str) -> bool:
    """Whether ``phone`` is exactly eight digits."""
    return _PHONE_PATTERN.fullmatch(phone) is not None


def find_owner_by_dui(store: DataStore, dui: str) -> Optional[Owner]:
    """Return the first owner registered with ``dui``, or None."""
    return store.owners.find(lambda owner: owner.dui == dui)


def add_owner(store: DataStore, console: Console) -> Optional[Owner]:
    """Ask for a new owner's data and store it; return the owner, or None if refused."""
    console.say(
        "=================================\n"
        "========= AGREGAR DUEÑO =========\n"
        "=================================\n"
    )

    while not validate_dui(dui := console.ask("Ingrese DUI (########-#): ")):
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ FORMATO INVÁLIDO - INTENTE DE NUEVO ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n\n"
        )

    duplicate = find_owner_by_dui(store, dui)
    if duplicate is not None:
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ YA EXISTE UN DUEÑO CON ESE DUI ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        console.say(duplicate.describe())
        return None

    name = console.ask("Ingrese Nombre y Apellido: ")

    while not validate_phone(phone := console.ask("Ingrese Teléfono (########): ")):
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ TELÉFONO INVÁLIDO - INTENTE DE NUEVO ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )

    address = console.ask("Ingrese Dirección: ")

    owner = Owner(store.owners.next_id(), name, address, dui, phone)
    store.owners.append(owner)

    console.say(
        "\n===================================\n"
        "✅ DUEÑO AGREGADO CORRECTAMENTE ✅\n"
        "===================================\n"
    )
    return owner


def search_owner(store: DataStore, console: Console) -> Optional[Owner]:
    """Ask for an owner id and show that owner; return it, or None if absent."""
    if not store.owners.exists():
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "❌ NO SE PUDO ABRIR EL ARCHIVO DE DUEÑOS ❌ \n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    console.say(
        "================================\n"
        "========= BUSCAR DUEÑO =========\n"
        "================================\n"
    )
    wanted = console.ask_int("Ingrese ID del dueño a buscar: ")

    owner = store.owners.find(lambda stored: stored.id == wanted)
    if owner is None:
        console.say(_NOT_FOUND)
        return None
    console.say(owner.describe())
    return owner


def edit_owner(store: DataStore, console: Console) -> Optional[Owner]:
    """Ask for an owner id and replace that owner's data; return the edited owner."""
    if not store.owners.exists():
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "NO SE PUDO ABRIR EL ARCHIVO DE DUEÑOS\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    console.say(
        "================================\n"
        "========= EDITAR DUEÑO =========\n"
        "================================\n"
    )
    wanted = console.ask_int("\nIngrese ID del Dueño a Editar: ")

    owner = store.owners.find(lambda stored: stored.id == wanted)
    if owner is None:
        console.say(_NOT_FOUND)
        return None

    console.say(_CURRENT_HEADER)
    console.say(owner.describe())
    console.say(_DATA_HEADER)

    owner.name = console.ask("Nuevo Nombre: ")
    owner.address = console.ask("Nueva Dirección: ")
    owner.dui = console.ask("Nuevo DUI: ")
    owner.phone = console.ask("Nuevo Teléfono: ")

    store.owners.replace(wanted, owner)

    console.say(
        "\n==================================\n"
        "✅ DUEÑO EDITADO CORRECTAMENTE ✅\n"
        "==================================\n"
    )
    return owner