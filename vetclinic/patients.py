"""Patient registration, lookup and editing."""

from __future__ import annotations

from typing import Optional

from vetclinic.console import Console
from vetclinic.entities import Patient
from vetclinic.owners import validate_dui
from vetclinic.storage import DataStore

_NOT_FOUND = (
    "\n---------------------------------------\n"
    "❌❌❌❌ PACIENTE NO ENCONTRADO ❌❌❌❌\n"
    "---------------------------------------"
)
_CANNOT_OPEN = (
    "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "❌ NO SE PUDO ABRIR EL ARCHIVO DE PACIENTES ❌\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
)


def validate_patient_fields(
    name: str, species: str, breed: str, owner_dui: str, age: int
) -> bool:
    """Whether every text field is filled in and the age is positive."""
    return bool(name and species and breed and owner_dui) and age > 0


def owner_exists(store: DataStore, dui: str) -> bool:
    """Whether an owner with ``dui`` is registered."""
    return store.owners.find(lambda owner: owner.dui == dui) is not None


def find_duplicate_patient(
    store: DataStore, name: str, owner_dui: str
) -> Optional[Patient]:
    """Return a patient with the same name and owner, or None."""
    return store.patients.find(
        lambda patient: patient.name == name and patient.owner_dui == owner_dui
    )


def find_patient_by_id(store: DataStore, patient_id: int) -> Optional[Patient]:
    """Return the patient with ``patient_id``, or None."""
    return store.patients.find(lambda patient: patient.id == patient_id)


def add_patient(store: DataStore, console: Console) -> Optional[Patient]:
    """Ask for a new patient's data and store it; return the patient, or None if refused."""
    console.say(
        "====================================\n"
        "========= AGREGAR PACIENTE =========\n"
        "====================================\n"
    )

    while not validate_dui(owner_dui := console.ask("Ingrese DUI del dueño (########-#): ")):
        console.say("\n⚠️ Formato inválido - Intente de nuevo ⚠️ \n\n")

    if not owner_exists(store, owner_dui):
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ No existe un dueño registrado con ese DUI ⚠️\n"
            "          Debe registrarlo primero\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    name = console.ask("Ingrese nombre del paciente: ")
    species = console.ask("Ingrese especie: ")
    breed = console.ask("Ingrese raza: ")
    age = console.ask_int("Ingrese edad: ")

    if not validate_patient_fields(name, species, breed, owner_dui, age):
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ Todos los campos deben estar completos ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    duplicate = find_duplicate_patient(store, name, owner_dui)
    if duplicate is not None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ El paciente ya está registrado ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        console.say(duplicate.describe())
        return None

    patient = Patient(store.patients.next_id(), name, species, breed, age, owner_dui)
    store.patients.append(patient)

    console.say(
        "\n-------------------------------------\n"
        "✅ PACIENTE AGREGADO CORRECTAMENTE ✅\n"
        "-------------------------------------"
    )
    return patient


def search_patient(store: DataStore, console: Console) -> Optional[Patient]:
    """Ask for a patient id and show that patient; return it, or None if absent."""
    if not store.patients.exists():
        console.say(_CANNOT_OPEN)
        return None

    console.say(
        "===================================\n"
        "========= BUSCAR PACIENTE =========\n"
        "===================================\n"
    )
    wanted = console.ask_int("\nIngrese ID del paciente a buscar: ")

    patient = find_patient_by_id(store, wanted)
    if patient is None:
        console.say(_NOT_FOUND)
        return None
    console.say(patient.describe())
    return patient


def edit_patient(store: DataStore, console: Console) -> Optional[Patient]:
    """Ask for a patient id and replace that patient's data; return the edited patient."""
    if not store.patients.exists():
        console.say(_CANNOT_OPEN)
        return None

    console.say(
        "===================================\n"
        "========= EDITAR PACIENTE =========\n"
        "===================================\n"
    )
    wanted = console.ask_int("\nIngrese ID del paciente a editar: ")

    patient = find_patient_by_id(store, wanted)
    if patient is None:
        console.say(_NOT_FOUND)
        return None

    console.say(
        "\n======================================\n"
        "=========== DATOS ACTUALES ===========\n"
        "======================================\n"
    )
    console.say(patient.describe())
    console.say(
        "\n\n======================================\n"
        "============ DATOS NUEVOS ============\n"
        "======================================\n"
    )

    patient.name = console.ask("Ingrese nuevo nombre: ")
    patient.species = console.ask("Ingrese nueva especie: ")
    patient.breed = console.ask("Ingrese nueva raza: ")
    patient.age = console.ask_int("Ingrese nueva edad: ")
    patient.owner_dui = console.ask("Ingrese nuevo DUI del dueño: ")

    store.patients.replace(wanted, patient)

    console.say(
        "\n--------------------------------------\n"
        "✅ PACIENTE EDITADO CORRECTAMENTE ✅\n"
        "--------------------------------------"
    )
    return patient