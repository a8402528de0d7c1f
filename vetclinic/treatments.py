"""Treatment registration, lookup by patient and editing."""

from __future__ import annotations

import dataclasses
from typing import List, Optional

from vetclinic.console import Console
from vetclinic.entities import Treatment
from vetclinic.patients import find_patient_by_id
from vetclinic.storage import DataStore

_CANNOT_OPEN = (
    "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "❌ NO SE PUDO ABRIR EL ARCHIVO DE TRATAMIENTOS ❌\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
)


def treatments_for_patient(store: DataStore, patient_id: int) -> List[Treatment]:
    """Every stored treatment prescribed to ``patient_id``, in file order."""
    return [
        treatment
        for treatment in store.treatments.records()
        if treatment.patient_id == patient_id
    ]


def add_treatment(store: DataStore, console: Console) -> Optional[Treatment]:
    """Ask for a new treatment and store it once confirmed; return it, or None."""
    console.say(
        "\n=====================================\n"
        "========= AGREGAR TRATAMIENTO =======\n"
        "=====================================\n"
    )
    patient_id = console.ask_int("Ingrese ID del paciente: ")

    patient = find_patient_by_id(store, patient_id)
    if patient is None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ NO SE ENCONTRÓ PACIENTE CON ESE ID ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~"
        )
        return None
    console.say(patient.describe())

    console.say(
        "\n-------------------------------------------\n"
        "---------- DATOS DEL TRATAMIENTO ----------\n"
        "-------------------------------------------\n"
    )
    medicine = console.ask("\nIngrese Nombre del Medicamento: ")
    dosage = console.ask("Ingrese Dosis (ej: 1 tableta cada 8h): ")
    period = console.ask("Ingrese Período (ej. 7 días): ")

    console.say("\n-----------------------------------------\n")
    answer = console.ask("¿Desea guardar este tratamiento? (s/n): ").strip()
    if answer[:1].lower() != "s":
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "❌ REGISTRO CANCELADO POR EL USUARIO ❌\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    treatment = Treatment(store.treatments.next_id(), patient_id, medicine, dosage, period)
    store.treatments.append(treatment)

    console.say(
        "\n==========================================\n"
        "✅ TRATAMIENTO REGISTRADO CORRECTAMENTE ✅\n"
        "==========================================\n"
    )
    return treatment


def search_treatments_by_patient(store: DataStore, console: Console) -> List[Treatment]:
    """Ask for a patient id and show that patient's treatments; return them."""
    if not store.treatments.exists():
        console.say(_CANNOT_OPEN)
        return []

    console.say(
        "\n===================================================\n"
        "================ BUSCAR TRATAMIENTOS ==============\n"
        "===================================================\n"
    )
    patient_id = console.ask_int("Ingrese ID del paciente para buscar tratamientos: ")

    found = treatments_for_patient(store, patient_id)
    for treatment in found:
        console.say(treatment.describe())

    if not found:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ NO SE ENCONTRARON TRATAMIENTOS PARA ESTE PACIENTE ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
    return found


def edit_treatment(store: DataStore, console: Console) -> Optional[Treatment]:
    """Ask for a treatment id and replace its data; return the edited treatment."""
    if not store.treatments.exists():
        console.say(_CANNOT_OPEN)
        return None

    console.say(
        "\n===================================================\n"
        "================ EDITAR TRATAMIENTOS ==============\n"
        "===================================================\n"
    )
    wanted = console.ask_int("Ingrese ID del tratamiento a editar: ")

    treatment = store.treatments.find(lambda stored: stored.id == wanted)
    if treatment is None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "❌ TRATAMIENTO NO ENCONTRADO ❌\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    console.say("Tratamiento encontrado:\n")
    console.say(treatment.describe())

    medicine = console.ask("\nIngrese Nombre del Medicamento: ")
    dosage = console.ask("Ingrese Dosis (ej: 1 tableta cada 8h): ")
    period = console.ask("Ingrese Período (ej. 7 días): ")

    if not (medicine and dosage and period):
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ TODOS LOS CAMPOS DEBEN ESTAR COMPLETOS ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    edited = dataclasses.replace(treatment, medicine=medicine, dosage=dosage, period=period)
    store.treatments.replace(wanted, edited)

    console.say(
        "\n======================================\n"
        "✅ TRATAMIENTO EDITADO CORRECTAMENTE ✅\n"
        "======================================\n"
    )
    return edited