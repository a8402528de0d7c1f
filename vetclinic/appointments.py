"""Appointment scheduling, lookup and editing."""

from __future__ import annotations

import dataclasses
from typing import Optional

from vetclinic.console import Console
from vetclinic.entities import Appointment
from vetclinic.patients import find_patient_by_id
from vetclinic.storage import DataStore

_CANNOT_OPEN = (
    "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "❌ NO SE PUDO ABRIR EL ARCHIVO DE CITAS ❌\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
)


def validate_date(date: str) -> bool:
    """Whether ``date`` has the shape DD-MM-YYYY."""
    return len(date) == 10 and date[2] == "-" and date[5] == "-"


def validate_time(time: str) -> bool:
    """Whether ``time`` has the shape HH:MM."""
    return len(time) == 5 and time[2] == ":"


def add_appointment(store: DataStore, console: Console) -> Optional[Appointment]:
    """Ask for a new appointment and store it; return it, or None if refused."""
    console.say(
        "\n================================\n"
        "========= AGREGAR CITA =========\n"
        "================================\n"
    )
    patient_id = console.ask_int("Ingrese ID del paciente: ")

    if find_patient_by_id(store, patient_id) is None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ NO SE ENCONTRÓ PACIENTE CON ESE ID ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    while not validate_date(date := console.ask("Ingrese fecha (DD-MM-AAAA): ")):
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ FECHA INVÁLIDA - INTENTE DE NUEVO ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )

    while not validate_time(time := console.ask("Ingrese hora (HH:MM): ")):
        console.say(
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ HORA INVÁLIDA - INTENTE DE NUEVO ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )

    reason = console.ask("Ingrese motivo: ")

    appointment = Appointment(store.appointments.next_id(), patient_id, date, time, reason)
    store.appointments.append(appointment)

    console.say(
        "\n===================================\n"
        "✅ CITA REGISTRADA CORRECTAMENTE ✅\n"
        "===================================\n"
    )
    return appointment


def search_appointment(store: DataStore, console: Console) -> Optional[Appointment]:
    """Ask for an appointment id and show it; return it, or None if absent."""
    if not store.appointments.exists():
        console.say(_CANNOT_OPEN)
        return None

    console.say(
        "====================================\n"
        "=========== BUSCAR CITAS ===========\n"
        "====================================\n"
    )
    wanted = console.ask_int("Ingrese ID de la cita a buscar: ")

    appointment = store.appointments.find(lambda stored: stored.id == wanted)
    if appointment is None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~~~\n"
            "⚠️ CITA NO ENCONTRADA ⚠️\n"
            "~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None
    console.say(appointment.describe())
    return appointment


def edit_appointment(store: DataStore, console: Console) -> Optional[Appointment]:
    """Ask for an appointment id and replace its date, time and reason."""
    if not store.appointments.exists():
        console.say(_CANNOT_OPEN)
        return None

    console.say(
        "\n===================================\n"
        "=========== EDITAR CITA ===========\n"
        "===================================\n"
    )
    wanted = console.ask_int("Ingrese ID de la cita a editar: ")

    appointment = store.appointments.find(lambda stored: stored.id == wanted)
    if appointment is None:
        console.say(
            "\n~~~~~~~~~~~~~~~~~~~~~~~\n"
            "❌ CITA NO ENCONTRADA ❌\n"
            "~~~~~~~~~~~~~~~~~~~~~~~\n"
        )
        return None

    console.say(
        "\n======================================\n"
        "=========== DATOS ACTUALES ===========\n"
        "======================================\n"
    )
    console.say(appointment.describe())
    console.say(
        "\n\n======================================\n"
        "============ DATOS NUEVOS ============\n"
        "======================================\n"
    )

    while not validate_date(date := console.ask("Nueva fecha (DD-MM-AAAA): ")):
        pass
    while not validate_time(time := console.ask("Nueva hora (HH:MM): ")):
        pass
    reason = console.ask("Nuevo motivo: ")

    edited = dataclasses.replace(appointment, date=date, time=time, reason=reason)
    store.appointments.replace(wanted, edited)

    console.say(
        "\n====================================\n"
        "✅ CITA ACTUALIZADA CORRECTAMENTE ✅\n"
        "====================================\n"
    )
    return edited