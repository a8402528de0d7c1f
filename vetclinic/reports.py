"""Read-only listings of the clinic's stored records."""

from __future__ import annotations

from typing import List

from vetclinic.console import Console
from vetclinic.entities import Appointment, Owner, Patient, Treatment
from vetclinic.storage import DataStore


def comparable_date(date: str) -> str:
    """Turn DD-MM-YYYY into YYYYMMDD so dates order as strings; '' if malformed."""
    if len(date) != 10:
        return ""
    return date[6:10] + date[3:5] + date[0:2]


def appointments_in_range(store: DataStore, start: str, end: str) -> List[Appointment]:
    """Appointments dated between ``start`` and ``end`` inclusive, in file order.

    Both bounds are DD-MM-YYYY. Raises ValueError if either bound is malformed.
    """
    low = comparable_date(start)
    high = comparable_date(end)
    if not low or not high:
        raise ValueError(f"invalid date range: {start!r} to {end!r}")
    return [
        appointment
        for appointment in store.appointments.records()
        if low <= comparable_date(appointment.date) <= high
    ]


def report_owners(store: DataStore, console: Console) -> List[Owner]:
    """Show every registered owner; return them."""
    if not store.owners.exists():
        console.say("\n❌ No se pudo abrir el archivo de dueños\n")
        return []

    console.say(
        "\n====================================\n"
        "==== REPORTE DE TODOS LOS DUEÑOS ===\n"
        "====================================\n"
    )
    owners = list(store.owners.records())
    for owner in owners:
        console.say(owner.describe())
        console.say("\n")
    if not owners:
        console.say("⚠️ No hay registros de dueños\n")
    return owners


def report_patients(store: DataStore, console: Console) -> List[Patient]:
    """Show every registered patient; return them."""
    if not store.patients.exists():
        console.say("\n❌ No se pudo abrir el archivo de pacientes\n")
        return []

    console.say(
        "\n=======================================\n"
        "==== REPORTE DE TODOS LOS PACIENTES ===\n"
        "=======================================\n"
    )
    patients = list(store.patients.records())
    for patient in patients:
        console.say(patient.describe())
        console.say("\n")
    if not patients:
        console.say("⚠️ No hay registros de pacientes\n")
    return patients


def report_appointments(store: DataStore, console: Console) -> List[Appointment]:
    """Show every scheduled appointment; return them."""
    if not store.appointments.exists():
        console.say("❌ No se pudo abrir el archivo de citas\n")
        return []

    console.say(
        "\n====================================\n"
        "==== REPORTE DE TODAS LAS CITAS ===\n"
        "====================================\n"
    )
    appointments = list(store.appointments.records())
    for appointment in appointments:
        console.say(appointment.describe())
    if not appointments:
        console.say("⚠️ No hay citas registradas\n")
    return appointments


def report_appointments_by_patient(store: DataStore, console: Console) -> List[Appointment]:
    """Ask for a patient id and show that patient's appointments; return them."""
    patient_id = console.ask_int("Ingrese ID del paciente (mascota): ")

    if not store.appointments.exists():
        console.say("❌ No se pudo abrir el archivo de citas.\n")
        return []

    console.say(
        "\n========================================\n"
        "==== REPORTE DE CITAS POR PACIENTE ====\n"
        "========================================\n"
    )
    found = [
        appointment
        for appointment in store.appointments.records()
        if appointment.patient_id == patient_id
    ]
    for appointment in found:
        console.say(appointment.describe())
    if not found:
        console.say(f"⚠️ No hay citas para el paciente con ID {patient_id}.\n")
    return found


def report_appointments_by_date(store: DataStore, console: Console) -> List[Appointment]:
    """Ask for a date range and show the appointments inside it; return them."""
    start = console.ask("Ingrese fecha de inicio (DD-MM-AAAA): ")
    end = console.ask("Ingrese fecha de fin (DD-MM-AAAA): ")

    if not comparable_date(start) or not comparable_date(end):
        console.say("❌ Formato de fecha no válido.\n")
        return []

    if not store.appointments.exists():
        console.say("❌ No se pudo abrir el archivo de citas.\n")
        return []

    console.say(
        "\n=============================================\n"
        f"==== CITAS ENTRE {start} Y {end} ====\n"
        "=============================================\n"
    )
    found = appointments_in_range(store, start, end)
    for appointment in found:
        console.say(appointment.describe())
    if not found:
        console.say("⚠️ No hay citas en ese rango de fechas.\n")
    return found


def report_treatments(store: DataStore, console: Console) -> List[Treatment]:
    """Show every registered treatment; return them."""
    if not store.treatments.exists():
        console.say("\n❌ No se pudo abrir el archivo de tratamientos.\n")
        return []

    console.say(
        "\n===========================================\n"
        "==== REPORTE DE TODOS LOS TRATAMIENTOS ====\n"
        "===========================================\n"
    )
    treatments = list(store.treatments.records())
    for treatment in treatments:
        console.say(treatment.describe())
        console.say("\n")
    if not treatments:
        console.say("⚠️ No hay tratamientos registrados.\n")
    return treatments