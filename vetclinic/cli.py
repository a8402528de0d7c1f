"""Interactive menus of the clinic management system."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from vetclinic.appointments import add_appointment, edit_appointment, search_appointment
from vetclinic.console import INVALID_OPTION, Console
from vetclinic.owners import add_owner, edit_owner, search_owner
from vetclinic.patients import add_patient, edit_patient, search_patient
from vetclinic.reports import (
    report_appointments,
    report_appointments_by_date,
    report_appointments_by_patient,
    report_owners,
    report_patients,
    report_treatments,
)
from vetclinic.storage import DataStore
from vetclinic.treatments import add_treatment, edit_treatment, search_treatments_by_patient

Action = Callable[[DataStore, Console], object]

PROMPT = "Seleccione una opción: "

MAIN_MENU = (
    "=============================================\n"
    "  🐾 SISTEMA DE GESTIÓN - CLÍNICA VET.SV 🐾\n"
    "=============================================\n"
    "1. Gestión de Dueños\n"
    "2. Gestión de Pacientes\n"
    "3. Gestión de Tratamientos\n"
    "4. Gestión de Citas\n"
    "5. Reportes\n"
    "0. Salir\n"
    "---------------------------------------------\n"
)

GOODBYE = (
    "\n\n==========================\n"
    "⚠️ Saliendo del sistema ⚠️\n"
    "   🐾 ¡Hasta pronto! 🐾\n"
    "==========================\n\n\n"
)


@dataclass(frozen=True)
class _Menu:
    """A sub-menu: its text, its numbered actions and the follow-up question."""

    header: str
    actions: Mapping[int, Action]
    question: str
    follow_up_max: int


def _question(rule: str, subject: str) -> str:
    return (
        f"\n\n{rule}\n"
        f"¿Desea realizar otra gestión de {subject}?\n"
        "1. Sí\n"
        "2. No, volver al menú principal\n"
        f"{rule}\n"
    )


_OWNERS_MENU = _Menu(
    header=(
        "===============================\n"
        "====== GESTIÓN DE DUEÑOS ======\n"
        "===============================\n"
        "1. Agregar dueño\n"
        "2. Buscar dueño\n"
        "3. Editar dueño\n"
        "0. Volver al menú principal\n"
        "-------------------------------\n"
    ),
    actions={1: add_owner, 2: search_owner, 3: edit_owner},
    question=_question("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~", "Dueños"),
    follow_up_max=3,
)

_PATIENTS_MENU = _Menu(
    header=(
        "==============================\n"
        "==== GESTIÓN DE PACIENTES ====\n"
        "==============================\n"
        "1. Agregar paciente\n"
        "2. Buscar paciente\n"
        "3. Editar paciente\n"
        "0. Volver al menú principal\n"
        "----------------------------\n"
    ),
    actions={1: add_patient, 2: search_patient, 3: edit_patient},
    question=_question("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~", "Pacientes"),
    follow_up_max=3,
)

_TREATMENTS_MENU = _Menu(
    header=(
        "=================================\n"
        "==== GESTIÓN DE TRATAMIENTOS ====\n"
        "=================================\n"
        "1. Agregar tratamiento\n"
        "2. Buscar tratamiento\n"
        "3. Editar tratamiento\n"
        "0. Volver al menú principal\n"
        "---------------------------------\n"
    ),
    actions={1: add_treatment, 2: search_treatments_by_patient, 3: edit_treatment},
    question=_question("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~", "Tratamientos"),
    follow_up_max=3,
)

_APPOINTMENTS_MENU = _Menu(
    header=(
        "==============================\n"
        "====== GESTIÓN DE CITAS ======\n"
        "==============================\n"
        "1. Agendar cita\n"
        "2. Buscar cita\n"
        "3. Editar cita\n"
        "0. Volver al menú principal\n"
        "------------------------------\n"
    ),
    actions={1: add_appointment, 2: search_appointment, 3: edit_appointment},
    question=_question("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~", "Citas"),
    follow_up_max=3,
)

_REPORTS_MENU = _Menu(
    header=(
        "================================\n"
        "====== GESTIÓN DE REPORTES =====\n"
        "================================\n"
        "1. Dueños Registrados\n"
        "2. Mascotas Registradas\n"
        "3. Citas Programadas\n"
        "4. Citas por Paciente\n"
        "5. Citas por Rangos de Fechas\n"
        "6. Tratamientos Registrados\n"
        "0. Volver al menú principal\n"
        "--------------------------------\n"
    ),
    actions={
        1: report_owners,
        2: report_patients,
        3: report_appointments,
        4: report_appointments_by_patient,
        5: report_appointments_by_date,
        6: report_treatments,
    },
    question=_question("~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~", "Reportes"),
    # The follow-up question is also asked after the unused option 7.
    follow_up_max=7,
)

_MAIN_CHOICES: Mapping[int, _Menu] = {
    1: _OWNERS_MENU,
    2: _PATIENTS_MENU,
    3: _TREATMENTS_MENU,
    4: _APPOINTMENTS_MENU,
    5: _REPORTS_MENU,
}


def _run_menu(menu: _Menu, store: DataStore, console: Console) -> None:
    """Show a sub-menu until the user goes back to the main menu."""
    while True:
        console.say(menu.header)
        option = console.ask_int(PROMPT)

        action = menu.actions.get(option)
        if option == 0:
            console.clear()
            return
        if action is not None:
            console.clear()
            action(store, console)
        else:
            console.say(INVALID_OPTION)

        if 1 <= option <= menu.follow_up_max:
            console.say(menu.question)
            if console.ask_int(PROMPT) != 1:
                return
            console.clear()


def run(store: DataStore, console: Console) -> None:
    """Show the main menu until the user chooses to leave.

    Raises EOFError if input runs out before that.
    """
    while True:
        console.clear()
        console.say(MAIN_MENU)
        option = console.ask_int(PROMPT)

        if option == 0:
            console.clear()
            console.say(GOODBYE)
            return

        menu = _MAIN_CHOICES.get(option)
        if menu is None:
            console.say(INVALID_OPTION)
            continue
        console.clear()
        _run_menu(menu, store, console)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive clinic system; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="vetclinic", description="Veterinary clinic management system."
    )
    parser.add_argument(
        "--data-dir",
        default="data",
        help="directory holding the record files (default: data)",
    )
    args = parser.parse_args(argv)

    console = Console()
    try:
        run(DataStore(args.data_dir), console)
    except (EOFError, KeyboardInterrupt):
        console.say("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())