import io

import pytest

from vetclinic.console import Console


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_say_writes_verbatim():
    console, out = _console("")
    console.say("hola\n")
    console.say("mundo")
    assert out.getvalue() == "hola\nmundo"


def test_ask_returns_line_and_shows_prompt():
    console, out = _console("Ana López\n")
    answer = console.ask("Ingrese Nombre y Apellido: ")
    assert answer == "Ana López"
    assert out.getvalue() == "Ingrese Nombre y Apellido: "


def test_ask_strips_windows_line_ending():
    console, _ = _console("12345678-9\r\n")
    assert console.ask("DUI: ") == "12345678-9"


def test_ask_keeps_empty_line():
    console, _ = _console("\nsegunda\n")
    assert console.ask("a") == ""
    assert console.ask("b") == "segunda"


def test_ask_at_end_of_input_raises():
    console, _ = _console("")
    with pytest.raises(EOFError):
        console.ask("Seleccione una opción: ")


def test_ask_int_parses_with_spaces():
    console, _ = _console("  3  \n")
    assert console.ask_int("Seleccione una opción: ") == 3


def test_ask_int_negative():
    console, _ = _console("-2\n")
    assert console.ask_int("n: ") == -2


def test_ask_int_retries_until_number():
    console, out = _console("abc\n\n5\n")
    assert console.ask_int("Seleccione una opción: ") == 5
    text = out.getvalue()
    assert text.count("Seleccione una opción: ") == 3
    assert text.count("Opción inválida - Intente nuevamente") == 2


def test_ask_int_eof_raises():
    console, _ = _console("x\n")
    with pytest.raises(EOFError):
        console.ask_int("n: ")


def test_clear_writes_escape_sequence():
    console, out = _console("")
    console.clear()
    assert out.getvalue().startswith("\033[")
    assert "\n" not in out.getvalue()