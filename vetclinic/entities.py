"""Clinic records (owners, patients, treatments, appointments) and their binary form.

Integers are stored as 4-byte little-endian values. Variable-length text is a
8-byte little-endian byte count followed by UTF-8 bytes. Treatment text fields
are fixed-size, NUL-padded byte arrays.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Optional

ENCODING = "utf-8"

_INT = struct.Struct("<i")
_SIZE = struct.Struct("<Q")


class RecordError(ValueError):
    """Raised when a stored record is truncated or malformed."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise RecordError(f"truncated record: expected {size} bytes, got {len(data)}")
    return data


def _read_leading_int(stream: BinaryIO) -> Optional[int]:
    """Read the first field of a record, or None at a clean end of stream."""
    data = stream.read(_INT.size)
    if not data:
        return None
    if len(data) != _INT.size:
        raise RecordError(f"truncated record: expected {_INT.size} bytes, got {len(data)}")
    return _INT.unpack(data)[0]


def _read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def _write_int(stream: BinaryIO, value: int) -> None:
    try:
        stream.write(_INT.pack(value))
    except struct.error as exc:
        raise RecordError(f"integer out of range: {value}") from exc


def _read_text(stream: BinaryIO) -> str:
    (length,) = _SIZE.unpack(_read_exact(stream, _SIZE.size))
    return _read_exact(stream, length).decode(ENCODING, errors="replace")


def _write_text(stream: BinaryIO, text: str) -> None:
    data = text.encode(ENCODING)
    stream.write(_SIZE.pack(len(data)))
    stream.write(data)


def _fit(text: str, size: int) -> str:
    """Cut text so that its encoding fits a NUL-terminated field of ``size`` bytes."""
    return text.encode(ENCODING)[: size - 1].decode(ENCODING, errors="ignore")


def _read_fixed(stream: BinaryIO, size: int) -> str:
    raw = _read_exact(stream, size)
    return raw.split(b"\0", 1)[0].decode(ENCODING, errors="replace")


def _write_fixed(stream: BinaryIO, text: str, size: int) -> None:
    stream.write(_fit(text, size).encode(ENCODING).ljust(size, b"\0"))


@dataclass
class Owner:
    """A pet owner, identified by a DUI."""

    id: int = 0
    name: str = ""
    address: str = ""
    dui: str = ""
    phone: str = ""

    def write(self, stream: BinaryIO) -> None:
        """Append this owner's binary form to ``stream``."""
        _write_int(stream, self.id)
        _write_text(stream, self.name)
        _write_text(stream, self.address)
        _write_text(stream, self.dui)
        _write_text(stream, self.phone)

    @classmethod
    def read(cls, stream: BinaryIO) -> Optional["Owner"]:
        """Read the next owner, or None if the stream is exhausted."""
        record_id = _read_leading_int(stream)
        if record_id is None:
            return None
        return cls(
            record_id,
            _read_text(stream),
            _read_text(stream),
            _read_text(stream),
            _read_text(stream),
        )

    def describe(self) -> str:
        """Text block shown when the owner is displayed."""
        return (
            "\n-------------------------------\n"
            "------- DATOS DEL DUEÑO -------\n"
            "-------------------------------\n"
            f"ID_Dueño: {self.id}\n"
            f"DUI: {self.dui}\n"
            f"Nombre: {self.name}\n"
            f"Dirección: {self.address}\n"
            f"Teléfono: {self.phone}\n"
            "-------------------------------"
        )


@dataclass
class Patient:
    """An animal under the clinic's care, linked to its owner's DUI."""

    id: int = 0
    name: str = ""
    species: str = ""
    breed: str = ""
    age: int = 0
    owner_dui: str = ""

    def write(self, stream: BinaryIO) -> None:
        """Append this patient's binary form to ``stream``."""
        _write_int(stream, self.id)
        _write_text(stream, self.name)
        _write_text(stream, self.species)
        _write_text(stream, self.breed)
        _write_int(stream, self.age)
        _write_text(stream, self.owner_dui)

    @classmethod
    def read(cls, stream: BinaryIO) -> Optional["Patient"]:
        """Read the next patient, or None if the stream is exhausted."""
        record_id = _read_leading_int(stream)
        if record_id is None:
            return None
        return cls(
            record_id,
            _read_text(stream),
            _read_text(stream),
            _read_text(stream),
            _read_int(stream),
            _read_text(stream),
        )

    def describe(self) -> str:
        """Text block shown when the patient is displayed."""
        return (
            "\n----------------------------\n"
            "---- DATOS DEL PACIENTE ----\n"
            "----------------------------\n"
            f"ID_Paciente: {self.id}\n"
            f"Nombre: {self.name}\n"
            f"Especie: {self.species}\n"
            f"Raza: {self.breed}\n"
            f"Edad: {self.age} años\n"
            f"DUI_Dueño: {self.owner_dui}\n"
            "----------------------------\n"
        )


@dataclass
class Treatment:
    """A medication prescribed to a patient; text fields have fixed capacity."""

    MEDICINE_SIZE: ClassVar[int] = 50
    DOSAGE_SIZE: ClassVar[int] = 50
    PERIOD_SIZE: ClassVar[int] = 30

    id: int = 0
    patient_id: int = 0
    medicine: str = ""
    dosage: str = ""
    period: str = ""

    def __post_init__(self) -> None:
        self.medicine = _fit(self.medicine, self.MEDICINE_SIZE)
        self.dosage = _fit(self.dosage, self.DOSAGE_SIZE)
        self.period = _fit(self.period, self.PERIOD_SIZE)

    def write(self, stream: BinaryIO) -> None:
        """Append this treatment's fixed-size binary form to ``stream``."""
        _write_int(stream, self.id)
        _write_int(stream, self.patient_id)
        _write_fixed(stream, self.medicine, self.MEDICINE_SIZE)
        _write_fixed(stream, self.dosage, self.DOSAGE_SIZE)
        _write_fixed(stream, self.period, self.PERIOD_SIZE)

    @classmethod
    def read(cls, stream: BinaryIO) -> Optional["Treatment"]:
        """Read the next treatment, or None if the stream is exhausted."""
        record_id = _read_leading_int(stream)
        if record_id is None:
            return None
        return cls(
            record_id,
            _read_int(stream),
            _read_fixed(stream, cls.MEDICINE_SIZE),
            _read_fixed(stream, cls.DOSAGE_SIZE),
            _read_fixed(stream, cls.PERIOD_SIZE),
        )

    def describe(self) -> str:
        """Text block shown when the treatment is displayed."""
        return (
            "\n-------------------------------\n"
            "--------- TRATAMIENTO ---------\n"
            "-------------------------------\n"
            f"ID_Tratamiento: {self.id}\n"
            f"ID_Paciente: {self.patient_id}\n"
            f"Medicamento: {self.medicine}\n"
            f"Dosis: {self.dosage}\n"
            f"Periodo: {self.period}\n"
            "-------------------------------\n"
        )


@dataclass
class Appointment:
    """A scheduled visit for a patient; date is DD-MM-YYYY, time is HH:MM."""

    id: int = 0
    patient_id: int = 0
    date: str = ""
    time: str = ""
    reason: str = ""

    def write(self, stream: BinaryIO) -> None:
        """Append this appointment's binary form to ``stream``."""
        _write_int(stream, self.id)
        _write_int(stream, self.patient_id)
        _write_text(stream, self.date)
        _write_text(stream, self.time)
        _write_text(stream, self.reason)

    @classmethod
    def read(cls, stream: BinaryIO) -> Optional["Appointment"]:
        """Read the next appointment, or None if the stream is exhausted."""
        record_id = _read_leading_int(stream)
        if record_id is None:
            return None
        return cls(
            record_id,
            _read_int(stream),
            _read_text(stream),
            _read_text(stream),
            _read_text(stream),
        )

    def describe(self) -> str:
        """Text block shown when the appointment is displayed."""
        return (
            "\n-----------------------------\n"
            "-------- CITA MÉDICA --------\n"
            "-----------------------------\n"
            f"ID Cita: {self.id}\n"
            f"ID Paciente: {self.patient_id}\n"
            f"Fecha: {self.date}\n"
            f"Hora: {self.time}\n"
            f"Motivo: {self.reason}\n"
            "-----------------------------\n"
        )