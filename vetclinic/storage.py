"""File-backed collections of clinic records."""

from __future__ import annotations

import collections
import os
import tempfile
from pathlib import Path
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from vetclinic.entities import Appointment, Owner, Patient, Treatment

R = TypeVar("R")

OWNERS_FILE = "owners.bin"
PATIENTS_FILE = "patients.bin"
TREATMENTS_FILE = "treatments.bin"
APPOINTMENTS_FILE = "appointments.bin"


class RecordFile(Generic[R]):
    """A binary file holding a sequence of records of one type."""

    def __init__(self, path: Union[str, os.PathLike], record_type: type) -> None:
        self.path = Path(path)
        self.record_type = record_type

    def exists(self) -> bool:
        """Whether the backing file is present."""
        return self.path.is_file()

    def records(self) -> Iterator[R]:
        """Yield every stored record in file order; nothing if the file is missing."""
        try:
            stream = self.path.open("rb")
        except FileNotFoundError:
            return
        with stream:
            while (record := self.record_type.read(stream)) is not None:
                yield record

    def find(self, predicate: Callable[[R], bool]) -> Optional[R]:
        """Return the first record matching ``predicate``, or None."""
        return next((record for record in self.records() if predicate(record)), None)

    def append(self, record: R) -> None:
        """Add a record at the end of the file, creating it if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("ab") as stream:
            record.write(stream)

    def replace(self, record_id: int, record: R) -> None:
        """Overwrite the first record whose id is ``record_id``.

        Raises KeyError if no such record is stored.
        """
        records = list(self.records())
        position = next(
            (index for index, stored in enumerate(records) if stored.id == record_id),
            None,
        )
        if position is None:
            raise KeyError(record_id)
        records[position] = record

        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as stream:
                for stored in records:
                    stored.write(stream)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

    def next_id(self) -> int:
        """Id for a new record: one more than the last stored id, or 1."""
        last = collections.deque(self.records(), maxlen=1)
        return last[0].id + 1 if last else 1


class DataStore:
    """The clinic's four record files inside one data directory."""

    def __init__(self, data_dir: Union[str, os.PathLike] = "data") -> None:
        self.data_dir = Path(data_dir)
        self.owners: RecordFile[Owner] = RecordFile(self.data_dir / OWNERS_FILE, Owner)
        self.patients: RecordFile[Patient] = RecordFile(
            self.data_dir / PATIENTS_FILE, Patient
        )
        self.treatments: RecordFile[Treatment] = RecordFile(
            self.data_dir / TREATMENTS_FILE, Treatment
        )
        self.appointments: RecordFile[Appointment] = RecordFile(
            self.data_dir / APPOINTMENTS_FILE, Appointment
        )