# vetclinic

`vetclinic` is a menu-driven console program for the front desk of a small
veterinary clinic. It keeps four kinds of records:

- **Owners**: DUI (`########-#`), name, address and an eight-digit phone number.
- **Patients**: the animals. Each has a name, species, breed and age, and is
  linked to an owner through the owner's DUI.
- **Treatments**: medicine, dosage and period, linked to a patient by ID.
- **Appointments**: date (`DD-MM-AAAA`), time (`HH:MM`) and reason, linked to a
  patient by ID.

It also produces reports. These list every owner, every patient, every
appointment, the appointments for one patient, the appointments between two
dates (both dates included), and every treatment.

The prompts and messages are in Spanish.

## Installation

```
pip install .
```

## Running

```
vetclinic
vetclinic --data-dir /path/to/records
```

`--data-dir` selects the directory that holds the record files. The default
is `data`, relative to the directory you start the program from.

The main menu offers these options:

```
1. Gestión de Dueños
2. Gestión de Pacientes
3. Gestión de Tratamientos
4. Gestión de Citas
5. Reportes
0. Salir
```

Each management menu lets you add, search for and edit records. After each
action, the program asks whether you want another action in the same section.
If you type something that is not a number where one is expected, the program
asks again. The program ends when you choose `0`, when input runs out, or when
you press Ctrl-C.

## Rules the program enforces

- **New owners.** The DUI must have the form `########-#` and must not be
  registered already. The phone number must be exactly eight digits. The
  program keeps asking until each value has the right form.
- **New patients.** The owner must already be registered. Every field must be
  filled in and the age must be greater than zero. An owner cannot have two
  patients with the same name.
- **Treatments and appointments.** They can only be added for an existing
  patient ID. The program saves a new treatment only after you confirm with
  `s`.
- **Appointment dates and times.** A date must have the shape `DD-MM-AAAA` and
  a time the shape `HH:MM`, both when adding and when editing.
- **Edited treatments.** The medicine, dosage and period must all be filled in.
- **Record IDs.** They are given out in sequence, one past the ID of the last
  record stored, starting at 1.

Editing an owner or a patient replaces its fields with whatever is typed. The
DUI and phone format checks apply only when an owner is added.

Treatment text fields have a fixed capacity. The medicine and dosage hold up to
49 bytes of UTF-8 text and the period up to 29 bytes. Longer text is cut.

## Data files

Each kind of record is kept in its own binary file inside the data directory:
`owners.bin`, `patients.bin`, `treatments.bin` and `appointments.bin`. The
directory is created when the first record is added. New records are appended
to the end of the file. When a record is edited, the whole file is written to a
temporary file, which then takes the original's place.

In these files, integers are 4-byte little-endian values. Text is stored as an
8-byte little-endian length followed by UTF-8 bytes. Treatment text fields are
stored as fixed-size, NUL-padded byte arrays instead.

## Using it from Python

The building blocks can be imported:

- `vetclinic.entities`: the `Owner`, `Patient`, `Treatment` and `Appointment`
  dataclasses.
  - `write(stream)` writes a record to a binary stream.
  - `read(stream)` is a classmethod. It returns the next record, or `None` at
    the end of the stream.
  - `describe()` gives the text shown on screen.
  - A truncated record raises `RecordError`.
- `vetclinic.storage`:
  - `RecordFile` handles one file. `records()` lists its records and `find()`
    looks one up. `append()` adds a record, and `replace()` swaps one by ID,
    raising `KeyError` if the ID is not stored. `next_id()` gives the next free
    ID and `exists()` tells whether the file is there.
  - `DataStore` holds the four files of one data directory as `owners`,
    `patients`, `treatments` and `appointments`.
- `vetclinic.console`: `Console`, which reads answers from one text stream and
  writes to another. It defaults to standard input and output.
- Validators, lookups and interactive actions behind each menu:
  - `vetclinic.owners`: `validate_dui`, `validate_phone`, `find_owner_by_dui`.
  - `vetclinic.patients`: `validate_patient_fields`, `owner_exists`,
    `find_duplicate_patient`, `find_patient_by_id`.
  - `vetclinic.treatments`: `treatments_for_patient`.
  - `vetclinic.appointments`: `validate_date`, `validate_time`.
  - `vetclinic.reports`: `comparable_date`, `appointments_in_range`.
- `vetclinic.cli`: `run(store, console)` drives the menus, and `main(argv)` is
  the command entry point.

Example:

```python
from vetclinic.storage import DataStore
from vetclinic.reports import appointments_in_range

store = DataStore("data")
for appointment in appointments_in_range(store, "01-06-2025", "30-06-2025"):
    print(appointment.describe())
```

## What it does not do

- There is no way to delete records.
- Reports can be shown on screen only. They cannot be exported.
- Records of different kinds are not checked against each other once stored.
  For example, editing a patient does not verify that the new owner DUI is
  registered.

## Tests

```
pip install .[test]
pytest
```