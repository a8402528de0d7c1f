import pytest

from vetclinic.entities import Appointment, Owner, Patient, RecordError, Treatment
from vetclinic.storage import DataStore, RecordFile


def _owners():
    return [
        Owner(1, "Ana López", "Calle El Mirador #123", "12345678-9", "70112233"),
        Owner(2, "Carlos Pérez", "Av. Independencia #45", "87654321-0", "78901234"),
        Owner(3, "Laura Ramírez", "Col. Escalón, Casa 12", "10293847-1", "74561238"),
        Owner(4, "Jorge Torres", "Barrio San Miguel, Casa 78", "11223344-5", "76543210"),
        Owner(5, "María Méndez", "Residencial El Trebol, #98", "99887766-2", "73456789"),
        Owner(6, "Luis González", "Zona Rosa, Apartamento 3B", "22334455-6", "71234567"),
        Owner(7, "Lucía Martínez", "Santa Tecla, Casa 34", "33445566-7", "70123456"),
        Owner(8, "Raúl Gutiérrez", "Soyapango, Col. San José", "44556677-8", "79876543"),
        Owner(9, "Isabel Rivas", "San Marcos, Pasaje 2", "55667788-9", "75553311"),
        Owner(10, "José Castillo", "Mejicanos, Calle Central", "66778899-0", "79998877"),
    ]


def _patients(owners):
    rows = [
        ("Max", "Perro", "Labrador", 5, 0),
        ("Luna", "Gato", "Siamés", 3, 0),
        ("Rocky", "Perro", "Bulldog", 4, 1),
        ("Misha", "Gato", "Persa", 2, 1),
        ("Bobby", "Perro", "Pug", 6, 2),
        ("Kira", "Gato", "Bengala", 1, 2),
        ("Toby", "Perro", "Golden Retriever", 3, 3),
        ("Nala", "Gato", "Maine Coon", 5, 3),
        ("Chispa", "Perro", "Chihuahua", 7, 4),
        ("Milo", "Gato", "Angora", 4, 4),
        ("Zeus", "Perro", "Doberman", 2, 5),
        ("Cleo", "Gato", "Ragdoll", 6, 5),
    ]
    return [
        Patient(number, name, species, breed, age, owners[owner].dui)
        for number, (name, species, breed, age, owner) in enumerate(rows, start=1)
    ]


def _treatments(patients):
    rows = [
        ("Antibiótico A", "1 tableta cada 12h", "7 días"),
        ("Antiinflamatorio B", "2 gotas cada 8h", "5 días"),
        ("Vitaminas C", "1 cápsula diaria", "14 días"),
        ("Antiparasitario D", "1 ml cada 24h", "3 días"),
        ("Analgésico E", "1 tableta cada 8h", "4 días"),
        ("Antibiótico F", "1 ml cada 6h", "10 días"),
    ]
    return [
        Treatment(number, patient.id, *row)
        for number, (patient, row) in enumerate(zip(patients, rows), start=1)
    ]


def _appointments(patients):
    rows = [
        ("01-06-2025", "10:00", "Vacunación anual"),
        ("02-06-2025", "11:30", "Revisión de rutina"),
        ("03-06-2025", "09:00", "Consulta por alergias"),
        ("04-06-2025", "13:00", "Desparasitación"),
        ("05-06-2025", "14:30", "Control postoperatorio"),
        ("06-06-2025", "12:00", "Chequeo dental"),
    ]
    return [
        Appointment(number, patient.id, *row)
        for number, (patient, row) in enumerate(zip(patients, rows), start=1)
    ]


@pytest.fixture
def loaded(tmp_path):
    store = DataStore(tmp_path / "data")
    owners = _owners()
    patients = _patients(owners)
    treatments = _treatments(patients)
    appointments = _appointments(patients)
    for owner in owners:
        store.owners.append(owner)
    for patient in patients:
        store.patients.append(patient)
    for treatment in treatments:
        store.treatments.append(treatment)
    for appointment in appointments:
        store.appointments.append(appointment)
    return store, owners, patients, treatments, appointments


def test_loaded_data_reads_back(loaded):
    store, owners, patients, treatments, appointments = loaded
    assert list(store.owners.records()) == owners
    assert list(store.patients.records()) == patients
    assert list(store.treatments.records()) == treatments
    assert list(store.appointments.records()) == appointments


def test_file_names(loaded):
    store = loaded[0]
    assert store.owners.path.name == "owners.bin"
    assert store.patients.path.name == "patients.bin"
    assert store.treatments.path.name == "treatments.bin"
    assert store.appointments.path.name == "appointments.bin"


def test_next_ids(loaded):
    store = loaded[0]
    assert store.owners.next_id() == 11
    assert store.patients.next_id() == 13
    assert store.treatments.next_id() == 7
    assert store.appointments.next_id() == 7


def test_next_id_uses_last_record(tmp_path):
    records = RecordFile(tmp_path / "owners.bin", Owner)
    records.append(Owner(9, "A", "B", "11111111-1", "22222222"))
    records.append(Owner(4, "C", "D", "33333333-3", "44444444"))
    assert records.next_id() == 5


def test_find_by_dui(loaded):
    store = loaded[0]
    owner = store.owners.find(lambda o: o.dui == "99887766-2")
    assert owner.name == "María Méndez"
    assert store.owners.find(lambda o: o.dui == "00000000-0") is None


def test_missing_file(tmp_path):
    records = RecordFile(tmp_path / "nothing.bin", Patient)
    assert records.exists() is False
    assert list(records.records()) == []
    assert records.next_id() == 1
    assert records.find(lambda p: True) is None


def test_append_creates_file(tmp_path):
    records = RecordFile(tmp_path / "sub" / "appointments.bin", Appointment)
    appointment = Appointment(1, 2, "01-01-2025", "08:00", "Control")
    records.append(appointment)
    assert records.exists() is True
    assert list(records.records()) == [appointment]


def test_replace_changes_only_target(loaded):
    store, owners = loaded[0], loaded[1]
    updated = Owner(3, "Laura R. de Paz", "Nueva dirección larga, Casa 99", "10293847-1", "74561238")
    store.owners.replace(3, updated)
    stored = list(store.owners.records())
    assert stored[2] == updated
    assert stored[:2] == owners[:2]
    assert stored[3:] == owners[3:]


def test_replace_missing_raises(loaded):
    store = loaded[0]
    with pytest.raises(KeyError):
        store.patients.replace(99, Patient(99, "X", "Y", "Z", 1, "12345678-9"))
    assert len(list(store.patients.records())) == 12


def test_truncated_file_raises(tmp_path):
    records = RecordFile(tmp_path / "owners.bin", Owner)
    records.append(Owner(1, "Ana López", "Calle", "12345678-9", "70112233"))
    data = records.path.read_bytes()
    records.path.write_bytes(data[:-3])
    with pytest.raises(RecordError):
        list(records.records())