import pytest

from carelink.appointments.adapters.fake import FakePatientLookup
from carelink.appointments.adapters.memory import InMemoryAppointmentStore
from carelink.appointments.scheduler import AppointmentScheduler
from carelink.patients.adapters.memory import InMemoryPatientStore
from carelink.patients.service import PatientService


@pytest.fixture
def fake_lookup() -> FakePatientLookup:
    return FakePatientLookup()


@pytest.fixture
def appointment_store() -> InMemoryAppointmentStore:
    return InMemoryAppointmentStore()


@pytest.fixture
def scheduler(
    fake_lookup: FakePatientLookup, appointment_store: InMemoryAppointmentStore
) -> AppointmentScheduler:
    return AppointmentScheduler(lookup=fake_lookup, store=appointment_store, lookup_timeout=1.0)


@pytest.fixture
def patient_store() -> InMemoryPatientStore:
    return InMemoryPatientStore()


@pytest.fixture
def patient_service(patient_store: InMemoryPatientStore) -> PatientService:
    return PatientService(store=patient_store)
