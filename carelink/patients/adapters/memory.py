import asyncio

from carelink.domain.models import Patient, PatientDetails


class InMemoryPatientStore:
    """Dict-backed implementation of PatientStoreProtocol.

    IDs start at 1 and are never reused, even after a delete. Email lookups
    are case-insensitive.
    """

    def __init__(self) -> None:
        self._patients: dict[int, Patient] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, details: PatientDetails) -> Patient:
        async with self._lock:
            patient = Patient(patient_id=self._next_id, **details.model_dump())
            self._patients[patient.patient_id] = patient
            self._next_id += 1
        return patient

    async def get(self, patient_id: int) -> Patient | None:
        return self._patients.get(patient_id)

    async def find_by_email(self, email: str) -> Patient | None:
        wanted = email.strip().lower()
        for patient in self._patients.values():
            if patient.email.strip().lower() == wanted:
                return patient
        return None

    async def replace(self, patient_id: int, patient: Patient) -> Patient | None:
        async with self._lock:
            if patient_id not in self._patients:
                return None
            self._patients[patient_id] = patient
        return patient

    async def delete(self, patient_id: int) -> bool:
        async with self._lock:
            return self._patients.pop(patient_id, None) is not None

    async def list_all(self) -> list[Patient]:
        return list(self._patients.values())
