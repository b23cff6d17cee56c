from loguru import logger

from carelink.domain.exceptions import DuplicateEmailError, PatientNotFoundError
from carelink.domain.models import Patient, PatientDetails
from carelink.patients.ports import AbstractPatientService, PatientStoreProtocol


class PatientService(AbstractPatientService):
    """Patient service that delegates to a PatientStoreProtocol and adds business rules."""

    def __init__(self, store: PatientStoreProtocol) -> None:
        self._store = store

    async def create_patient(self, details: PatientDetails) -> Patient:
        """Persist a new patient after checking the email is free."""
        if await self._store.find_by_email(details.email) is not None:
            logger.info("Rejected patient creation: email already registered")
            raise DuplicateEmailError(details.email)

        patient = await self._store.add(details)
        logger.info("Patient created: id={}", patient.patient_id)
        return patient

    async def update_patient(self, patient_id: int, details: PatientDetails) -> Patient:
        existing = await self.get_patient(patient_id)
        updated = existing.model_copy(update=details.model_dump())

        saved = await self._store.replace(patient_id, updated)
        if saved is None:
            raise PatientNotFoundError(patient_id)

        logger.info("Patient updated: id={}", patient_id)
        return saved

    async def delete_patient(self, patient_id: int) -> None:
        if not await self._store.delete(patient_id):
            raise PatientNotFoundError(patient_id)
        logger.info("Patient deleted: id={}", patient_id)

    async def get_patient(self, patient_id: int) -> Patient:
        patient = await self._store.get(patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id)
        return patient

    async def list_patients(self) -> list[Patient]:
        return await self._store.list_all()

    async def find_by_email(self, email: str) -> Patient | None:
        return await self._store.find_by_email(email)
