from abc import ABC, abstractmethod
from typing import Protocol

from carelink.domain.models import Patient, PatientDetails


class AbstractPatientService(ABC):
    """Abstract base class for patient record operations."""

    @abstractmethod
    async def create_patient(self, details: PatientDetails) -> Patient:
        """Register a new patient.

        Args:
            details: The patient's attributes.

        Returns:
            The persisted patient with its assigned ID.

        Raises:
            DuplicateEmailError: If another patient already uses the email.
        """

    @abstractmethod
    async def update_patient(self, patient_id: int, details: PatientDetails) -> Patient:
        """Replace every attribute of an existing patient.

        Email uniqueness is not re-checked on update.

        Raises:
            PatientNotFoundError: If the patient does not exist.
        """

    @abstractmethod
    async def delete_patient(self, patient_id: int) -> None:
        """Remove a patient. Existing appointments are left untouched.

        Raises:
            PatientNotFoundError: If the patient does not exist.
        """

    @abstractmethod
    async def get_patient(self, patient_id: int) -> Patient:
        """Fetch a patient by ID.

        Raises:
            PatientNotFoundError: If the patient does not exist.
        """

    @abstractmethod
    async def list_patients(self) -> list[Patient]:
        """Return every patient in insertion order."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Patient | None:
        """Return the patient registered under ``email``, if any."""


class PatientStoreProtocol(Protocol):
    """Persistence interface for patient records."""

    async def add(self, details: PatientDetails) -> Patient:
        """Persist a new patient and assign its ID."""
        ...

    async def get(self, patient_id: int) -> Patient | None:
        """Fetch a patient, or None if absent."""
        ...

    async def find_by_email(self, email: str) -> Patient | None:
        """Fetch a patient by email, or None if absent."""
        ...

    async def replace(self, patient_id: int, patient: Patient) -> Patient | None:
        """Overwrite a stored patient. Returns None if absent."""
        ...

    async def delete(self, patient_id: int) -> bool:
        """Remove a patient. Returns False if absent."""
        ...

    async def list_all(self) -> list[Patient]:
        """Return every patient."""
        ...
