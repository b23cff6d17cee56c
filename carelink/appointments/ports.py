from abc import ABC, abstractmethod
from typing import Protocol

from carelink.domain.models import (
    Appointment,
    AppointmentChanges,
    AppointmentDraft,
    PatientLookupResult,
)


class AbstractAppointmentScheduler(ABC):
    """Abstract base class for appointment scheduling operations."""

    @abstractmethod
    async def schedule_appointment(self, draft: AppointmentDraft) -> Appointment:
        """Schedule an appointment after confirming the patient exists.

        Args:
            draft: The appointment details. Its ``status`` is ignored.

        Returns:
            The persisted appointment, with a fresh ID and status SCHEDULED.

        Raises:
            PatientNotFoundError: If the patient could not be confirmed,
                either because it does not exist or because the patient
                service was unreachable. Nothing is persisted in either case.
        """

    @abstractmethod
    async def update_appointment(
        self, appointment_id: int, changes: AppointmentChanges
    ) -> Appointment:
        """Replace the doctor, date/time, reason and status of an appointment.

        Raises:
            AppointmentNotFoundError: If the appointment does not exist.
            InvalidStatusTransitionError: If strict transitions are enabled
                and the status change is illegal.
            PatientNotFoundError: If re-validation on update is enabled and
                the patient can no longer be confirmed.
        """

    @abstractmethod
    async def cancel_appointment(self, appointment_id: int) -> Appointment:
        """Move an appointment to CANCELLED.

        Raises:
            AppointmentNotFoundError: If the appointment does not exist.
            InvalidStatusTransitionError: If strict transitions are enabled
                and the appointment is already COMPLETED.
        """

    @abstractmethod
    async def get_appointment(self, appointment_id: int) -> Appointment:
        """Fetch an appointment by ID.

        Raises:
            AppointmentNotFoundError: If the appointment does not exist.
        """

    @abstractmethod
    async def list_appointments(self) -> list[Appointment]:
        """Return every appointment. Empty list if there are none."""

    @abstractmethod
    async def list_appointments_for_patient(self, patient_id: int) -> list[Appointment]:
        """Return the appointments referencing ``patient_id``. Empty list if none."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the patient service is reachable.

        Returns:
            True if the lookup dependency is healthy, False otherwise.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by this scheduler."""


class PatientLookupPort(Protocol):
    """Read-only view of the patient service used before scheduling.

    ``resolve`` never raises for remote failures: anything that prevents a
    definitive answer comes back as ``LookupUnavailable``.
    """

    async def resolve(self, patient_id: int, *, timeout: float | None = None) -> PatientLookupResult:
        """Resolve a patient ID to found, not found, or unavailable."""
        ...

    async def health_check(self) -> bool:
        """Check if the patient service is reachable."""
        ...

    async def close(self) -> None:
        """Release resources."""
        ...


class AppointmentStoreProtocol(Protocol):
    """Persistence interface for appointment records."""

    async def add(self, draft: AppointmentDraft) -> Appointment:
        """Persist a new appointment and assign its ID."""
        ...

    async def get(self, appointment_id: int) -> Appointment | None:
        """Fetch an appointment, or None if absent."""
        ...

    async def replace(self, appointment_id: int, appointment: Appointment) -> Appointment | None:
        """Overwrite a stored appointment. Returns None if absent."""
        ...

    async def list_all(self) -> list[Appointment]:
        """Return every appointment."""
        ...

    async def list_by_patient(self, patient_id: int) -> list[Appointment]:
        """Return the appointments referencing ``patient_id``."""
        ...
