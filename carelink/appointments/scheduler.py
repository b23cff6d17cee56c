import asyncio

from loguru import logger

from carelink.appointments import status
from carelink.appointments.ports import (
    AbstractAppointmentScheduler,
    AppointmentStoreProtocol,
    PatientLookupPort,
)
from carelink.domain.exceptions import AppointmentNotFoundError, PatientNotFoundError
from carelink.domain.models import (
    Appointment,
    AppointmentChanges,
    AppointmentDraft,
    AppointmentStatus,
    LookupUnavailable,
    PatientFound,
    PatientLookupResult,
)


class AppointmentScheduler(AbstractAppointmentScheduler):
    """Admits appointments only for patients the patient service confirms.

    The existence check happens once, at scheduling time. It is not a
    transaction: a patient deleted right after the check still ends up with
    the appointment, and two concurrent requests for the same patient or
    slot both succeed.

    ``PatientNotFoundError`` is raised both when the patient is missing and
    when the lookup is unavailable. Callers that need to offer a retry can
    check ``exc.lookup_unavailable``.
    """

    def __init__(
        self,
        lookup: PatientLookupPort,
        store: AppointmentStoreProtocol,
        *,
        lookup_timeout: float = 5.0,
        strict_transitions: bool = False,
        revalidate_on_update: bool = False,
    ) -> None:
        self._lookup = lookup
        self._store = store
        self._lookup_timeout = lookup_timeout
        self._strict_transitions = strict_transitions
        self._revalidate_on_update = revalidate_on_update

    async def schedule_appointment(self, draft: AppointmentDraft) -> Appointment:
        logger.info(
            "Scheduling appointment: patient_id={}, at={}",
            draft.patient_id,
            draft.appointment_date_time.isoformat(),
        )

        await self._confirm_patient(draft.patient_id)

        appointment = await self._store.add(
            draft.model_copy(update={"status": AppointmentStatus.SCHEDULED})
        )

        logger.info("Appointment scheduled: id={}", appointment.appointment_id)
        return appointment

    async def update_appointment(
        self, appointment_id: int, changes: AppointmentChanges
    ) -> Appointment:
        existing = await self.get_appointment(appointment_id)

        new_status = status.transition(
            existing.status,
            changes.status,
            appointment_id=appointment_id,
            strict=self._strict_transitions,
        )
        if self._revalidate_on_update:
            await self._confirm_patient(existing.patient_id)

        updated = existing.model_copy(
            update={
                "doctor_name": changes.doctor_name,
                "appointment_date_time": changes.appointment_date_time,
                "reason": changes.reason,
                "status": new_status,
            }
        )
        saved = await self._replace(updated)

        logger.info("Appointment updated: id={}, status={}", appointment_id, new_status.value)
        return saved

    async def cancel_appointment(self, appointment_id: int) -> Appointment:
        existing = await self.get_appointment(appointment_id)

        new_status = status.transition(
            existing.status,
            AppointmentStatus.CANCELLED,
            appointment_id=appointment_id,
            strict=self._strict_transitions,
        )
        saved = await self._replace(existing.model_copy(update={"status": new_status}))

        logger.info("Appointment cancelled: id={}", appointment_id)
        return saved

    async def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = await self._store.get(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    async def list_appointments(self) -> list[Appointment]:
        return await self._store.list_all()

    async def list_appointments_for_patient(self, patient_id: int) -> list[Appointment]:
        return await self._store.list_by_patient(patient_id)

    async def health_check(self) -> bool:
        return await self._lookup.health_check()

    async def close(self) -> None:
        await self._lookup.close()

    async def _resolve(self, patient_id: int) -> PatientLookupResult:
        """Call the lookup port, turning a hang or a stray exception into Unavailable."""
        timeout = self._lookup_timeout
        try:
            return await asyncio.wait_for(
                self._lookup.resolve(patient_id, timeout=timeout), timeout
            )
        except asyncio.TimeoutError:
            return LookupUnavailable(patient_id=patient_id, reason=f"timed out after {timeout}s")
        except Exception as exc:
            logger.exception("Patient lookup raised instead of returning a result")
            return LookupUnavailable(patient_id=patient_id, reason=f"lookup failed: {exc}")

    async def _confirm_patient(self, patient_id: int) -> None:
        result = await self._resolve(patient_id)
        if isinstance(result, PatientFound):
            return

        if isinstance(result, LookupUnavailable):
            logger.warning(
                "Rejecting appointment for patient {}: lookup unavailable ({})",
                patient_id,
                result.reason,
            )
            raise PatientNotFoundError(
                patient_id, "patient service unavailable", lookup_unavailable=True
            )

        logger.info("Rejecting appointment for patient {}: patient does not exist", patient_id)
        raise PatientNotFoundError(patient_id)

    async def _replace(self, appointment: Appointment) -> Appointment:
        saved = await self._store.replace(appointment.appointment_id, appointment)
        if saved is None:
            raise AppointmentNotFoundError(appointment.appointment_id)
        return saved
