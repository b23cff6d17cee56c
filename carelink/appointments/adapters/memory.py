import asyncio

from carelink.domain.models import Appointment, AppointmentDraft, AppointmentStatus


class InMemoryAppointmentStore:
    """Dict-backed implementation of AppointmentStoreProtocol.

    IDs start at 1 and are assigned under a lock, so concurrent ``add``
    calls never share an ID. Listings keep insertion order.
    """

    def __init__(self) -> None:
        self._appointments: dict[int, Appointment] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, draft: AppointmentDraft) -> Appointment:
        async with self._lock:
            appointment = Appointment(
                appointment_id=self._next_id,
                patient_id=draft.patient_id,
                doctor_name=draft.doctor_name,
                appointment_date_time=draft.appointment_date_time,
                reason=draft.reason,
                status=draft.status or AppointmentStatus.SCHEDULED,
            )
            self._appointments[appointment.appointment_id] = appointment
            self._next_id += 1
        return appointment

    async def get(self, appointment_id: int) -> Appointment | None:
        return self._appointments.get(appointment_id)

    async def replace(self, appointment_id: int, appointment: Appointment) -> Appointment | None:
        async with self._lock:
            if appointment_id not in self._appointments:
                return None
            self._appointments[appointment_id] = appointment
        return appointment

    async def list_all(self) -> list[Appointment]:
        return list(self._appointments.values())

    async def list_by_patient(self, patient_id: int) -> list[Appointment]:
        return [a for a in self._appointments.values() if a.patient_id == patient_id]
