import asyncio

from carelink.domain.models import (
    Patient,
    PatientFound,
    PatientLookupResult,
    PatientNotFound,
)


class FakePatientLookup:
    """In-memory test double for the PatientLookupPort protocol.

    Add IDs to ``known_ids`` (or ``Patient`` objects to ``patients``) to
    control which patients exist. Set ``forced_result`` to return a fixed
    outcome, ``error`` to make ``resolve`` raise, or ``delay`` to make it
    sleep before answering (for timeout tests).

    After calls, inspect ``calls`` to see which IDs were resolved and with
    what timeout.
    """

    def __init__(self) -> None:
        self.known_ids: set[int] = set()
        self.patients: dict[int, Patient] = {}
        self.calls: list[tuple[int, float | None]] = []
        self.closed: bool = False
        self.healthy: bool = True

        self.forced_result: PatientLookupResult | None = None
        self.error: Exception | None = None
        self.delay: float = 0.0

    async def resolve(self, patient_id: int, *, timeout: float | None = None) -> PatientLookupResult:
        self.calls.append((patient_id, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        if self.forced_result is not None:
            return self.forced_result
        if patient_id in self.patients:
            return PatientFound(patient_id=patient_id, patient=self.patients[patient_id])
        if patient_id in self.known_ids:
            return PatientFound(patient_id=patient_id)
        return PatientNotFound(patient_id=patient_id)

    async def health_check(self) -> bool:
        return self.healthy

    async def close(self) -> None:
        self.closed = True
