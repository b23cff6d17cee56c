import asyncio

from loguru import logger

from carelink.domain.exceptions import PatientNotFoundError
from carelink.domain.models import (
    LookupUnavailable,
    PatientFound,
    PatientLookupResult,
    PatientNotFound,
)
from carelink.patients.ports import AbstractPatientService


class PatientServiceLookup:
    """Patient lookup that calls a co-located PatientService directly."""

    def __init__(self, service: AbstractPatientService) -> None:
        self._service = service

    async def resolve(self, patient_id: int, *, timeout: float | None = None) -> PatientLookupResult:
        try:
            patient = await asyncio.wait_for(self._service.get_patient(patient_id), timeout)
        except PatientNotFoundError:
            return PatientNotFound(patient_id=patient_id)
        except asyncio.TimeoutError:
            reason = f"timed out after {timeout}s"
            logger.warning("Patient lookup for {} unavailable: {}", patient_id, reason)
            return LookupUnavailable(patient_id=patient_id, reason=reason)
        except Exception as exc:
            logger.warning("Patient lookup for {} unavailable: {}", patient_id, exc)
            return LookupUnavailable(patient_id=patient_id, reason=str(exc))

        return PatientFound(patient_id=patient_id, patient=patient)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass
