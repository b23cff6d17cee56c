from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from carelink.domain.models import (
    LookupUnavailable,
    Patient,
    PatientFound,
    PatientLookupResult,
    PatientNotFound,
)

_PATIENT_PATH = "/api/patients/{patient_id}"


class HttpPatientLookup:
    """Patient lookup against the patient service's REST API.

    ``GET /api/patients/{id}`` answers the question:

    - 2xx with a JSON object for the requested patient (or an empty body) -> ``PatientFound``
    - 404 -> ``PatientNotFound``
    - anything else, including timeouts, connection errors and bodies that
      are not a patient object -> ``LookupUnavailable``
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        health_path: str = "/api/patients",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._health_path = health_path
        self._client = httpx.AsyncClient(timeout=timeout)

    async def resolve(self, patient_id: int, *, timeout: float | None = None) -> PatientLookupResult:
        url = self._base_url + _PATIENT_PATH.format(patient_id=patient_id)
        effective_timeout = timeout if timeout is not None else self._timeout

        try:
            resp = await self._client.get(url, timeout=effective_timeout)
        except httpx.TimeoutException as exc:
            return self._unavailable(
                patient_id, f"timed out after {effective_timeout}s ({type(exc).__name__})"
            )
        except Exception as exc:
            return self._unavailable(patient_id, f"request failed: {exc}")

        if resp.status_code == 404:
            logger.debug("Patient service reports patient {} does not exist", patient_id)
            return PatientNotFound(patient_id=patient_id)

        if not resp.is_success:
            return self._unavailable(patient_id, f"unexpected status {resp.status_code}")

        if not resp.content.strip():
            return PatientFound(patient_id=patient_id)

        try:
            body: Any = resp.json()
        except ValueError:
            return self._unavailable(patient_id, "response body is not JSON")

        if not isinstance(body, dict):
            return self._unavailable(patient_id, "response body is not a JSON object")

        try:
            patient = Patient.model_validate(body)
        except ValidationError as exc:
            return self._unavailable(
                patient_id, f"response body is not a patient ({exc.error_count()} errors)"
            )

        if patient.patient_id != patient_id:
            return self._unavailable(
                patient_id, f"response describes patient {patient.patient_id} instead"
            )

        logger.debug("Patient service confirmed patient {}", patient_id)
        return PatientFound(patient_id=patient_id, patient=patient)

    async def health_check(self) -> bool:
        """Probe ``health_path`` with HEAD so no response body is transferred."""
        try:
            resp = await self._client.head(self._base_url + self._health_path)
            resp.raise_for_status()
            return True
        except Exception as exc:
            logger.warning("Patient service health check failed: {}", exc)
            return False

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Patient lookup HTTP client closed")

    def _unavailable(self, patient_id: int, reason: str) -> LookupUnavailable:
        logger.warning("Patient lookup for {} unavailable: {}", patient_id, reason)
        return LookupUnavailable(patient_id=patient_id, reason=reason)
