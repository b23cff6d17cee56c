from typing import Callable

from loguru import logger

from carelink.appointments.adapters.http_lookup import HttpPatientLookup
from carelink.appointments.adapters.local_lookup import PatientServiceLookup
from carelink.appointments.adapters.memory import InMemoryAppointmentStore
from carelink.appointments.ports import AppointmentStoreProtocol, PatientLookupPort
from carelink.appointments.scheduler import AppointmentScheduler
from carelink.config import AppConfig, LookupAdapter
from carelink.patients.adapters.memory import InMemoryPatientStore
from carelink.patients.ports import AbstractPatientService
from carelink.patients.service import PatientService


def _build_http(config: AppConfig, patient_service: AbstractPatientService | None) -> PatientLookupPort:
    return HttpPatientLookup(
        config.patient_service.base_url,
        timeout=config.scheduler.lookup_timeout,
        health_path=config.patient_service.health_path,
    )


def _build_in_process(
    config: AppConfig, patient_service: AbstractPatientService | None
) -> PatientLookupPort:
    if patient_service is None:
        patient_service = PatientService(InMemoryPatientStore())
    return PatientServiceLookup(patient_service)


_BUILDERS: dict[
    LookupAdapter, Callable[[AppConfig, AbstractPatientService | None], PatientLookupPort]
] = {
    LookupAdapter.HTTP: _build_http,
    LookupAdapter.IN_PROCESS: _build_in_process,
}


def build_scheduler(
    config: AppConfig,
    *,
    patient_service: AbstractPatientService | None = None,
    store: AppointmentStoreProtocol | None = None,
) -> AppointmentScheduler:
    """Build the appointment scheduler with the lookup adapter named in config."""
    adapter = config.patient_service.adapter
    logger.info("Building appointment scheduler with lookup adapter: {}", adapter.value)
    lookup = _BUILDERS[adapter](config, patient_service)
    return AppointmentScheduler(
        lookup,
        store if store is not None else InMemoryAppointmentStore(),
        lookup_timeout=config.scheduler.lookup_timeout,
        strict_transitions=config.scheduler.strict_transitions,
        revalidate_on_update=config.scheduler.revalidate_on_update,
    )
