from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LookupAdapter(Enum):
    HTTP = "http"
    IN_PROCESS = "in_process"


class PatientServiceConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PATIENT_SERVICE_", env_file=".env", extra="ignore")

    base_url: str = "http://localhost:4000"
    # Probed with HEAD, so only headers come back even for a list endpoint.
    health_path: str = "/api/patients"
    adapter: LookupAdapter = LookupAdapter.HTTP


class SchedulerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCHEDULER_", env_file=".env", extra="ignore")

    lookup_timeout: float = Field(default=5.0, gt=0)
    strict_transitions: bool = False
    revalidate_on_update: bool = False


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    patient_service: PatientServiceConfig = Field(default_factory=lambda: PatientServiceConfig())
    scheduler: SchedulerConfig = Field(default_factory=lambda: SchedulerConfig())
