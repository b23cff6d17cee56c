import datetime as dt
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment. Values match the wire format."""

    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class _WireModel(BaseModel):
    """Frozen model that reads and writes the services' camelCase JSON."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PatientDetails(_WireModel):
    """The mutable attributes of a patient, used for create and update."""

    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    address: str | None = None
    date_of_birth: dt.date | None = None
    gender: str | None = None


class Patient(PatientDetails):
    """A patient record owned by the patient service."""

    patient_id: int = Field(alias="id")


# Blank or whitespace-only names are rejected; surrounding whitespace is stripped.
DoctorName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class AppointmentDraft(_WireModel):
    """A request to schedule an appointment. ``status`` is overwritten on scheduling."""

    patient_id: int = Field(gt=0)
    doctor_name: DoctorName
    appointment_date_time: dt.datetime
    reason: str | None = None
    status: AppointmentStatus | None = None


class AppointmentChanges(_WireModel):
    """Full replacement of an appointment's mutable fields."""

    doctor_name: DoctorName
    appointment_date_time: dt.datetime
    reason: str | None = None
    status: AppointmentStatus


class Appointment(_WireModel):
    """An appointment persisted by the appointment store."""

    appointment_id: int = Field(alias="id")
    patient_id: int
    doctor_name: str
    appointment_date_time: dt.datetime
    reason: str | None = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED


class PatientFound(BaseModel):
    """The patient service confirmed the patient exists."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["found"] = "found"
    patient_id: int
    patient: Patient | None = None


class PatientNotFound(BaseModel):
    """The patient service answered definitively that no such patient exists."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["not_found"] = "not_found"
    patient_id: int


class LookupUnavailable(BaseModel):
    """The lookup could not be completed (network, timeout, remote error, bad body)."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["unavailable"] = "unavailable"
    patient_id: int
    reason: str


PatientLookupResult = PatientFound | PatientNotFound | LookupUnavailable
