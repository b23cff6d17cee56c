class CareLinkError(Exception):
    """Base exception for all patient and appointment errors."""


class PatientNotFoundError(CareLinkError):
    """Raised when a referenced patient cannot be confirmed to exist.

    Scheduling raises this both when the patient service answered that the
    patient does not exist and when it could not be reached at all. The two
    cases share one type so callers see a single rejection; the
    ``lookup_unavailable`` flag records which one actually happened, so a
    transient outage can still be told apart from a bad patient id in logs
    or by callers that choose to look.
    """

    def __init__(
        self,
        patient_id: int,
        reason: str | None = None,
        *,
        lookup_unavailable: bool = False,
    ) -> None:
        self.patient_id = patient_id
        self.reason = reason
        self.lookup_unavailable = lookup_unavailable
        message = f"Patient not found with id {patient_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AppointmentNotFoundError(CareLinkError):
    """Raised when an appointment id is unknown to the store."""

    def __init__(self, appointment_id: int) -> None:
        self.appointment_id = appointment_id
        super().__init__(f"Appointment not found with id {appointment_id}")


class DuplicateEmailError(CareLinkError):
    """Raised when creating a patient whose email is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("A patient with this email already exists")


class InvalidStatusTransitionError(CareLinkError):
    """Raised when strict transitions are on and a status change is illegal."""

    def __init__(self, appointment_id: int, current: str, target: str) -> None:
        self.appointment_id = appointment_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move appointment {appointment_id} from {current} to {target}"
        )
