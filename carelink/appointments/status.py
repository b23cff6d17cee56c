"""Appointment status state machine.

Every path that changes an appointment's status goes through
:func:`transition`. The legal moves are SCHEDULED -> CANCELLED and
SCHEDULED -> COMPLETED; staying in the same state is always allowed.

With ``strict=False`` an illegal move (e.g. CANCELLED -> SCHEDULED) is still
applied and only logged, which keeps the historical behaviour of the generic
update and of cancel. With ``strict=True`` it raises
``InvalidStatusTransitionError`` instead.
"""

from loguru import logger

from carelink.domain.exceptions import InvalidStatusTransitionError
from carelink.domain.models import AppointmentStatus

LEGAL_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset(
        {AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED}
    ),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.COMPLETED: frozenset(),
}


def is_legal_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    return current == target or target in LEGAL_TRANSITIONS[current]


def transition(
    current: AppointmentStatus,
    target: AppointmentStatus,
    *,
    appointment_id: int,
    strict: bool = False,
) -> AppointmentStatus:
    """Return the status to store when moving ``current`` to ``target``."""
    if is_legal_transition(current, target):
        return target

    if strict:
        raise InvalidStatusTransitionError(appointment_id, current.value, target.value)

    logger.warning(
        "Unchecked status transition for appointment {}: {} -> {}",
        appointment_id,
        current.value,
        target.value,
    )
    return target
