import pytest

from carelink.appointments.status import is_legal_transition, transition
from carelink.domain.exceptions import InvalidStatusTransitionError
from carelink.domain.models import AppointmentStatus

S = AppointmentStatus.SCHEDULED
X = AppointmentStatus.CANCELLED
C = AppointmentStatus.COMPLETED


class TestIsLegalTransition:
    @pytest.mark.parametrize(
        ("current", "target", "expected"),
        [
            (S, X, True),
            (S, C, True),
            (S, S, True),
            (X, X, True),
            (C, C, True),
            (X, S, False),
            (X, C, False),
            (C, S, False),
            (C, X, False),
        ],
        ids=[
            "cancel",
            "complete",
            "stay-scheduled",
            "stay-cancelled",
            "stay-completed",
            "reopen-cancelled",
            "complete-cancelled",
            "reopen-completed",
            "cancel-completed",
        ],
    )
    def test_table(
        self, current: AppointmentStatus, target: AppointmentStatus, expected: bool
    ) -> None:
        assert is_legal_transition(current, target) is expected


class TestTransition:
    def test_legal_returns_target(self) -> None:
        assert transition(S, X, appointment_id=1, strict=True) == X

    def test_lenient_applies_illegal_target(self) -> None:
        assert transition(X, S, appointment_id=1) == S

    def test_strict_raises_on_illegal(self) -> None:
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            transition(C, X, appointment_id=9, strict=True)

        assert exc_info.value.appointment_id == 9
        assert exc_info.value.current == "COMPLETED"
        assert exc_info.value.target == "CANCELLED"
