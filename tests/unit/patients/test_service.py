import datetime as dt

import pytest

from carelink.domain.exceptions import DuplicateEmailError, PatientNotFoundError
from carelink.domain.models import PatientDetails
from carelink.patients.service import PatientService

# Fixtures (patient_store, patient_service) provided by tests/conftest.py


def _details(email: str = "ada@example.com", **overrides: object) -> PatientDetails:
    fields: dict[str, object] = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": email,
        "phone_number": "555-0100",
        "address": "12 St James's Square",
        "date_of_birth": dt.date(1990, 12, 10),
        "gender": "Female",
    }
    fields.update(overrides)
    return PatientDetails(**fields)  # type: ignore[arg-type]


class TestCreatePatient:
    @pytest.mark.asyncio
    async def test_assigns_id(self, patient_service: PatientService) -> None:
        patient = await patient_service.create_patient(_details())

        assert patient.patient_id == 1
        assert (patient.first_name, patient.last_name) == ("Ada", "Lovelace")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, patient_service: PatientService) -> None:
        await patient_service.create_patient(_details())

        with pytest.raises(DuplicateEmailError) as exc_info:
            await patient_service.create_patient(_details(first_name="Other"))

        assert exc_info.value.email == "ada@example.com"
        assert len(await patient_service.list_patients()) == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_is_case_insensitive(
        self, patient_service: PatientService
    ) -> None:
        await patient_service.create_patient(_details())

        with pytest.raises(DuplicateEmailError):
            await patient_service.create_patient(_details(email="ADA@example.com"))


class TestUpdatePatient:
    @pytest.mark.asyncio
    async def test_replaces_all_fields(self, patient_service: PatientService) -> None:
        created = await patient_service.create_patient(_details())

        updated = await patient_service.update_patient(
            created.patient_id,
            _details(email="countess@example.com", first_name="Augusta", address=None),
        )

        assert updated.patient_id == created.patient_id
        assert updated.first_name == "Augusta"
        assert updated.email == "countess@example.com"
        assert updated.address is None
        assert await patient_service.get_patient(created.patient_id) == updated

    @pytest.mark.asyncio
    async def test_does_not_recheck_email_uniqueness(
        self, patient_service: PatientService
    ) -> None:
        await patient_service.create_patient(_details())
        other = await patient_service.create_patient(_details(email="grace@example.com"))

        updated = await patient_service.update_patient(other.patient_id, _details())

        assert updated.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_unknown_patient_raises(self, patient_service: PatientService) -> None:
        with pytest.raises(PatientNotFoundError):
            await patient_service.update_patient(5, _details())


class TestDeletePatient:
    @pytest.mark.asyncio
    async def test_removes_patient(self, patient_service: PatientService) -> None:
        created = await patient_service.create_patient(_details())

        await patient_service.delete_patient(created.patient_id)

        with pytest.raises(PatientNotFoundError):
            await patient_service.get_patient(created.patient_id)

    @pytest.mark.asyncio
    async def test_unknown_patient_raises(self, patient_service: PatientService) -> None:
        with pytest.raises(PatientNotFoundError):
            await patient_service.delete_patient(5)

    @pytest.mark.asyncio
    async def test_ids_are_not_reused(self, patient_service: PatientService) -> None:
        first = await patient_service.create_patient(_details())
        await patient_service.delete_patient(first.patient_id)

        second = await patient_service.create_patient(_details())

        assert second.patient_id != first.patient_id


class TestReads:
    @pytest.mark.asyncio
    async def test_list_keeps_insertion_order(self, patient_service: PatientService) -> None:
        a = await patient_service.create_patient(_details("a@example.com"))
        b = await patient_service.create_patient(_details("b@example.com"))

        assert await patient_service.list_patients() == [a, b]

    @pytest.mark.asyncio
    async def test_find_by_email(self, patient_service: PatientService) -> None:
        created = await patient_service.create_patient(_details())

        assert await patient_service.find_by_email("ada@example.com") == created
        assert await patient_service.find_by_email("nobody@example.com") is None
