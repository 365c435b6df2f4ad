from datetime import date

import pydantic
import pytest

from odb_client.params import (
    ChangesParams,
    CourtParams,
    JudgmentCode,
    PenaltiesByCodeParams,
    Region,
    RegistrationsParams,
    ScheduleParams,
    VatParams,
)


def test_unset_fields_are_not_sent() -> None:
    assert CourtParams().to_query() == {}


def test_enums_and_dates_are_serialised() -> None:
    params = CourtParams(judgment_code=JudgmentCode.CRIMINAL, date_from=date(2024, 1, 2), limit=10)
    assert params.to_query() == {"judgment_code": "2", "date_from": "2024-01-02", "limit": "10"}


def test_aliases_are_used_on_the_wire() -> None:
    assert ChangesParams(from_=date(2023, 5, 1)).to_query() == {"from": "2023-05-01"}
    assert VatParams(vat_number="123").to_query() == {"vatNumber": "123"}
    query = ScheduleParams(date_=date(2024, 3, 4), court_id="9", region_id=Region.KYIV).to_query()
    assert query == {"date": "2024-03-04", "courtId": "9", "region_id": "26"}


def test_booleans_are_sent_as_digits() -> None:
    assert RegistrationsParams(is_phone=True, is_email=False).to_query() == {"is_phone": "1", "is_email": "0"}


def test_lists_are_expanded_with_indices() -> None:
    query = PenaltiesByCodeParams(categories=["01", "03"]).to_query()
    assert query == {"categories[1]": "01", "categories[2]": "03"}


def test_empty_string_is_kept() -> None:
    assert CourtParams(text="").to_query() == {"text": ""}


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        CourtParams(unknown="x")
