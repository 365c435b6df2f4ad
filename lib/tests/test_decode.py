import pydantic
import pytest

from odb_client.decode import decode
from odb_client.errors import DecodeError
from odb_client.models import Koatuu, Statistics, Wagedebt
from odb_client.models.companies import CompanyData


def test_unknown_fields_are_ignored() -> None:
    result = decode(b'{"code": "1", "debt": "10.5", "brand_new_field": {"x": 1}}', Wagedebt)
    assert result.code == "1"
    assert result.debt == "10.5"


def test_missing_and_null_fields_take_defaults() -> None:
    result = decode(b'{"code": null}', Wagedebt)
    assert result.code == ""
    assert result.active == 0
    assert result.name == ""


def test_numbers_are_accepted_for_string_fields() -> None:
    assert decode(b'{"code": 31325005}', Wagedebt).code == "31325005"


def test_aliased_keys() -> None:
    raw = b'{"COMPANY": {"name": "company", "used": 3, "limit": 10}, "customerId": 7}'
    result = decode(raw, Statistics)
    assert result.company.used == 3
    assert result.company.limit == 10
    assert result.customer_id == "7"
    assert result.court.limit == 0


def test_hyphenated_aliases() -> None:
    raw = b'{"status": "ok", "data": {"code": "8000000000", "items": {"city-and-district": [{"name": "x"}]}}}'
    result = decode(raw, Koatuu)
    assert result.data.items.city_and_district[0].name == "x"
    assert result.data.items.region_district == []


def test_list_target() -> None:
    result = decode(b'[{"code": "1"}, {"code": "2"}]', list[CompanyData])
    assert [c.code for c in result] == ["1", "2"]


@pytest.mark.parametrize("raw", [b"", b"not json", b'{"code": "1"', b"[]"])
def test_invalid_bodies_raise_decode_error(raw) -> None:
    with pytest.raises(DecodeError) as exc:
        decode(raw, Wagedebt)
    assert isinstance(exc.value.__cause__, pydantic.ValidationError)


def test_type_mismatch_raises_decode_error() -> None:
    with pytest.raises(DecodeError, match="list"):
        decode(b'{"code": "1"}', list[CompanyData])
