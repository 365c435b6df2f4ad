from __future__ import annotations

from datetime import date

import httpx
import pytest

from odb_client import (
    DecodeError,
    HTTPStatusError,
    NetworkError,
    OdbClient,
    RequestSpec,
    ValidationError,
    with_api_key,
    with_base_url,
    with_http_client,
)
from odb_client.models import GovernmentCompany, KoatuuRegions
from odb_client.params import PenaltiesParams, StartPageParams

GOVERNMENT_COMPANY = {"status": "ok", "data": {"count": 1, "items": [{"code": "31325005"}]}}


class _Recorder:
    def __init__(self, status: int = 200, body: object = None, content: bytes | None = None):
        self.requests: list[httpx.Request] = []
        self._status = status
        self._body = body
        self._content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status, content=self._content)
        return httpx.Response(self._status, json=self._body if self._body is not None else {})


def _client(handler, *options) -> OdbClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return OdbClient(with_http_client(http), *options)


def test_government_company_round_trip() -> None:
    rec = _Recorder(body=GOVERNMENT_COMPANY)
    client = _client(rec, with_api_key("K"))

    result = client.get_government_company("31325005")

    assert len(rec.requests) == 1
    req = rec.requests[0]
    assert req.method == "GET"
    assert req.url.path == "/api/v2/government-companies"
    assert dict(req.url.params) == {"apiKey": "K", "code": "31325005"}
    assert isinstance(result, GovernmentCompany)
    assert result.data.count == 1
    assert result.data.items[0].code == "31325005"


def test_missing_api_key_fails_without_request() -> None:
    rec = _Recorder(body=GOVERNMENT_COMPANY)
    client = _client(rec)

    with pytest.raises(ValidationError, match="apiKey"):
        client.get_government_company("31325005")

    assert rec.requests == []


@pytest.mark.parametrize("code", ["", "   ", None])
def test_empty_identifier_fails_without_request(code) -> None:
    rec = _Recorder()
    client = _client(rec, with_api_key("K"))

    with pytest.raises(ValidationError, match="code is not specified"):
        client.get_dpa(code)

    assert rec.requests == []


def test_identifier_checked_before_api_key() -> None:
    rec = _Recorder()
    client = _client(rec)

    with pytest.raises(ValidationError, match="id is not specified"):
        client.get_court_by_id("")

    assert rec.requests == []


def test_all_required_fixed_params_are_checked() -> None:
    rec = _Recorder()
    client = _client(rec, with_api_key("K"))

    with pytest.raises(ValidationError, match="last_name"):
        client.get_penalties("Іван", "", date(1990, 1, 1))

    assert rec.requests == []


def test_validation_error_is_value_error() -> None:
    client = _client(_Recorder())
    with pytest.raises(ValueError):
        client.get_statistics()


def test_keyless_endpoints_do_not_require_api_key() -> None:
    rec = _Recorder(body={"status": "ok", "data": [{"code": "0100000000", "name": "АР Крим"}]})
    client = _client(rec)

    result = client.get_koatuu_regions()

    assert isinstance(result, KoatuuRegions)
    assert result.data[0].name == "АР Крим"
    assert "apiKey" not in rec.requests[0].url.params


def test_keyless_endpoint_still_sends_configured_key() -> None:
    rec = _Recorder(body={})
    client = _client(rec, with_api_key("K"))

    client.get_institutions()

    assert rec.requests[0].url.params["apiKey"] == "K"


def test_non_200_raises_http_status_error() -> None:
    rec = _Recorder(status=404, content=b"not found")
    client = _client(rec, with_api_key("K"))

    with pytest.raises(HTTPStatusError) as exc:
        client.get_company("31325005")

    assert exc.value.status_code == 404
    assert exc.value.reason == "Not Found"
    assert exc.value.details == "not found"
    assert len(rec.requests) == 1


def test_non_200_with_json_body_is_still_an_error() -> None:
    rec = _Recorder(status=201, body=GOVERNMENT_COMPANY)
    client = _client(rec, with_api_key("K"))

    with pytest.raises(HTTPStatusError) as exc:
        client.get_government_company("31325005")

    assert exc.value.status_code == 201


def test_connection_failure_raises_network_error() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(_fail, with_api_key("K"))

    with pytest.raises(NetworkError) as exc:
        client.get_statistics()

    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_malformed_body_raises_decode_error() -> None:
    rec = _Recorder(content=b"<html>oops</html>")
    client = _client(rec, with_api_key("K"))

    with pytest.raises(DecodeError):
        client.get_government_company("31325005")


def test_list_endpoint_decodes_list() -> None:
    rec = _Recorder(body=[{"full_name": "ТОВ Приклад", "code": 31325005, "extra": True}])
    client = _client(rec, with_api_key("K"))

    companies = client.get_company("31325005")

    assert rec.requests[0].url.path == "/api/v2/company/31325005"
    assert companies[0].full_name == "ТОВ Приклад"
    assert companies[0].code == "31325005"
    assert companies[0].beneficiaries == []


def test_repeated_calls_are_independent() -> None:
    rec = _Recorder(body=GOVERNMENT_COMPANY)
    client = _client(rec, with_api_key("K"))

    first = client.get_government_company("31325005")
    second = client.get_government_company("31325005")

    assert first == second
    assert len(rec.requests) == 2
    assert str(rec.requests[0].url) == str(rec.requests[1].url)


def test_params_and_fixed_values_are_merged() -> None:
    rec = _Recorder(body={})
    client = _client(rec, with_api_key("K"))

    client.get_penalties("Іван", "Петренко", date(1990, 1, 2), PenaltiesParams(categories=["01"]))

    assert dict(rec.requests[0].url.params) == {
        "apiKey": "K",
        "birth_date": "1990-01-02",
        "categories[1]": "01",
        "first_name": "Іван",
        "last_name": "Петренко",
    }


def test_two_path_arguments() -> None:
    rec = _Recorder(body={})
    client = _client(rec, with_api_key("K"))

    client.get_realty_by_id("77", "12")

    assert rec.requests[0].url.path == "/api/v2/realty/77/12"


def test_pagination_params() -> None:
    rec = _Recorder(body={})
    client = _client(rec, with_api_key("K"))

    client.get_wanted("Іванов", StartPageParams(start=20, limit=10))

    params = rec.requests[0].url.params
    assert params["pib"] == "Іванов"
    assert params["start"] == "20"
    assert params["limit"] == "10"


def test_custom_base_url() -> None:
    rec = _Recorder(body={})
    client = _client(rec, with_api_key("K"), with_base_url("http://127.0.0.1:9000/v2/"))

    client.get_statistics()

    assert str(rec.requests[0].url) == "http://127.0.0.1:9000/v2/statistics?apiKey=K"


def test_do_with_custom_spec() -> None:
    rec = _Recorder(body={"answer": 42})
    client = _client(rec, with_api_key("K"))

    spec = RequestSpec("/custom/{}", dict, path_args=("x",), params={"apiKey": "caller"}, required={"id": "x"})
    result = client.do(spec)

    assert result == {"answer": 42}
    assert rec.requests[0].url.params.get_list("apiKey") == ["K"]


def test_close_leaves_caller_client_open() -> None:
    http = httpx.Client(transport=httpx.MockTransport(_Recorder()))
    with OdbClient(with_http_client(http), with_api_key("K")):
        pass
    assert not http.is_closed
    http.close()


def test_close_owned_client(monkeypatch) -> None:
    closed = []

    class _FakeHttpClient:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        def close(self) -> None:
            closed.append(True)

    monkeypatch.setattr("odb_client.transport.httpx.Client", _FakeHttpClient)

    client = OdbClient(with_api_key("K"))
    headers = client._t._client.kwargs["headers"]
    client.close()

    assert closed == [True]
    assert headers["User-Agent"].startswith("odb-client/")
