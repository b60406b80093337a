import pytest

import ropp


def test_response_defaults() -> None:
    response = ropp.Response()

    assert response.ok
    assert response.status_code == 0
    assert response.headers == {}
    assert response.cookies == {}
    assert len(response.header_list) == 0


def test_failed_response() -> None:
    response = ropp.Response.failed(ropp.TransportCode.TIMEOUT)

    assert not response.ok
    assert response.transport_status.code == ropp.TransportCode.TIMEOUT
    assert repr(response.transport_status) == "Failure(TIMEOUT)"
    assert repr(response) == "<Response [Failure(TIMEOUT)]>"


def test_response_is_immutable() -> None:
    headers = {"foo": "bar"}
    response = ropp.Response(status_code=200, headers=headers)
    headers["foo"] = "baz"

    assert response.headers == {"foo": "bar"}
    with pytest.raises(AttributeError):
        response.status_code = 500  # type: ignore[misc]
    with pytest.raises(TypeError):
        response.headers["foo"] = "qux"  # type: ignore[index]


@pytest.mark.parametrize(
    "status, checks",
    [
        (101, (True, False, False, False, False)),
        (204, (False, True, False, False, False)),
        (302, (False, False, True, False, False)),
        (429, (False, False, False, True, False)),
        (502, (False, False, False, False, True)),
    ],
)
def test_status_helpers(status: int, checks: tuple[bool, ...]) -> None:
    response = ropp.Response(status_code=status)

    assert (
        response.is_informational(),
        response.is_successful(),
        response.is_redirection(),
        response.is_client_error(),
        response.is_server_error(),
    ) == checks
    assert repr(response) == f"<Response [{status}]>"


@pytest.mark.parametrize(
    "is_json, response_content_type",
    [
        (False, ""),
        (False, "application/xml"),
        (True, "application/json"),
        (True, "application/problem+json"),
        (True, "application/json; charset=utf-8"),
    ],
)
def test_response_is_json(is_json: bool, response_content_type: str) -> None:
    response = ropp.Response(status_code=200, headers={"content-type": response_content_type})

    assert is_json == response.is_json


def test_json_decode_error() -> None:
    response = ropp.Response(status_code=200, body_bytes=b"\xff{")

    with pytest.raises(ropp.DecodeError):
        response.json()


def test_json_with_custom_loads() -> None:
    response = ropp.Response(status_code=200, body_bytes=b"[1, 2]")

    assert response.json(loads=lambda text: text.upper()) == "[1, 2]"


def test_errors_share_a_base() -> None:
    for error in (
        ropp.TransportInitError("x"),
        ropp.TransportIOError(ropp.TransportCode.UNKNOWN),
        ropp.DecodeError("x"),
        ropp.FieldMissingError("count"),
        ropp.ResponseStatusError(404, "Not Found"),
    ):
        assert isinstance(error, ropp.RoppError)

    assert str(ropp.ResponseStatusError(404, "Not Found")) == "Unexpected status 404 Not Found"
    assert str(ropp.ResponseStatusError(500, "")) == "Unexpected status 500"
