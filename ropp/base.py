import collections.abc
import enum
import json
import re
import types
from typing import Any, NamedTuple

import multidict
import yarl

EMPTY_HEADERS: collections.abc.Mapping[str, str] = types.MappingProxyType({})
EMPTY_HEADER_LIST = multidict.MultiDictProxy[str](multidict.MultiDict[str]())


class Method:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Header:
    CONTENT_TYPE = "content-type"
    COOKIE = "Cookie"
    REFERER = "Referer"
    SET_COOKIE = "set-cookie"


json_re = re.compile(r"^application/(?:[\w.+-]+?\+)?json", re.RegexFlag.IGNORECASE)

PathParameters = collections.abc.Mapping[str, Any]
QueryParameters = collections.abc.Mapping[str, Any]


class RoppError(Exception):
    """Base class for all errors raised by ropp"""


class TransportInitError(RoppError):
    """Engine session could not be created"""


class TransportIOError(RoppError):
    """Network, TLS or engine-level failure"""

    def __init__(self, code: "TransportCode", message: str | None = None) -> None:
        super().__init__(message or f"Transport failed: {code.name}")
        self.code = code


class DecodeError(RoppError):
    """Body is not a valid JSON document"""


class FieldMissingError(RoppError):
    """Field is absent from the document or has an unexpected shape"""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Field {field!r} is missing")
        self.field = field


class ResponseStatusError(RoppError):
    """Service replied with a non-2xx status"""

    def __init__(self, status_code: int, status_message: str) -> None:
        super().__init__(f"Unexpected status {status_code} {status_message}".rstrip())
        self.status_code = status_code
        self.status_message = status_message


class TransportCode(enum.IntEnum):
    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    URL_MALFORMED = 2
    CONNECT_ERROR = 3
    TIMEOUT = 4
    PROTOCOL_ERROR = 5
    SEND_ERROR = 6
    RECV_ERROR = 7
    NETWORK_ERROR = 8
    TOO_MANY_REDIRECTS = 9
    UNKNOWN = 99


class TransportStatus(NamedTuple):
    code: TransportCode

    @property
    def succeeded(self) -> bool:
        return self.code == TransportCode.OK

    def __repr__(self) -> str:
        return "Ok" if self.succeeded else f"Failure({self.code.name})"


TRANSPORT_OK = TransportStatus(TransportCode.OK)


class Response:
    """Outcome of one dispatch.

    When the transport did not complete, only ``transport_status`` is meaningful:
    ``status_code`` is 0 and every other field is empty.
    """

    __slots__ = (
        "__transport_status",
        "__status_code",
        "__status_message",
        "__body_bytes",
        "__body_text",
        "__raw_header_bytes",
        "__headers",
        "__header_list",
        "__cookies",
    )

    def __init__(
        self,
        *,
        transport_status: TransportStatus = TRANSPORT_OK,
        status_code: int = 0,
        status_message: str = "",
        body_bytes: bytes = b"",
        raw_header_bytes: bytes = b"",
        headers: collections.abc.Mapping[str, str] = EMPTY_HEADERS,
        header_list: multidict.MultiDictProxy[str] = EMPTY_HEADER_LIST,
        cookies: collections.abc.Mapping[str, str] = EMPTY_HEADERS,
    ) -> None:
        self.__transport_status = transport_status
        self.__status_code = status_code
        self.__status_message = status_message
        self.__body_bytes = bytes(body_bytes)
        self.__body_text = self.__body_bytes.decode("latin-1")
        self.__raw_header_bytes = bytes(raw_header_bytes)
        self.__headers = types.MappingProxyType(dict(headers))
        self.__header_list = header_list
        self.__cookies = types.MappingProxyType(dict(cookies))

    @classmethod
    def failed(cls, code: TransportCode) -> "Response":
        return cls(transport_status=TransportStatus(code))

    @property
    def transport_status(self) -> TransportStatus:
        return self.__transport_status

    @property
    def ok(self) -> bool:
        return self.__transport_status.succeeded

    @property
    def status_code(self) -> int:
        return self.__status_code

    @property
    def status_message(self) -> str:
        return self.__status_message

    @property
    def body_bytes(self) -> bytes:
        return self.__body_bytes

    @property
    def body_text(self) -> str:
        return self.__body_text

    @property
    def raw_header_bytes(self) -> bytes:
        return self.__raw_header_bytes

    @property
    def headers(self) -> collections.abc.Mapping[str, str]:
        return self.__headers

    @property
    def header_list(self) -> multidict.MultiDictProxy[str]:
        return self.__header_list

    @property
    def cookies(self) -> collections.abc.Mapping[str, str]:
        return self.__cookies

    def raise_for_transport(self) -> None:
        if not self.__transport_status.succeeded:
            raise TransportIOError(self.__transport_status.code)

    def json(
        self,
        *,
        encoding: str = "utf-8",
        loads: collections.abc.Callable[[str], Any] = json.loads,
    ) -> Any:
        try:
            return loads(self.__body_bytes.decode(encoding))
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodeError(f"Response body is not a valid document: {e}") from e

    def is_informational(self) -> bool:
        return 100 <= self.status_code < 200

    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    def is_redirection(self) -> bool:
        return 300 <= self.status_code < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def content_type(self) -> str | None:
        return self.__headers.get(Header.CONTENT_TYPE)

    @property
    def is_json(self) -> bool:
        return bool(json_re.match(self.content_type or ""))

    def __repr__(self) -> str:
        if not self.ok:
            return f"<Response [{self.__transport_status!r}]>"
        return f"<Response [{self.status_code}]>"


def build_query_parameters(query_parameters: QueryParameters) -> dict[str, str]:
    return {name: str(value) for name, value in query_parameters.items() if value is not None}


def substitute_path_parameters(path: yarl.URL, parameters: PathParameters | None = None) -> yarl.URL:
    """Fill the ``{name}`` placeholders of a relative path template."""
    if path.is_absolute():
        raise RuntimeError("Path template should be relative")
    if not parameters:
        return path

    raw_path = path.raw_path
    for name, value in parameters.items():
        raw_path = raw_path.replace(f"%7B{name}%7D", str(value))
    return yarl.URL.build(path=raw_path, query_string=path.raw_query_string, encoded=True)
