import collections.abc
import types

from .base import Header, Method, Response, TransportCode, TransportInitError, TransportStatus
from .engine import Engine, EngineCall, EngineSession
from .httpx import HttpxEngine
from .parsing import parse_header_block
from .utils import Closable, close_single

Body = bytes | str


class Request(Closable):
    """One logical HTTP transaction.

    The request is built with setters, readied by ``initialize`` and then
    dispatched any number of times with ``get``, ``post`` or ``request``. Each
    dispatch rebuilds the engine header list from the current headers and cookies,
    so nothing set for a previous dispatch leaks into the next one.

    Usage::

        with Request("https://users.roblox.com/v1/users/1") as request:
            request.set_header("Referer", "https://www.roblox.com/")
            request.initialize()
            response = request.get()
    """

    __slots__ = (
        "__url",
        "__body",
        "__headers",
        "__cookies",
        "__engine",
        "__session",
        "__header_lines",
    )

    def __init__(
        self,
        url: str,
        body: Body = b"",
        headers: collections.abc.Mapping[str, str] | None = None,
        *,
        engine: Engine | None = None,
    ):
        self.__url = url
        self.__body = body
        self.__headers: dict[str, str] = dict(headers) if headers is not None else {}
        self.__cookies: dict[str, str] = {}
        self.__engine = engine or HttpxEngine()
        self.__session: EngineSession | None = None
        self.__header_lines: tuple[str, ...] | None = None

    @property
    def url(self) -> str:
        return self.__url

    @property
    def body(self) -> Body:
        return self.__body

    @property
    def headers(self) -> collections.abc.Mapping[str, str]:
        return types.MappingProxyType(self.__headers)

    @property
    def cookies(self) -> collections.abc.Mapping[str, str]:
        return types.MappingProxyType(self.__cookies)

    @property
    def header_lines(self) -> tuple[str, ...] | None:
        """Header list handed to the engine by the latest dispatch"""
        return self.__header_lines

    @property
    def is_initialized(self) -> bool:
        return self.__session is not None

    def set_url(self, url: str) -> None:
        self.__url = url

    def set_body(self, body: Body) -> None:
        self.__body = body

    def set_header(self, key: str, value: str) -> None:
        self.__headers[key] = value

    def set_cookie(self, key: str, value: str) -> None:
        self.__cookies[key] = value

    def remove_header(self, key: str) -> None:
        self.__headers.pop(key, None)

    def remove_cookie(self, key: str) -> None:
        self.__cookies.pop(key, None)

    def initialize(self) -> None:
        if self.__session is None:
            self.__session = self.__engine.open_session()

    def get(self) -> Response:
        return self.__dispatch(Method.GET)

    def post(self) -> Response:
        return self.__dispatch(Method.POST)

    def request(self, method: str) -> Response:
        return self.__dispatch(method)

    def close(self) -> None:
        self.__header_lines = None
        session, self.__session = self.__session, None
        if session is not None:
            close_single(session)

    def __dispatch(self, method: str) -> Response:
        if self.__session is None:
            raise TransportInitError("Request is not initialized")

        header_lines = self.__prepare_headers()
        body = self.__body.encode("utf-8") if isinstance(self.__body, str) else bytes(self.__body)
        call = EngineCall(method=method, url=self.__url, header_lines=header_lines, body=body)
        return self.__execute(self.__session, call)

    def __prepare_headers(self) -> tuple[str, ...]:
        self.__header_lines = None
        lines = [f"{key}: {value}" for key, value in self.__headers.items()]
        cookie = "".join(f"{key}={value}; " for key, value in self.__cookies.items())
        lines.append(f"{Header.COOKIE}: {cookie}")
        self.__header_lines = tuple(lines)
        return self.__header_lines

    @staticmethod
    def __execute(session: EngineSession, call: EngineCall) -> Response:
        header_data = bytearray()
        body_data = bytearray()

        def write_header(chunk: bytes) -> int:
            header_data.extend(chunk)
            return len(chunk)

        def write_body(chunk: bytes) -> int:
            body_data.extend(chunk)
            return len(chunk)

        code = session.perform(call, write_header, write_body)
        if code != TransportCode.OK:
            return Response.failed(code)

        parsed = parse_header_block(bytes(header_data))
        return Response(
            transport_status=TransportStatus(code),
            status_code=parsed.status_code,
            status_message=parsed.status_message,
            body_bytes=bytes(body_data),
            raw_header_bytes=bytes(header_data),
            headers=parsed.headers,
            header_list=parsed.header_list,
            cookies=parsed.cookies,
        )

    def __repr__(self) -> str:
        return f"<Request [{self.__url}]>"
