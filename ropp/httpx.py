import logging

import httpx

from .base import TransportCode, TransportInitError
from .engine import Engine, EngineCall, EngineSession, Sink

logger = logging.getLogger(__package__)

_TRANSPORT_CODES: tuple[tuple[type[Exception], TransportCode], ...] = (
    (httpx.InvalidURL, TransportCode.URL_MALFORMED),
    (httpx.UnsupportedProtocol, TransportCode.UNSUPPORTED_PROTOCOL),
    (httpx.TimeoutException, TransportCode.TIMEOUT),
    (httpx.ConnectError, TransportCode.CONNECT_ERROR),
    (httpx.ReadError, TransportCode.RECV_ERROR),
    (httpx.WriteError, TransportCode.SEND_ERROR),
    (httpx.ProtocolError, TransportCode.PROTOCOL_ERROR),
    (httpx.NetworkError, TransportCode.NETWORK_ERROR),
    (httpx.TooManyRedirects, TransportCode.TOO_MANY_REDIRECTS),
)


def transport_code_for(error: Exception) -> TransportCode:
    for error_type, code in _TRANSPORT_CODES:
        if isinstance(error, error_type):
            return code
    return TransportCode.UNKNOWN


class HttpxEngine(Engine):
    """Engine backed by one ``httpx.Client`` per session.

    Responses are requested with ``Accept-Encoding: identity`` so the body matches
    the reported headers. When the caller overrides ``Accept-Encoding`` and the
    server compresses, the body handed to the sink is already decoded while
    ``Content-Encoding`` and ``Content-Length`` still describe the wire payload.
    """

    __slots__ = (
        "__timeout",
        "__verify",
        "__transport",
        "__verbose",
    )

    def __init__(
        self,
        *,
        timeout: float = 20.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
        verbose: bool = False,
    ):
        self.__timeout = timeout
        self.__verify = verify
        self.__transport = transport
        self.__verbose = verbose

    def open_session(self) -> EngineSession:
        try:
            client = httpx.Client(
                timeout=self.__timeout,
                verify=self.__verify,
                transport=self.__transport,
                follow_redirects=False,
                headers={"Accept-Encoding": "identity"},
            )
        except (OSError, ValueError) as e:
            raise TransportInitError(f"Cannot create httpx client: {e}") from e
        return _HttpxSession(client, verbose=self.__verbose)


class _HttpxSession(EngineSession):
    __slots__ = ("__client", "__verbose")

    def __init__(self, client: httpx.Client, *, verbose: bool = False):
        self.__client = client
        self.__verbose = verbose

    def close(self) -> None:
        self.__client.close()

    def perform(self, call: EngineCall, on_header: Sink, on_body: Sink) -> TransportCode:
        logger.debug("Sending request %s %s", call.method, call.url)
        if self.__verbose:
            for line in call.header_lines:
                logger.debug("> %s", line)

        try:
            client_request = self.__client.build_request(
                method=call.method,
                url=call.url,
                headers=[_split_header_line(line) for line in call.header_lines],
                content=call.body or None,
            )
            client_response = self.__client.send(client_request, stream=True)
            try:
                head = _serialize_head(client_response)
                if self.__verbose:
                    for line in head.decode("latin-1").splitlines():
                        logger.debug("< %s", line)
                on_header(head)
                for chunk in client_response.iter_bytes():
                    on_body(chunk)
            finally:
                client_response.close()
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                "Request %s %s has failed: %s",
                call.method,
                call.url,
                type(e).__name__,
                exc_info=True,
                extra={
                    "request_method": call.method,
                    "request_url": call.url,
                },
            )
            return transport_code_for(e)

        return TransportCode.OK


def _split_header_line(line: str) -> tuple[bytes, bytes]:
    name, _, value = line.partition(":")
    return name.strip().encode("utf-8"), value.strip().encode("utf-8")


def _serialize_head(response: httpx.Response) -> bytes:
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    lines = [status_line.encode("latin-1")]
    lines.extend(name + b": " + value for name, value in response.headers.raw)
    return b"\r\n".join(lines) + b"\r\n\r\n"
