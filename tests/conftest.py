import json
import logging
from typing import Any, NamedTuple

import ropp

logging.basicConfig(level="DEBUG")


class FakeReply(NamedTuple):
    head: bytes
    body_chunks: tuple[bytes, ...] = ()


def reply(
    status_line: str = "HTTP/1.1 200 OK",
    headers: tuple[tuple[str, str], ...] = (),
    body: bytes = b"",
    chunk_size: int = 4,
) -> FakeReply:
    lines = [status_line, *(f"{name}: {value}" for name, value in headers)]
    head = ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1")
    return FakeReply(head, tuple(body[i : i + chunk_size] for i in range(0, len(body), chunk_size)))


def json_reply(document: Any, status_line: str = "HTTP/1.1 200 OK") -> FakeReply:
    return reply(status_line, (("Content-Type", "application/json"),), json.dumps(document).encode())


class FakeSession(ropp.EngineSession):
    __slots__ = ("_engine", "closed")

    def __init__(self, engine: "FakeEngine") -> None:
        self._engine = engine
        self.closed = False

    def perform(self, call: ropp.EngineCall, on_header: ropp.Sink, on_body: ropp.Sink) -> ropp.TransportCode:
        if self.closed:
            raise RuntimeError("Session is closed")

        self._engine.calls.append(call)
        if not self._engine.replies:
            raise RuntimeError("No reply left")

        scripted = self._engine.replies.pop()
        if isinstance(scripted, ropp.TransportCode):
            return scripted

        on_header(scripted.head)
        for chunk in scripted.body_chunks:
            self._engine.body_bytes_written += on_body(chunk)
        return ropp.TransportCode.OK

    def close(self) -> None:
        self.closed = True


class FakeEngine(ropp.Engine):
    __slots__ = ("replies", "calls", "sessions", "body_bytes_written", "_fail_open")

    def __init__(self, *replies: FakeReply | ropp.TransportCode, fail_open: bool = False) -> None:
        self.replies = list(reversed(replies))
        self.calls: list[ropp.EngineCall] = []
        self.sessions: list[FakeSession] = []
        self.body_bytes_written = 0
        self._fail_open = fail_open

    def open_session(self) -> ropp.EngineSession:
        if self._fail_open:
            raise ropp.TransportInitError("Cannot allocate session")

        session = FakeSession(self)
        self.sessions.append(session)
        return session
