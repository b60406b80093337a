import abc
import collections.abc
from typing import NamedTuple

from .base import TransportCode
from .utils import Closable

Sink = collections.abc.Callable[[bytes], int]


class EngineCall(NamedTuple):
    method: str
    url: str
    header_lines: tuple[str, ...]
    body: bytes


class EngineSession(Closable):
    """One engine handle, owned by exactly one Request.

    ``perform`` feeds the raw header block into ``on_header`` and the payload into
    ``on_body``, then reports whether the exchange completed.
    """

    __slots__ = ()

    @abc.abstractmethod
    def perform(self, call: EngineCall, on_header: Sink, on_body: Sink) -> TransportCode: ...


class Engine(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    def open_session(self) -> EngineSession: ...
