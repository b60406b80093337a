import sys

from .base import (
    DecodeError,
    FieldMissingError,
    Header,
    Method,
    Response,
    ResponseStatusError,
    RoppError,
    TransportCode,
    TransportInitError,
    TransportIOError,
    TransportStatus,
)
from .client import Client, Endpoints
from .engine import Engine, EngineCall, EngineSession, Sink
from .httpx import HttpxEngine
from .request import Request
from .setup import setup
from .user import User

__all__: tuple[str, ...] = (
    "Client",
    "DecodeError",
    "Endpoints",
    "Engine",
    "EngineCall",
    "EngineSession",
    "FieldMissingError",
    "Header",
    "HttpxEngine",
    "Method",
    "Request",
    "Response",
    "ResponseStatusError",
    "RoppError",
    "Sink",
    "TransportCode",
    "TransportIOError",
    "TransportInitError",
    "TransportStatus",
    "User",
    "setup",
)

__version__ = "0.1.0"

version = f"{__version__}, Python {sys.version}"

version_info: tuple[int, ...] = tuple(int(part) for part in __version__.split("."))
