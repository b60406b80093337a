import abc
import contextlib
import types
from typing import TypeVar


class Closable(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    def close(self) -> None: ...

    def __enter__(self: "TClosable") -> "TClosable":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: types.TracebackType | None,
    ) -> None:
        self.close()


TClosable = TypeVar("TClosable", bound=Closable)


def close_single(item: Closable) -> None:
    with contextlib.suppress(Exception):
        item.close()


def try_parse_int(value: str | None) -> int | None:
    if value is None:
        return None

    try:
        return int(value, 10)
    except ValueError:
        return None
