"""Parsing of the raw response header block.

The parser is deliberately lenient: it never raises on malformed input and
returns whatever it could make sense of.
"""

from typing import NamedTuple

import multidict

from .base import Header
from .utils import try_parse_int


class ParsedHeaders(NamedTuple):
    status_code: int
    status_message: str
    headers: dict[str, str]
    header_list: multidict.MultiDictProxy[str]
    cookies: dict[str, str]


def parse_status_line(line: str) -> tuple[int, str]:
    """Split ``HTTP/1.1 200 OK`` into ``(200, "OK")``.

    An unparsable code yields 0, a missing reason phrase yields an empty message.
    """
    line = line.rstrip("\r\n")
    _, _, rest = line.partition(" ")
    code, _, message = rest.partition(" ")
    return try_parse_int(code) or 0, message


def parse_header_line(line: str) -> tuple[str, str] | None:
    name, colon, rest = line.partition(":")
    if not colon:
        return None

    # exactly one space separates the name from the value
    _, space, value = rest.partition(" ")
    if not space:
        return name.lower(), ""
    value, _, _ = value.partition("\r")
    return name.lower(), value


def parse_set_cookie(value: str) -> tuple[str, str] | None:
    """Extract the cookie from a ``Set-Cookie`` value.

    Only the leading ``name=value`` pair is a cookie; the attributes that follow
    it (``Path``, ``Expires``, ``HttpOnly``...) are dropped.
    """
    pair, _, _ = value.partition(";")
    name, equals, cookie_value = pair.partition("=")
    name = name.strip()
    if not equals or not name:
        return None
    return name, cookie_value.strip()


def parse_header_block(raw: bytes) -> ParsedHeaders:
    lines = raw.decode("latin-1").split("\n")
    status_code, status_message = parse_status_line(lines[0])

    headers: dict[str, str] = {}
    header_list = multidict.MultiDict[str]()
    cookies: dict[str, str] = {}
    for line in lines[1:]:
        parsed = parse_header_line(line)
        if parsed is None:
            continue
        name, value = parsed
        headers[name] = value
        header_list.add(name, value)
        if name == Header.SET_COOKIE:
            cookie = parse_set_cookie(value)
            if cookie is not None:
                cookies[cookie[0]] = cookie[1]

    return ParsedHeaders(
        status_code=status_code,
        status_message=status_message,
        headers=headers,
        header_list=multidict.MultiDictProxy[str](header_list),
        cookies=cookies,
    )
