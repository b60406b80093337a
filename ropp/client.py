import logging
from typing import Any, NamedTuple

import yarl

from .base import (
    FieldMissingError,
    Header,
    PathParameters,
    QueryParameters,
    Response,
    ResponseStatusError,
    build_query_parameters,
    substitute_path_parameters,
)
from .engine import Engine
from .request import Request

logger = logging.getLogger(__package__)

DEFAULT_REFERER = "https://www.roblox.com/"


class Endpoints(NamedTuple):
    friends: yarl.URL = yarl.URL("https://friends.roblox.com/")
    users: yarl.URL = yarl.URL("https://users.roblox.com/")
    groups: yarl.URL = yarl.URL("https://groups.roblox.com/")


def build_url(
    endpoint: yarl.URL,
    path: str,
    *,
    path_parameters: PathParameters | None = None,
    query_parameters: QueryParameters | None = None,
) -> yarl.URL:
    if not endpoint.is_absolute():
        raise RuntimeError("Base url should be absolute")

    url = endpoint.join(substitute_path_parameters(yarl.URL(path), path_parameters))
    if query_parameters is not None:
        url = url.update_query(build_query_parameters(query_parameters))
    return url


class Client:
    __slots__ = ("__engine", "__referer", "__endpoints")

    def __init__(self, *, engine: Engine, referer: str = DEFAULT_REFERER, endpoints: Endpoints = Endpoints()):
        self.__engine = engine
        self.__referer = referer
        self.__endpoints = endpoints

    @property
    def endpoints(self) -> Endpoints:
        return self.__endpoints

    def get(self, url: yarl.URL) -> Response:
        with Request(str(url), engine=self.__engine) as request:
            request.set_header(Header.REFERER, self.__referer)
            request.initialize()
            return request.get()

    def get_document(self, url: yarl.URL) -> Any:
        logger.debug("Fetching %s", url)
        response = self.get(url)
        response.raise_for_transport()
        if not response.is_successful():
            raise ResponseStatusError(response.status_code, response.status_message)
        return response.json()


def get_field(document: Any, field: str, expected_type: type | tuple[type, ...]) -> Any:
    if not isinstance(document, dict) or field not in document:
        raise FieldMissingError(field)
    value = document[field]
    # bool is an int subclass, but never a valid count
    if (isinstance(value, bool) and expected_type is int) or not isinstance(value, expected_type):
        raise FieldMissingError(field, f"Field {field!r} is not a {expected_type}: {value!r}")
    return value

