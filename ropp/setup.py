from typing import Any

import yarl

from .client import DEFAULT_REFERER, Client, Endpoints
from .engine import Engine
from .httpx import HttpxEngine

MISSING: Any = object()

_DEFAULT_ENDPOINTS = Endpoints()


def setup(
    *,
    engine: Engine = MISSING,
    timeout: float = MISSING,
    verify: bool = MISSING,
    verbose: bool = MISSING,
    referer: str = DEFAULT_REFERER,
    friends_endpoint: str | yarl.URL = _DEFAULT_ENDPOINTS.friends,
    users_endpoint: str | yarl.URL = _DEFAULT_ENDPOINTS.users,
    groups_endpoint: str | yarl.URL = _DEFAULT_ENDPOINTS.groups,
) -> Client:
    engine_options = {"timeout": timeout, "verify": verify, "verbose": verbose}
    if engine is not MISSING and any(value is not MISSING for value in engine_options.values()):
        raise ValueError("Engine options can not be combined with an explicit engine")

    endpoints = Endpoints(
        friends=_to_endpoint(friends_endpoint),
        users=_to_endpoint(users_endpoint),
        groups=_to_endpoint(groups_endpoint),
    )
    if engine is MISSING:
        engine = HttpxEngine(**{k: v for k, v in engine_options.items() if v is not MISSING})
    return Client(engine=engine, referer=referer, endpoints=endpoints)


def _to_endpoint(endpoint: str | yarl.URL) -> yarl.URL:
    url = yarl.URL(endpoint) if isinstance(endpoint, str) else endpoint
    if not url.is_absolute():
        raise ValueError(f"Endpoint should be absolute, got {endpoint}")
    return url
