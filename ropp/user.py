from typing import Any

import yarl

from .client import Client, build_url, get_field

MAX_UID = 2**64 - 1


class User:
    """Read-only queries about a single user.

    Every method performs its own GET; nothing is cached between calls.
    """

    __slots__ = ("__uid", "__client")

    def __init__(self, uid: int, client: Client):
        if isinstance(uid, bool) or not isinstance(uid, int) or not 0 <= uid <= MAX_UID:
            raise ValueError(f"User id should be an unsigned 64-bit integer, got {uid!r}")

        self.__uid = uid
        self.__client = client

    @property
    def uid(self) -> int:
        return self.__uid

    def get_friends(self, sort: str = "Alphabetical") -> Any:
        return self.__friends("v1/users/{uid}/friends", {"userSort": sort})

    def get_followers(self, sort: str = "Asc", limit: int = 10) -> Any:
        return self.__friends("v1/users/{uid}/followers", {"sortOrder": sort, "limit": limit})

    def get_followings(self, sort: str = "Asc", limit: int = 10) -> Any:
        return self.__friends("v1/users/{uid}/followings", {"sortOrder": sort, "limit": limit})

    def get_friends_count(self) -> int:
        return get_field(self.__friends("v1/users/{uid}/friends/count"), "count", int)

    def get_followers_count(self) -> int:
        return get_field(self.__friends("v1/users/{uid}/followers/count"), "count", int)

    def get_followings_count(self) -> int:
        return get_field(self.__friends("v1/users/{uid}/followings/count"), "count", int)

    def get_friends_online(self) -> Any:
        return self.__friends("v1/users/{uid}/friends/online")

    def get_profile(self) -> Any:
        return self.__client.get_document(self.__url(self.__client.endpoints.users, "v1/users/{uid}"))

    def get_username(self) -> str:
        return get_field(self.get_profile(), "name", str)

    def get_display_name(self) -> str:
        return get_field(self.get_profile(), "displayName", str)

    def get_description(self) -> str:
        return get_field(self.get_profile(), "description", str)

    def get_groups(self) -> Any:
        return self.__client.get_document(self.__url(self.__client.endpoints.groups, "v1/users/{uid}/groups/roles"))

    def get_groups_count(self) -> int:
        return len(get_field(self.get_groups(), "data", list))

    def __friends(self, path: str, query_parameters: dict[str, Any] | None = None) -> Any:
        return self.__client.get_document(self.__url(self.__client.endpoints.friends, path, query_parameters))

    def __url(self, endpoint: yarl.URL, path: str, query_parameters: dict[str, Any] | None = None) -> yarl.URL:
        return build_url(
            endpoint,
            path,
            path_parameters={"uid": self.__uid},
            query_parameters=query_parameters,
        )

    def __repr__(self) -> str:
        return f"<User [{self.__uid}]>"
