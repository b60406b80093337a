import logging
import sys

import ropp

logging.basicConfig(level="INFO")


def main(uid: int) -> None:
    client = ropp.setup(timeout=10.0)
    user = ropp.User(uid, client)

    try:
        print(f"{user.get_display_name()} (@{user.get_username()})")
        print(user.get_description())
        print(f"friends: {user.get_friends_count()}")
        print(f"followers: {user.get_followers_count()}")
        print(f"followings: {user.get_followings_count()}")
        print(f"groups: {user.get_groups_count()}")
    except ropp.RoppError as e:
        logging.error("Cannot query user %s: %s", uid, e)
        sys.exit(1)


main(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
