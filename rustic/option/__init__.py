"""Defines the option type and its variants: present and absent.

The Option type is a union type of Present and Absent, where Present contains a
value and Absent contains nothing.

It is meant to replace values that can be ``None`` when we want the calling code to
explicitly deal with the missing case before accessing the value.

Example:
    .. code-block:: python

        from rustic.option import Absent, Option, Present, of_nothing, of_value

        def find_user(name: str) -> Option[int]:
            if name in users:
                return of_value(users[name])
            return of_nothing()

        match find_user("alice"):
            case Present(user_id):
                print(f"Found user {user_id}")
            case Absent():
                print("No such user")
"""

from ._option import (
    Absent,
    Option,
    Present,
    configure_option_conversion_hooks,
    flatten,
    is_absent,
    is_present,
    load,
    of_nothing,
    of_value,
    unwrap,
)

__all__ = [
    "Absent",
    "Option",
    "Present",
    "configure_option_conversion_hooks",
    "flatten",
    "is_absent",
    "is_present",
    "load",
    "of_nothing",
    "of_value",
    "unwrap",
]
