from __future__ import annotations

from typing import Any, TypeAlias

from typing_extensions import TypeIs

JSON: TypeAlias = dict[str, "JSON"] | list["JSON"] | str | int | float | bool | None
"""Data that can be written with :func:`json.dumps` without custom encoders."""

_JSON_SCALARS = (str, int, float, bool, type(None))


def is_valid_json(data: Any) -> TypeIs[JSON]:
    """Check recursively that some data only contains JSON-compatible values.

    Tuples are rejected even though :mod:`json` accepts them, since they don't survive
    a round trip.
    """

    match data:
        case dict():
            return is_valid_json_dict(data)
        case list():
            return is_valid_json_list(data)
        case _:
            return isinstance(data, _JSON_SCALARS)


def is_valid_json_dict(data: Any) -> TypeIs[dict[str, JSON]]:
    return isinstance(data, dict) and all(
        isinstance(key, str) and is_valid_json(value) for key, value in data.items()
    )


def is_valid_json_list(data: Any) -> TypeIs[list[JSON]]:
    return isinstance(data, list) and all(is_valid_json(value) for value in data)
