from typing import Any

import cattrs
from cattrs.preconf.json import JsonConverter
from cattrs.preconf.json import make_converter as make_json_converter
from cattrs.preconf.pyyaml import make_converter as make_yaml_converter

converters: dict[str, cattrs.Converter] = {
    "json": make_json_converter(),
    "yaml": make_yaml_converter(),
    "unconfigured": cattrs.Converter(),
}
"""Shared converters, indexed by the format they target."""


def new_converter() -> JsonConverter:
    """Return a fresh converter that produces JSON-compatible data."""

    return make_json_converter()


def copy_converter(converter: cattrs.Converter) -> cattrs.Converter:
    """Return a copy of a converter that can be customized independently."""

    return converter.copy()


def unstructure(obj: Any, unstructure_as: Any = None):
    return converters["unconfigured"].unstructure(obj, unstructure_as=unstructure_as)


def structure(obj: Any, cls: Any):
    return converters["unconfigured"].structure(obj, cls)


def to_json(obj: Any, unstructure_as: Any = None) -> str:
    """Serialize an object to a JSON string."""

    return converters["json"].dumps(obj, unstructure_as=unstructure_as)


def from_json(data: str | bytes, cls: Any):
    """Deserialize a JSON string into an instance of the given type."""

    return converters["json"].loads(data, cls)
