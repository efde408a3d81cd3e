from ._json import (
    JSON,
    is_valid_json,
    is_valid_json_dict,
    is_valid_json_list,
)
from .converters import (
    converters,
    copy_converter,
    from_json,
    new_converter,
    structure,
    to_json,
    unstructure,
)

__all__ = [
    "converters",
    "structure",
    "unstructure",
    "to_json",
    "from_json",
    "JSON",
    "is_valid_json",
    "is_valid_json_dict",
    "is_valid_json_list",
    "copy_converter",
    "new_converter",
]
