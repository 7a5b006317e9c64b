"""
Field schema of resources.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from bigip.exceptions import ConfigError

TYPE_STRING = "string"
TYPE_INT = "int"
TYPE_BOOL = "bool"
TYPE_LIST = "list"

_PYTHON_TYPES = {
    TYPE_STRING: str,
    TYPE_INT: int,
    TYPE_BOOL: bool,
    TYPE_LIST: list,
}

F5_NAME_PATTERN = re.compile(r"^/[\w_\-.]+/[\w_\-.:]+$")


@dataclass
class Schema:
    type: str
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    default: Any = None
    description: str = ""
    max_items: int = 0
    elem: Optional[Dict[str, "Schema"]] = None
    validate_func: Optional[Callable] = None

    def zero_value(self):
        return _PYTHON_TYPES[self.type]()

    def check_type(self, value):
        """Return True when value fits the declared type."""
        expected = _PYTHON_TYPES[self.type]
        if expected is int and isinstance(value, bool):
            return False
        return isinstance(value, expected)


def validate_f5_name(value, key):
    """Names must be /Partition/Name made of letters, numbers or [._-:].

    Returns:
        (warnings, errors) lists
    """
    values = value if isinstance(value, (list, tuple, set)) else [value]
    errors = []
    for v in values:
        if not isinstance(v, str) or not F5_NAME_PATTERN.match(v):
            errors.append(
                ConfigError(
                    f"{key!r} must match /Partition/Name and contain letters, "
                    "numbers or [._-:]. e.g. /Common/my-pool"
                )
            )
    return [], errors
