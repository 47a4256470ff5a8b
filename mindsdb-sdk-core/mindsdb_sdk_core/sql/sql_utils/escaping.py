"""
SQL Escaping - Quote identifiers and literal values for the MySQL dialect.

MindsDB speaks the MySQL dialect, so identifiers are wrapped in backticks and
literals are escaped with PyMySQL's converters.
"""

import math
from typing import Any, Sequence, Union

from pymysql import converters

from ...errors import InvalidArgumentError

CHARSET = "utf8mb4"


def _escape_bool(value: bool, mapping=None) -> str:
    return "true" if value else "false"


def _escape_float(value: float, mapping=None) -> str:
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{value!r} can not be used as a SQL value")
    return repr(value)


# PyMySQL renders booleans as 1/0 and floats with an exponent suffix
_ENCODERS = dict(converters.encoders)
_ENCODERS[bool] = _escape_bool
_ENCODERS[float] = _escape_float
_ENCODERS.pop(dict, None)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def escape_id(identifier: Union[str, Sequence[str]], forbid_qualified: bool = False) -> str:
    """
    Quote an identifier (table, integration, column) with backticks.

    Embedded backticks are doubled. Unless ``forbid_qualified`` is set, dots
    separate the parts of a qualified name and each part is quoted on its own.
    A list of identifiers is quoted one by one and joined with commas.

    Args:
        identifier: Identifier or list of identifiers
        forbid_qualified: Keep dots inside a single quoted identifier

    Returns:
        Quoted identifier text
    """
    if isinstance(identifier, (list, tuple)):
        return ", ".join(escape_id(part, forbid_qualified) for part in identifier)

    quoted = str(identifier).replace("`", "``")
    if not forbid_qualified:
        quoted = quoted.replace(".", "`.`")
    return f"`{quoted}`"


def escape(value: Any) -> str:
    """
    Render a Python value as a MySQL literal.

    Args:
        value: None, bool, number, string, bytes, date/time, or a sequence of those

    Returns:
        SQL literal text, e.g. ``NULL``, ``true``, ``42``, ``'it\\'s'``

    Raises:
        InvalidArgumentError: If the value has no SQL literal form
    """
    if isinstance(value, _SEQUENCE_TYPES):
        return f"({', '.join(escape(item) for item in value)})"
    if isinstance(value, dict):
        raise InvalidArgumentError("dict can not be used as a SQL value")
    return converters.escape_item(value, CHARSET, mapping=_ENCODERS)


def qualified_name(integration: str, name: str) -> str:
    """Quoted ``integration.name`` reference to a table."""
    return f"{escape_id(integration)}.{escape_id(name)}"
