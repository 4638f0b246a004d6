"""Immutable description of one paginated GET request."""

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from typing_extensions import TypeAlias

from .._core._validators import require_in_range, require_non_empty
from ..exceptions import InvalidArgument
from .types import WireEnum, format_date

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 300
DEFAULT_PAGE_SIZE = 30

ParamValue: TypeAlias = Union[str, int, float, bool, dt.date, dt.datetime, Enum, None]
"""A query parameter value; ``None`` means the parameter is absent."""


def _serialize_bool(value: bool) -> str:
    return "true" if value else "false"


def _serialize_enum(value: Enum) -> str:
    if isinstance(value, WireEnum):
        return value.to_wire()
    raise InvalidArgument(
        type(value).__name__, "enumeration has no canonical wire strings"
    )


# Order matters: bool before int (bool is an int), datetime before date.
_SERIALIZERS: List[Tuple[type, Callable[[Any], str]]] = [
    (bool, _serialize_bool),
    (Enum, _serialize_enum),
    (dt.datetime, format_date),
    (dt.date, format_date),
    (int, str),
    (float, str),
    (str, str),
]


def serialize_param(name: str, value: ParamValue) -> Optional[str]:
    """Return the wire form of a parameter value, or ``None`` if it is absent.

    Raises:
        InvalidArgument: If the value has a type with no serialization rule.
    """
    if value is None:
        return None
    for value_type, serializer in _SERIALIZERS:
        if isinstance(value, value_type):
            return serializer(value)
    raise InvalidArgument(name, f"unsupported parameter type {type(value).__name__}")


@dataclass(frozen=True)
class QuerySpec:
    """A single-page GET request against a paginated endpoint.

    Attributes:
        path: Resource path relative to the API base URL.
        items_field: Envelope key holding the page's records.
        params: Ordered mapping of wire parameter name to value.
            ``None`` values are left out of the request entirely.
        page_size: Records per page, between 1 and 300.
        page_token: Continuation token from a previous page, if any.

    Raises:
        InvalidArgument: If ``page_size`` is out of range, ``path`` or
            ``items_field`` is empty, or a parameter has an unsupported type.
    """

    path: str
    items_field: str
    params: Mapping[str, ParamValue] = field(default_factory=dict)
    page_size: int = DEFAULT_PAGE_SIZE
    page_token: Optional[str] = None

    def __post_init__(self) -> None:
        require_non_empty(self.path, "path")
        require_non_empty(self.items_field, "items_field")
        require_in_range(self.page_size, MIN_PAGE_SIZE, MAX_PAGE_SIZE, "page_size")
        for name, value in self.params.items():
            serialize_param(name, value)
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def to_params(self) -> Dict[str, str]:
        """Return the query string parameters, in order, with absent ones omitted."""
        wire: Dict[str, str] = {}
        for name, value in self.params.items():
            serialized = serialize_param(name, value)
            if serialized is not None:
                wire[name] = serialized
        wire["page_size"] = str(self.page_size)
        if self.page_token is not None:
            wire["next_page_token"] = self.page_token
        return wire
