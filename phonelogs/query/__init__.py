"""Query building for paginated endpoints.

Example:
    >>> from phonelogs.query import CallLogType, QuerySpec
    >>> spec = QuerySpec(
    ...     "phone/call_logs",
    ...     "call_logs",
    ...     {"type": CallLogType.MISSED, "site_id": None},
    ...     page_size=50,
    ... )
    >>> spec.to_params()
    {'type': 'missed', 'page_size': '50'}
"""

from .spec import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    ParamValue,
    QuerySpec,
    serialize_param,
)
from .types import (
    CallLogPathType,
    CallLogTimeType,
    CallLogType,
    DateLike,
    DateRange,
    WireEnum,
    format_date,
    to_date,
)

__all__ = [
    "QuerySpec",
    "ParamValue",
    "serialize_param",
    "DEFAULT_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "CallLogType",
    "CallLogPathType",
    "CallLogTimeType",
    "DateLike",
    "DateRange",
    "WireEnum",
    "format_date",
    "to_date",
]
