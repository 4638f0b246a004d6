"""Transport, envelope and validation internals."""

from ._models import PaginatedResult, PaginatedResultWithDateRange
from ._request import HttpTransport, RequestConfig, Transport

__all__ = [
    "HttpTransport",
    "PaginatedResult",
    "PaginatedResultWithDateRange",
    "RequestConfig",
    "Transport",
]
