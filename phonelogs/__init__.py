"""phonelogs: a Python client for phone call-log REST endpoints.

Quick Start:
    ```python
    import asyncio

    import requests
    import phonelogs

    session = requests.Session()
    session.headers["Authorization"] = "Bearer <token>"

    async def main():
        with phonelogs.client(session=session) as client:
            page = await client.call_logs.get_for_user(
                "jchill@example.com", from_="2024-01-01", to="2024-01-31"
            )
            for log in page:
                print(log.date_time(), log.caller_number(), log.duration())

    asyncio.run(main())
    ```

Key Features:
    - **One page per call**: continue with ``page.next_page_token``
    - **Cancellation**: pass a `CancellationToken` to abandon a request
    - **Strict wire format**: absent parameters are never sent, dates are
      sent without a time of day, enumerations use their API strings
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from ._core import (
    HttpTransport,
    PaginatedResult,
    PaginatedResultWithDateRange,
    RequestConfig,
    Transport,
)
from .api import Client, client
from .exceptions import Cancelled, InvalidArgument, PhoneLogsError, RequestFailed
from .executor import CancellationToken, PaginatedQueryExecutor
from .query import (
    CallLogPathType,
    CallLogTimeType,
    CallLogType,
    DateRange,
    QuerySpec,
)
from .resources import CallLogs
from .results import AccountCallLog, CallLog, UserCallLog
from .system import PROD, System, get_system

logger = logging.getLogger(__name__)

__all__ = [
    # api.py
    "client",
    "Client",
    # executor.py
    "PaginatedQueryExecutor",
    "CancellationToken",
    # resources
    "CallLogs",
    # results.py
    "CallLog",
    "UserCallLog",
    "AccountCallLog",
    # query
    "QuerySpec",
    "CallLogType",
    "CallLogPathType",
    "CallLogTimeType",
    "DateRange",
    # _core
    "HttpTransport",
    "Transport",
    "RequestConfig",
    "PaginatedResult",
    "PaginatedResultWithDateRange",
    # exceptions.py
    "PhoneLogsError",
    "InvalidArgument",
    "RequestFailed",
    "Cancelled",
    # system.py
    "System",
    "PROD",
    "get_system",
]

try:
    __version__ = version("phonelogs")
except PackageNotFoundError:
    __version__ = "0.0.0"
