"""Call-log endpoints of the phone API."""

import logging
from typing import Awaitable, Optional
from urllib.parse import quote

from .._core._models import PaginatedResult, PaginatedResultWithDateRange
from .._core._validators import require_non_empty
from ..executor import CancellationToken, PaginatedQueryExecutor
from ..query import (
    DEFAULT_PAGE_SIZE,
    CallLogPathType,
    CallLogTimeType,
    CallLogType,
    DateLike,
    DateRange,
    QuerySpec,
)
from ..results import AccountCallLog, UserCallLog

logger = logging.getLogger(__name__)

ITEMS_FIELD = "call_logs"


class CallLogs:
    """Retrieve call logs for one user or for a whole account.

    Both methods validate their arguments immediately and raise
    `InvalidArgument` before returning; the returned awaitable performs the
    request. Each call fetches a single page: pass the ``next_page_token`` of
    a page as ``page_token`` to get the next one.

    Example:
        >>> page = await client.call_logs.get_for_user("jchill@example.com")
        >>> while page.has_more:
        ...     page = await client.call_logs.get_for_user(
        ...         "jchill@example.com", page_token=page.next_page_token
        ...     )
    """

    def __init__(self, executor: PaginatedQueryExecutor) -> None:
        self._executor = executor

    def get_for_user(
        self,
        user_id: str,
        from_: Optional[DateLike] = None,
        to: Optional[DateLike] = None,
        type: CallLogType = CallLogType.ALL,
        phone_number: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> Awaitable[PaginatedResult[UserCallLog]]:
        """Get call logs for the specified user.

        Parameters:
            user_id: The user id or email address.
            from_: Start date; only the calendar date is sent.
            to: End date; only the calendar date is sent.
            type: Type of call log.
            phone_number: Only return calls involving this number.
            page_size: Records per page, between 1 and 300.
            page_token: Continuation token from a previous page.
            cancellation: Token that abandons the request when cancelled.

        Returns:
            An awaitable resolving to a page of `UserCallLog`.

        Raises:
            InvalidArgument: If ``user_id`` is empty, ``page_size`` is out of
                range or ``from_`` is after ``to``.
        """
        require_non_empty(user_id, "user_id")
        dates = DateRange.from_dates(from_, to)
        spec = QuerySpec(
            path=f"phone/users/{quote(user_id, safe='@')}/call_logs",
            items_field=ITEMS_FIELD,
            params={
                **dates.to_params(),
                "type": type,
                "phone_number": phone_number,
            },
            page_size=page_size,
            page_token=page_token,
        )
        logger.debug("Fetching call logs for user %s", user_id)
        return self._executor.execute(
            spec,
            cancellation,
            result_type=PaginatedResult,
            item_factory=UserCallLog,
        )

    def get_for_account(
        self,
        from_: Optional[DateLike] = None,
        to: Optional[DateLike] = None,
        type: CallLogType = CallLogType.ALL,
        path_type: Optional[CallLogPathType] = None,
        time_type: Optional[CallLogTimeType] = CallLogTimeType.START_TIME,
        site_id: Optional[str] = None,
        charged_only: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> Awaitable[PaginatedResultWithDateRange[AccountCallLog]]:
        """Get call logs for the entire account.

        Parameters:
            from_: Start date; only the calendar date is sent.
            to: End date; only the calendar date is sent.
            type: Type of call log.
            path_type: Only return calls that took this path.
            time_type: Whether ``from_``/``to`` match the call start or end time.
            site_id: Only return calls of this phone site (multi-site accounts).
            charged_only: Only return calls with a non-zero charge.
            page_size: Records per page, between 1 and 300.
            page_token: Continuation token from a previous page.
            cancellation: Token that abandons the request when cancelled.

        Returns:
            An awaitable resolving to a page of `AccountCallLog`, along with
            the date range the API applied.

        Raises:
            InvalidArgument: If ``page_size`` is out of range or ``from_`` is
                after ``to``.
        """
        dates = DateRange.from_dates(from_, to)
        spec = QuerySpec(
            path="phone/call_logs",
            items_field=ITEMS_FIELD,
            params={
                **dates.to_params(),
                "type": type,
                "path": path_type,
                "timeType": time_type,
                "site_id": site_id,
                "charged_call_logs": charged_only,
            },
            page_size=page_size,
            page_token=page_token,
        )
        logger.debug("Fetching account call logs")
        return self._executor.execute(
            spec,
            cancellation,
            result_type=PaginatedResultWithDateRange,
            item_factory=AccountCallLog,
        )
