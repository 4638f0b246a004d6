"""Enumerations and value types used to build call-log queries.

Every enumeration carries a static table mapping each member to the exact
string the API expects on the wire. Members are never serialized by ordinal
or by their Python name, so reordering or extending an enumeration cannot
change what is sent.
"""

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Type, Union

from typing_extensions import Self, TypeAlias

from ..exceptions import InvalidArgument

DateLike: TypeAlias = Union[str, dt.date, dt.datetime]
"""A date given as an ISO 8601 string, a date or a datetime."""


class WireEnum(Enum):
    """Enum whose wire form is looked up in a per-class table."""

    @classmethod
    def _wire_table(cls) -> Dict["WireEnum", str]:
        return _WIRE_TABLES[cls]

    def to_wire(self) -> str:
        """Return the canonical string the API uses for this member."""
        return self._wire_table()[self]

    @classmethod
    def from_wire(cls, value: str) -> Self:
        """Parse a canonical wire string back into a member.

        Raises:
            InvalidArgument: If *value* is not a known wire string.
        """
        for member, wire in cls._wire_table().items():
            if wire == value:
                return member  # type: ignore[return-value]
        raise InvalidArgument(cls.__name__, f"unknown wire value {value!r}")

    def __str__(self) -> str:
        return self.to_wire()


class CallLogType(WireEnum):
    """Which calls to include."""

    ALL = "all"
    MISSED = "missed"


class CallLogPathType(WireEnum):
    """The path a call took through the phone system."""

    PSTN = "pstn"
    VOIP = "voip"
    TRUNK = "trunk"
    VOICEMAIL = "voicemail"
    MESSAGE = "message"
    FORWARD = "forward"
    EXTENSION = "extension"
    CALL_QUEUE = "call_queue"
    IVR_MENU = "ivr_menu"
    AUTO_RECEPTIONIST = "auto_receptionist"
    CONTACT_CENTER = "contact_center"
    TOLL_FREE_NUMBER = "toll_free_number"
    MEETING = "meeting"


class CallLogTimeType(WireEnum):
    """Whether the date range applies to the start or the end of a call."""

    START_TIME = "start_time"
    END_TIME = "end_time"


_WIRE_TABLES: Dict[Type[WireEnum], Dict[WireEnum, str]] = {
    CallLogType: {
        CallLogType.ALL: "all",
        CallLogType.MISSED: "missed",
    },
    CallLogPathType: {
        CallLogPathType.PSTN: "pstn",
        CallLogPathType.VOIP: "voip",
        CallLogPathType.TRUNK: "trunk",
        CallLogPathType.VOICEMAIL: "voiceMail",
        CallLogPathType.MESSAGE: "message",
        CallLogPathType.FORWARD: "forward",
        CallLogPathType.EXTENSION: "extension",
        CallLogPathType.CALL_QUEUE: "callQueue",
        CallLogPathType.IVR_MENU: "ivrMenu",
        CallLogPathType.AUTO_RECEPTIONIST: "autoReceptionist",
        CallLogPathType.CONTACT_CENTER: "contactCenter",
        CallLogPathType.TOLL_FREE_NUMBER: "tollFreeNumber",
        CallLogPathType.MEETING: "meeting",
    },
    CallLogTimeType: {
        CallLogTimeType.START_TIME: "startTime",
        CallLogTimeType.END_TIME: "endTime",
    },
}


def _check_wire_tables() -> None:
    for enum_cls, table in _WIRE_TABLES.items():
        missing = [member.name for member in enum_cls if member not in table]
        if missing:
            raise TypeError(
                f"{enum_cls.__name__} has no wire string for: {', '.join(missing)}"
            )


_check_wire_tables()


def to_date(value: Optional[DateLike]) -> Optional[dt.date]:
    """Normalize a date-like value to a ``datetime.date``, dropping any time of day.

    Raises:
        InvalidArgument: If a string cannot be parsed as an ISO 8601 date.
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise InvalidArgument("date", f"expected a date or ISO 8601 string, got {value!r}")
    try:
        return dt.date.fromisoformat(value[:10])
    except ValueError:
        raise InvalidArgument("date", f"cannot parse {value!r} as a date") from None


def format_date(value: Union[dt.date, dt.datetime]) -> str:
    """Format a date or datetime as ``YYYY-MM-DD``."""
    if isinstance(value, dt.datetime):
        value = value.date()
    return value.isoformat()


@dataclass(frozen=True)
class DateRange:
    """An optional, inclusive calendar date range.

    Attributes:
        start: First day of the range, or ``None`` for open-ended.
        end: Last day of the range, or ``None`` for open-ended.
    """

    start: Optional[dt.date] = None
    end: Optional[dt.date] = None

    def __post_init__(self) -> None:
        if self.start and self.end and self.start > self.end:
            raise InvalidArgument(
                "from", f"start ({self.start}) must not be after end ({self.end})"
            )

    @classmethod
    def from_dates(
        cls, date_from: Optional[DateLike] = None, date_to: Optional[DateLike] = None
    ) -> "DateRange":
        """Build a range from loosely typed dates."""
        return cls(start=to_date(date_from), end=to_date(date_to))

    def to_params(self) -> Dict[str, Optional[dt.date]]:
        """Return the ``from`` / ``to`` query parameters (``None`` when open)."""
        return {"from": self.start, "to": self.end}
