"""Record classes for call-log results.

Records are plain dictionaries holding the JSON returned by the API, with a
few convenience accessors. No schema is enforced: fields the API adds later
are kept as-is.
"""

import datetime as dt
from typing import Any, Dict, Optional


def _parse_datetime(value: Optional[str]) -> Optional[dt.datetime]:
    if not value:
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return dt.datetime.fromisoformat(value)


class CallLog(dict):
    """Dictionary-like object representing one call-log entry."""

    def __init__(self, record: Dict[str, Any]) -> None:
        super().__init__(record)

    def id(self) -> str:
        return self.get("id", "")

    def direction(self) -> str:
        """``"inbound"`` or ``"outbound"``."""
        return self.get("direction", "")

    def duration(self) -> int:
        """Call duration in seconds."""
        return int(self.get("duration") or 0)

    def caller_number(self) -> str:
        return self.get("caller_number", "")

    def callee_number(self) -> str:
        return self.get("callee_number", "")

    def date_time(self) -> Optional[dt.datetime]:
        """When the call started, or ``None`` if the API did not say."""
        return _parse_datetime(self.get("date_time"))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id()!r}, direction={self.direction()!r}, "
            f"date_time={self.get('date_time')!r})"
        )


class UserCallLog(CallLog):
    """A call-log entry returned for a single user."""

    def result(self) -> str:
        """Outcome of the call, e.g. ``"Call connected"``."""
        return self.get("result", "")


class AccountCallLog(CallLog):
    """A call-log entry returned for the whole account."""

    def site(self) -> Dict[str, Any]:
        """The phone site the call belongs to (``id`` and ``name``)."""
        return self.get("site") or {}

    def charge(self) -> str:
        """Charge for the call as reported by the API, ``""`` when free."""
        return self.get("charge", "")
