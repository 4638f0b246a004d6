"""Paginated response envelopes shared across resources."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Mapping, Optional, TypeVar

T = TypeVar("T")


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _optional_date(value: Any) -> Optional[dt.date]:
    if not value:
        return None
    return dt.date.fromisoformat(str(value)[:10])


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of records plus the token needed to fetch the next one.

    Attributes:
        items: The decoded records of this page.
        next_page_token: Opaque continuation token, ``None`` on the last page.
        total_records: Total record count, when the API reports one.
        page_size: Page size echoed back by the API, when reported.
    """

    items: List[T]
    next_page_token: Optional[str] = None
    total_records: Optional[int] = None
    page_size: Optional[int] = None

    @property
    def has_more(self) -> bool:
        return self.next_page_token is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def _envelope_fields(cls, payload: Mapping[str, Any]) -> dict:
        return {
            # the API sends "" rather than omitting the token on the last page
            "next_page_token": payload.get("next_page_token") or None,
            "total_records": _optional_int(payload.get("total_records")),
            "page_size": _optional_int(payload.get("page_size")),
        }

    @classmethod
    def from_json(
        cls,
        payload: Mapping[str, Any],
        items_field: str,
        item_factory: Callable[[Any], T],
    ) -> "PaginatedResult[T]":
        """Decode a response envelope.

        Args:
            payload: The parsed JSON body.
            items_field: Key of the array holding the records.
            item_factory: Callable turning a raw JSON record into ``T``.

        Raises:
            TypeError: If the items field is not an array.
            ValueError: If an envelope field has an unparsable value.
        """
        raw_items = payload.get(items_field) or []
        if not isinstance(raw_items, list):
            raise TypeError(
                f"{items_field} must be an array, got {type(raw_items).__name__}"
            )
        return cls(
            items=[item_factory(item) for item in raw_items],
            **cls._envelope_fields(payload),
        )


@dataclass(frozen=True)
class PaginatedResultWithDateRange(PaginatedResult[T]):
    """A page that also echoes the date range the API filtered on."""

    from_date: Optional[dt.date] = None
    to_date: Optional[dt.date] = None

    @classmethod
    def _envelope_fields(cls, payload: Mapping[str, Any]) -> dict:
        fields = super()._envelope_fields(payload)
        fields["from_date"] = _optional_date(payload.get("from"))
        fields["to_date"] = _optional_date(payload.get("to"))
        return fields
