"""Tests for call-log records and paginated envelopes."""

import datetime as dt

import pytest
from phonelogs import (
    AccountCallLog,
    PaginatedResult,
    PaginatedResultWithDateRange,
    UserCallLog,
)


class TestCallLogRecords:
    """Tests for record accessors."""

    def test_user_call_log(self, user_envelope):
        log = UserCallLog(user_envelope["call_logs"][0])

        assert log.id() == "c8e15a7b-52b3-4d41-a0f4-cb6d05d6e4a1"
        assert log.direction() == "inbound"
        assert log.duration() == 187
        assert log.caller_number() == "+12055550142"
        assert log.callee_number() == "1003"
        assert log.result() == "Call connected"
        assert log.date_time() == dt.datetime(2024, 1, 4, 15, 21, 9, tzinfo=dt.timezone.utc)

    def test_account_call_log(self, account_envelope):
        log = AccountCallLog(account_envelope["call_logs"][0])

        assert log.site() == {"id": "8f71O6rWT8KFUGQmJIFAdQ", "name": "Main Site"}
        assert log.charge() == "$0.02"
        assert log["path"] == "pstn"

    def test_missing_fields(self):
        """Test that absent fields fall back to empty values."""
        log = AccountCallLog({})

        assert log.id() == ""
        assert log.duration() == 0
        assert log.date_time() is None
        assert log.site() == {}
        assert log.charge() == ""

    def test_records_are_dicts(self):
        """Test that unknown API fields are kept."""
        log = UserCallLog({"id": "1", "recording_type": "OnDemand"})

        assert log == {"id": "1", "recording_type": "OnDemand"}
        assert "UserCallLog(id='1'" in repr(log)


class TestPaginatedResult:
    """Tests for envelope decoding."""

    def test_from_json(self, user_envelope):
        page = PaginatedResult.from_json(user_envelope, "call_logs", UserCallLog)

        assert [log["id"] for log in page] == [
            log["id"] for log in user_envelope["call_logs"]
        ]
        assert page.next_page_token == "Rl6sJ5Yc3nUPL8hqTDJ2Wf0Ke8Eu1Bs5zMa"
        assert page.total_records == 3

    def test_date_range_envelope(self, account_envelope):
        page = PaginatedResultWithDateRange.from_json(
            account_envelope, "call_logs", AccountCallLog
        )

        assert page.from_date == dt.date(2024, 2, 1)
        assert page.to_date == dt.date(2024, 2, 29)
        assert page.next_page_token is None

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"from": "2024-03-01T00:00:00Z"}, dt.date(2024, 3, 1)),
            ({"from": ""}, None),
            ({}, None),
        ],
        ids=["datetime_str", "empty", "missing"],
    )
    def test_envelope_from_date(self, payload, expected):
        page = PaginatedResultWithDateRange.from_json(payload, "call_logs", dict)
        assert page.from_date == expected

    def test_pages_are_frozen(self):
        page = PaginatedResult(items=[])
        with pytest.raises(AttributeError):
            page.next_page_token = "x"  # type: ignore[misc]
