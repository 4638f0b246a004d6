"""Pytest configuration and shared fixtures for unit tests."""

import json
import threading
from pathlib import Path
from typing import Any, List

import pytest
import requests
from phonelogs import PaginatedQueryExecutor, System
from phonelogs._core import RequestConfig

TEST_SYSTEM = System("TEST", "https://api.test.invalid/v2/")
FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_response(payload: Any, status: int = 200) -> requests.Response:
    """Build a ``requests.Response`` whose body is *payload*.

    Strings are used verbatim as the body; anything else is JSON-encoded.
    """
    response = requests.Response()
    response.status_code = status
    body = payload if isinstance(payload, str) else json.dumps(payload)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeTransport:
    """Transport returning a canned payload and recording every request."""

    def __init__(self, payload: Any = None, status: int = 200) -> None:
        self.payload = payload if payload is not None else {}
        self.status = status
        self.requests: List[RequestConfig] = []

    def request(self, config: RequestConfig) -> requests.Response:
        self.requests.append(config)
        response = make_response(self.payload, self.status)
        response.raise_for_status()
        return response


class BlockingTransport(FakeTransport):
    """Transport that blocks inside ``request`` until released."""

    def __init__(self, payload: Any = None) -> None:
        super().__init__(payload)
        self.started = threading.Event()
        self.release = threading.Event()

    def request(self, config: RequestConfig) -> requests.Response:
        self.started.set()
        self.release.wait(timeout=10)
        return super().request(config)


class FailingTransport(FakeTransport):
    """Transport raising the given ``requests`` exception."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    def request(self, config: RequestConfig) -> requests.Response:
        self.requests.append(config)
        raise self.error


def load_envelope(name: str) -> dict:
    """Load a response envelope from ``fixtures/envelopes``."""
    with open(FIXTURES_DIR / "envelopes" / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def user_envelope():
    return load_envelope("user_call_logs")


@pytest.fixture
def account_envelope():
    return load_envelope("account_call_logs")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def executor(transport):
    return PaginatedQueryExecutor(transport, TEST_SYSTEM)
