"""
Pytest fixtures and configuration for the storefront data layer tests

Provides an in-memory storage, a fresh Dispatcher and a mock network that
answers requests with canned JSON files from tests/responses/.

Author: TM3
Date: 2026-10-19
"""
from pathlib import Path
from typing import Dict, List

import pytest

from storefront.connectors.network import Request
from storefront.core.database import StorageManager
from storefront.core.exceptions import NetworkError
from storefront.dispatcher import Dispatcher

RESPONSES_DIR = Path(__file__).parent / "responses"


def read_response(filename: str) -> bytes:
    """Raw bytes of tests/responses/<filename>.json"""
    return (RESPONSES_DIR / f"{filename}.json").read_bytes()


class MockNetwork:
    """
    Network double: serves canned responses by URL suffix

    Requests without a simulated response fail with NetworkError, the same
    way a request with no reply does.
    """

    def __init__(self):
        self._responses: Dict[str, bytes] = {}
        self.requests: List[Request] = []

    def simulate_response(self, request_url_suffix: str, filename: str) -> None:
        self._responses[request_url_suffix] = read_response(filename)

    def simulate_raw_response(self, request_url_suffix: str, data: bytes) -> None:
        self._responses[request_url_suffix] = data

    async def response_data(self, request: Request) -> bytes:
        self.requests.append(request)
        for suffix, data in self._responses.items():
            if request.path.endswith(suffix):
                return data
        raise NetworkError(f"No response for {request.path}")


class CompletionRecorder:
    """Callable that records every (result, error) it receives"""

    def __init__(self):
        self.calls = []

    def __call__(self, result, error):
        self.calls.append((result, error))

    @property
    def result(self):
        assert len(self.calls) == 1, f"expected one callback, got {len(self.calls)}"
        return self.calls[0][0]

    @property
    def error(self):
        assert len(self.calls) == 1, f"expected one callback, got {len(self.calls)}"
        return self.calls[0][1]


@pytest.fixture
def sample_site_id():
    return 123


@pytest.fixture
def network():
    return MockNetwork()


@pytest.fixture
def storage():
    """
    Isolated in-memory storage per test

    Scope: function (each test starts empty)
    """
    manager = StorageManager.in_memory()
    yield manager
    manager.close()


@pytest.fixture
def dispatcher():
    return Dispatcher()


@pytest.fixture
def completion():
    return CompletionRecorder()


@pytest.fixture
def load_response():
    """Raw bytes of a canned response, by file name without extension"""
    return read_response
