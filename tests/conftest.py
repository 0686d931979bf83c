"""Shared fixtures for urlshort tests."""

import pytest

from urlshort.http.request import Request
from urlshort.http.response import Response


class RecordingFallback:
    """Fallback handler that remembers every request it was given."""

    def __init__(self, body: str = "default", status: int = 200) -> None:
        self.response = Response(body=body, status=status)
        self.calls: list[Request] = []

    async def __call__(self, request: Request) -> Response:
        self.calls.append(request)
        return self.response


@pytest.fixture
def fallback() -> RecordingFallback:
    return RecordingFallback()


@pytest.fixture
def fallback_404() -> RecordingFallback:
    return RecordingFallback(body="Not Found", status=404)
