"""Tests for the setup wizard download."""

import asyncio

import httpx
import pytest

from adapters.setup_fetcher import fetch_setup_script
from core.config import OFFICIAL_SETUP_URL, USER_AGENT
from core.domain.errors import FetchError, FetchErrorKind


def _transport(handler):
    return httpx.MockTransport(handler)


def test_returns_body_unmodified_and_identifies_client():
    seen = []
    body = "#!/usr/bin/env python3\r\nprint('wizard')\n\n"

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text=body)

    source = fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert source == body
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == OFFICIAL_SETUP_URL
    assert seen[0].headers["User-Agent"] == USER_AGENT


def test_http_500_reports_status_and_excerpt():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    error = excinfo.value
    assert error.kind is FetchErrorKind.HTTP_STATUS
    assert error.status == 500
    assert error.body_excerpt == "boom"
    assert str(error) == "Setup endpoint returned 500: boom"
    assert len(calls) == 1


def test_http_error_body_is_truncated_to_200_chars():
    def handler(request):
        return httpx.Response(503, text="x" * 1000)

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert excinfo.value.body_excerpt == "x" * 200
    assert str(excinfo.value) == "Setup endpoint returned 503: " + "x" * 200


def test_http_error_without_body():
    def handler(request):
        return httpx.Response(404)

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert str(excinfo.value) == "Setup endpoint returned 404"


@pytest.mark.parametrize("body", ["", "   ", "\n\t\n"])
def test_blank_body_is_an_empty_response(body):
    def handler(request):
        return httpx.Response(200, text=body)

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert excinfo.value.kind is FetchErrorKind.EMPTY_RESPONSE
    assert str(excinfo.value) == "Received empty setup script"


def test_slow_endpoint_times_out():
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, text="print('late')")

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 50, transport=_transport(handler))

    assert excinfo.value.kind is FetchErrorKind.TIMEOUT
    assert "50ms" in str(excinfo.value)


def test_transport_timeout_is_reported_as_timeout():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert excinfo.value.kind is FetchErrorKind.TIMEOUT


def test_connection_failure_is_a_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as excinfo:
        fetch_setup_script(OFFICIAL_SETUP_URL, 1000, transport=_transport(handler))

    assert excinfo.value.kind is FetchErrorKind.NETWORK
    assert "connection refused" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
