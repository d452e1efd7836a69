"""
End-to-end tests for the module-level entry points.

All three upstream services are mocked at the HTTP layer with respx,
so these exercise the real adapters, service and error paths together.
"""

import httpx
import pytest
import respx

from src.iss_flyover import (
    Coordinates,
    FlyoverConfig,
    FlyoverWindow,
    UpstreamParseError,
    UpstreamStatusError,
    fetch_coords_by_ip,
    fetch_iss_flyover_times,
    fetch_my_ip,
    next_iss_times_for_my_location,
)
from src.iss_flyover.config import IPIFY_URL, ISS_PASS_URL

GEO_URL = "https://freegeoip.app/json/1.2.3.4"


@pytest.fixture
def mocked_upstreams(sample_geo_response: dict, sample_pass_response: dict):
    """Mock all three services with successful responses."""
    with respx.mock(assert_all_called=False) as mock:
        mock.get(IPIFY_URL, name="ip").mock(
            return_value=httpx.Response(200, json={"ip": "1.2.3.4"})
        )
        mock.get(GEO_URL, name="geo").mock(
            return_value=httpx.Response(200, json=sample_geo_response)
        )
        mock.get(ISS_PASS_URL, name="passes").mock(
            return_value=httpx.Response(200, json=sample_pass_response)
        )
        yield mock


class TestEntryPoints:
    """Each module-level function follows its resolver contract."""

    @pytest.mark.anyio
    async def test_fetch_my_ip(self, mocked_upstreams):
        assert await fetch_my_ip() == "1.2.3.4"

    @pytest.mark.anyio
    async def test_fetch_coords_by_ip(self, mocked_upstreams):
        coords = await fetch_coords_by_ip("1.2.3.4")

        assert coords == Coordinates(latitude=40.7, longitude=-74.0)

    @pytest.mark.anyio
    async def test_fetch_iss_flyover_times(self, mocked_upstreams, sample_windows: list):
        passes = await fetch_iss_flyover_times(Coordinates(latitude=40.7, longitude=-74.0))

        assert passes == sample_windows

    @pytest.mark.anyio
    async def test_shared_client_stays_open(self, mocked_upstreams):
        async with httpx.AsyncClient() as client:
            await fetch_my_ip(client=client)
            await fetch_coords_by_ip("1.2.3.4", client=client)
            assert not client.is_closed


class TestNextISSTimes:
    """End-to-end orchestration scenarios."""

    @pytest.mark.anyio
    async def test_end_to_end_success(self, mocked_upstreams):
        passes = await next_iss_times_for_my_location()

        assert passes == [
            FlyoverWindow(risetime=1600000000, duration=600),
            FlyoverWindow(risetime=1600050000, duration=540),
        ]
        assert mocked_upstreams["ip"].call_count == 1
        assert mocked_upstreams["geo"].call_count == 1
        assert mocked_upstreams["passes"].call_count == 1

        params = mocked_upstreams["passes"].calls.last.request.url.params
        assert (params["lat"], params["lon"]) == ("40.7", "-74.0")

    @pytest.mark.anyio
    async def test_geolocation_500_stops_before_flyovers(self, mocked_upstreams):
        mocked_upstreams["geo"].mock(return_value=httpx.Response(500, text="server error"))

        with pytest.raises(UpstreamStatusError) as exc_info:
            await next_iss_times_for_my_location()

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "server error"
        assert not mocked_upstreams["passes"].called

    @pytest.mark.anyio
    async def test_ip_transport_failure_stops_everything(self, mocked_upstreams):
        error = httpx.ConnectError("getaddrinfo ENOTFOUND api.ipify.org")
        mocked_upstreams["ip"].mock(side_effect=error)

        with pytest.raises(httpx.ConnectError) as exc_info:
            await next_iss_times_for_my_location()

        assert exc_info.value is error
        assert not mocked_upstreams["geo"].called
        assert not mocked_upstreams["passes"].called

    @pytest.mark.anyio
    async def test_ip_status_failure_reports_code_and_body(self, mocked_upstreams):
        mocked_upstreams["ip"].mock(return_value=httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(UpstreamStatusError, match="Status Code 502 when fetching IP"):
            await next_iss_times_for_my_location()

        assert not mocked_upstreams["geo"].called

    @pytest.mark.anyio
    async def test_flyover_parse_failure(self, mocked_upstreams):
        mocked_upstreams["passes"].mock(
            return_value=httpx.Response(200, json={"message": "failure"})
        )

        with pytest.raises(UpstreamParseError):
            await next_iss_times_for_my_location()

    @pytest.mark.anyio
    async def test_custom_endpoints(self, sample_pass_response: dict):
        config = FlyoverConfig(
            ip_url="https://ip.example.test/",
            geolocation_url_template="https://geo.example.test/lookup/{ip}",
            flyover_url="https://passes.example.test/json/",
        )

        with respx.mock:
            respx.get("https://ip.example.test/").mock(
                return_value=httpx.Response(200, json={"ip": "9.9.9.9"})
            )
            respx.get("https://geo.example.test/lookup/9.9.9.9").mock(
                return_value=httpx.Response(200, json={"latitude": 1.5, "longitude": 2.5})
            )
            passes_route = respx.get("https://passes.example.test/json/").mock(
                return_value=httpx.Response(200, json=sample_pass_response)
            )

            passes = await next_iss_times_for_my_location(config=config)

        assert len(passes) == 2
        assert passes_route.calls.last.request.url.params["lat"] == "1.5"
