"""Tests for the NHTSA vPIC HTTP client (mocked with respx)."""
import httpx
import pytest
import respx

from app.errors import VpicProviderError
from app.repositories.nhtsa import NhtsaVinRepository, NhtsaVpicClient

BASE_URL = "https://vpic.test/api/vehicles"
VIN = "1FTFW1E50LFA00001"


@pytest.fixture
def client():
    return NhtsaVpicClient(base_url=BASE_URL, timeout=5)


class TestDecodeVinValues:
    @respx.mock
    @pytest.mark.asyncio
    async def test_returns_first_result(self, client, ford_elements):
        route = respx.get(f"{BASE_URL}/DecodeVinValues/{VIN}").mock(
            return_value=httpx.Response(200, json={"Count": 1, "Results": [ford_elements]})
        )

        elements = await client.decode_vin_values(VIN)

        assert route.called
        assert route.calls.last.request.url.params["format"] == "json"
        assert elements["Make"] == "FORD"
        assert elements["Transmission Style"] == "Automatic"

    @respx.mock
    @pytest.mark.asyncio
    async def test_empty_results(self, client):
        respx.get(f"{BASE_URL}/DecodeVinValues/{VIN}").mock(
            return_value=httpx.Response(200, json={"Count": 0, "Results": []})
        )
        with pytest.raises(VpicProviderError):
            await client.decode_vin_values(VIN)

    @respx.mock
    @pytest.mark.asyncio
    async def test_http_error(self, client):
        respx.get(f"{BASE_URL}/DecodeVinValues/{VIN}").mock(return_value=httpx.Response(503))

        with pytest.raises(VpicProviderError) as exc_info:
            await client.decode_vin_values(VIN)

        err = exc_info.value
        assert err.status_code == 502
        assert err.data["status"] == 503
        assert isinstance(err.inner_error, httpx.HTTPStatusError)

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self, client):
        respx.get(f"{BASE_URL}/DecodeVinValues/{VIN}").mock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(VpicProviderError) as exc_info:
            await client.decode_vin_values(VIN)
        assert isinstance(exc_info.value.inner_error, httpx.ConnectError)

    @respx.mock
    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        respx.get(f"{BASE_URL}/DecodeVinValues/{VIN}").mock(return_value=httpx.Response(200, text="<html>"))
        with pytest.raises(VpicProviderError):
            await client.decode_vin_values(VIN)


@respx.mock
@pytest.mark.asyncio
async def test_get_models_for_make_id_year(client):
    respx.get(f"{BASE_URL}/GetModelsForMakeIdYear/makeId/460/modelyear/2020").mock(
        return_value=httpx.Response(200, json={
            "Count": 2,
            "Results": [
                {"Make_ID": 460, "Make_Name": "FORD", "Model_ID": 1801, "Model_Name": "F-150"},
                {"Make_ID": 460, "Make_Name": "FORD", "Model_ID": 1802, "Model_Name": "Ranger"},
            ],
        })
    )

    models = await client.get_models_for_make_id_year(460, 2020)

    assert [m["Model_Name"] for m in models] == ["F-150", "Ranger"]


@respx.mock
@pytest.mark.asyncio
async def test_vin_repository_delegates_to_client(client, incomplete_vin_elements):
    respx.get(f"{BASE_URL}/DecodeVinValues/1FTFW1E5").mock(
        return_value=httpx.Response(200, json={"Results": [incomplete_vin_elements]})
    )

    elements = await NhtsaVinRepository(client).vin_decode("1FTFW1E5")

    assert elements["ErrorCode"] == "6"


@respx.mock
@pytest.mark.asyncio
async def test_vin_is_escaped_in_path(client, ford_elements):
    route = respx.get(f"{BASE_URL}/DecodeVinValues/1FT%3Fx%23y").mock(
        return_value=httpx.Response(200, json={"Results": [ford_elements]})
    )

    await client.decode_vin_values("1FT?x#y")

    assert route.called
    assert route.calls.last.request.url.params["format"] == "json"
