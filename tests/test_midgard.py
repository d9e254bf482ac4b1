from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from xchain_util.chain import Chain
from xchain_util.inbound import InboundDetail
from xchain_util.midgard import (
    INBOUND_ADDRESSES_PATH,
    MIMIR_PATH,
    MidgardClient,
    MidgardUnavailableError,
    get_all_inbound_details,
    get_inbound_details,
    get_mimir_details,
)
from xchain_util.settings import Network, XChainUtilSettings

PRIMARY = "https://midgard-a.example"
SECONDARY = "https://midgard-b.example"
TESTNET = "https://testnet-midgard.example"

MIMIR = {"HALTBTCCHAIN": 0, "HALTDOGECHAIN": 1, "PAUSELP": 1}
INBOUND = [
    {
        "chain": "BTC",
        "pub_key": "thorpub1btc",
        "address": "bc1qvault",
        "halted": False,
        "gas_rate": "12",
    },
    {
        "chain": "ETH",
        "pub_key": "thorpub1eth",
        "address": "0xvault",
        "halted": False,
        "gas_rate": "40",
        "router": "0xrouter",
    },
]


def _response(payload=None, status: int = 200, bad_json: bool = False) -> MagicMock:
    response = MagicMock()
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Server Error"
        )
    if bad_json:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


class FakeMidgard:
    """Stands in for ``requests.get`` and answers from a URL table."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[str] = []
        self.timeouts: list[float] = []

    def __call__(self, url: str, timeout: float | None = None):
        self.calls.append(url)
        self.timeouts.append(timeout)
        if url not in self.routes:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        result = self.routes[url]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def settings():
    return XChainUtilSettings(
        midgard_mainnet_urls=[PRIMARY, SECONDARY],
        midgard_testnet_urls=[TESTNET],
        request_timeout=3.5,
    )


@pytest.fixture
def client(settings):
    return MidgardClient(settings)


def _patch_get(fake: FakeMidgard):
    return patch("xchain_util.midgard.requests.get", side_effect=fake)


@pytest.mark.asyncio
async def test_mimir_uses_first_answering_endpoint(client):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: _response(MIMIR),
            SECONDARY + MIMIR_PATH: _response({"OTHER": 1}),
        }
    )
    with _patch_get(fake):
        result = await client.get_mimir_details()

    assert result == MIMIR
    assert fake.calls == [PRIMARY + MIMIR_PATH]
    assert fake.timeouts == [3.5]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "failure",
    [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.Timeout("read timed out"),
        _response(status=503),
        _response(bad_json=True),
        _response(["not", "a", "mapping"]),
    ],
    ids=["connection", "timeout", "http-status", "bad-json", "wrong-shape"],
)
async def test_mimir_fails_over_to_next_endpoint(client, failure):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: failure,
            SECONDARY + MIMIR_PATH: _response(MIMIR),
        }
    )
    with _patch_get(fake):
        result = await client.get_mimir_details()

    assert result == MIMIR
    assert fake.calls == [PRIMARY + MIMIR_PATH, SECONDARY + MIMIR_PATH]


@pytest.mark.asyncio
async def test_failed_endpoint_is_logged(client, caplog):
    fake = FakeMidgard({SECONDARY + MIMIR_PATH: _response(MIMIR)})
    with caplog.at_level(logging.WARNING, logger="xchain_util.midgard"):
        with _patch_get(fake):
            await client.get_mimir_details()

    assert any(
        PRIMARY + MIMIR_PATH in record.getMessage()
        for record in caplog.records
        if record.levelno == logging.WARNING
    )


@pytest.mark.asyncio
async def test_exhausted_endpoints_raise(client):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: requests.exceptions.Timeout("slow"),
            SECONDARY + MIMIR_PATH: _response(status=500),
        }
    )
    with _patch_get(fake):
        with pytest.raises(MidgardUnavailableError) as exc_info:
            await client.get_mimir_details()

    assert str(exc_info.value) == "Midgard not responding"
    assert exc_info.value.path == MIMIR_PATH
    assert exc_info.value.attempted == [PRIMARY, SECONDARY]
    # each candidate is tried exactly once
    assert fake.calls == [PRIMARY + MIMIR_PATH, SECONDARY + MIMIR_PATH]


@pytest.mark.asyncio
async def test_all_inbound_details_are_validated(client):
    fake = FakeMidgard({PRIMARY + INBOUND_ADDRESSES_PATH: _response(INBOUND)})
    with _patch_get(fake):
        records = await client.get_all_inbound_details()

    assert [record.chain for record in records] == ["BTC", "ETH"]
    assert records[1].router == "0xrouter"
    assert records[0].router is None


@pytest.mark.asyncio
async def test_malformed_inbound_payload_fails_over(client):
    fake = FakeMidgard(
        {
            PRIMARY + INBOUND_ADDRESSES_PATH: _response([{"chain": "BTC"}]),
            SECONDARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
        }
    )
    with _patch_get(fake):
        records = await client.get_all_inbound_details()

    assert len(records) == 2
    assert fake.calls == [
        PRIMARY + INBOUND_ADDRESSES_PATH,
        SECONDARY + INBOUND_ADDRESSES_PATH,
    ]


@pytest.mark.asyncio
async def test_sparse_record_of_another_chain_does_not_reject_endpoint(client):
    payload = INBOUND + [{"chain": "GAIA", "address": "cosmos1vault", "halted": True}]
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: _response({}),
            PRIMARY + INBOUND_ADDRESSES_PATH: _response(payload),
        }
    )
    with _patch_get(fake):
        detail = await client.get_inbound_details(Chain.BITCOIN)

    assert detail.vault == "bc1qvault"
    assert SECONDARY + INBOUND_ADDRESSES_PATH not in fake.calls


@pytest.mark.asyncio
async def test_inbound_details_merge_record_and_flags(client):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: _response({"HALTETHTRADING": 1}),
            PRIMARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
        }
    )
    with _patch_get(fake):
        detail = await client.get_inbound_details(Chain.ETHEREUM)

    assert detail == InboundDetail(
        vault="0xvault",
        halted_chain=False,
        halted_trading=True,
        halted_lp=False,
        router="0xrouter",
    )


@pytest.mark.asyncio
async def test_inbound_details_for_chain_without_record(client):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: requests.exceptions.ConnectionError("down"),
            SECONDARY + MIMIR_PATH: _response(MIMIR),
            PRIMARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
        }
    )
    with _patch_get(fake):
        detail = await client.get_inbound_details(Chain.DOGE)

    assert detail.vault == ""
    assert detail.router is None
    assert detail.halted_chain is True
    assert detail.halted_trading is False
    assert detail.halted_lp is True
    assert fake.calls.count(PRIMARY + INBOUND_ADDRESSES_PATH) == 1
    assert SECONDARY + INBOUND_ADDRESSES_PATH not in fake.calls


@pytest.mark.asyncio
async def test_inbound_details_require_both_lookups(client):
    fake = FakeMidgard(
        {
            PRIMARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
            SECONDARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
        }
    )
    with _patch_get(fake):
        with pytest.raises(MidgardUnavailableError) as exc_info:
            await client.get_inbound_details(Chain.BITCOIN)

    assert exc_info.value.path == MIMIR_PATH


@pytest.mark.asyncio
async def test_testnet_uses_testnet_endpoints(client):
    fake = FakeMidgard({TESTNET + MIMIR_PATH: _response({"PAUSELP": 0})})
    with _patch_get(fake):
        result = await client.get_mimir_details(Network.TESTNET)

    assert result == {"PAUSELP": 0}
    assert fake.calls == [TESTNET + MIMIR_PATH]


@pytest.mark.asyncio
async def test_network_may_be_given_as_string(client):
    fake = FakeMidgard({TESTNET + MIMIR_PATH: _response({})})
    with _patch_get(fake):
        assert await client.get_mimir_details("testnet") == {}


@pytest.mark.asyncio
async def test_unknown_network_is_rejected(client):
    with pytest.raises(ValueError):
        await client.get_mimir_details("stagenet")


@pytest.mark.asyncio
async def test_module_level_functions(settings):
    fake = FakeMidgard(
        {
            PRIMARY + MIMIR_PATH: _response(MIMIR),
            PRIMARY + INBOUND_ADDRESSES_PATH: _response(INBOUND),
        }
    )
    with _patch_get(fake):
        assert await get_mimir_details(settings=settings) == MIMIR
        records = await get_all_inbound_details(Network.MAINNET, settings)
        detail = await get_inbound_details("BTC", settings=settings)

    assert len(records) == 2
    assert detail.vault == "bc1qvault"
    assert detail.halted_chain is False
    assert detail.halted_lp is True


def test_client_defaults_to_environment_settings(monkeypatch):
    monkeypatch.setenv("XCHAIN_UTIL_REQUEST_TIMEOUT", "7")
    assert MidgardClient().settings.request_timeout == 7.0
