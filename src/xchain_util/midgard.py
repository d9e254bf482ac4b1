"""Midgard client for mimir flags and inbound addresses.

Every lookup walks the configured Midgard base URLs in order. A candidate
that fails (transport error, HTTP error status, undecodable or malformed
payload) is logged and skipped; it is never retried within the same call.
When all candidates fail, ``MidgardUnavailableError`` is raised.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from .chain import Chain
from .inbound import (
    INBOUND_DETAILS_ADAPTER,
    InboundDetail,
    ServerInboundDetail,
    merge_inbound_detail,
)
from .logger import get_logger
from .settings import Network, XChainUtilSettings

logger = get_logger(__name__)

MIMIR_PATH = "/v2/thorchain/mimir"
INBOUND_ADDRESSES_PATH = "/v2/thorchain/inbound_addresses"

T = TypeVar("T")


class MidgardUnavailableError(Exception):
    """Raised when no configured Midgard endpoint answered a request."""

    def __init__(self, path: str, attempted: list[str]):
        super().__init__("Midgard not responding")
        self.path = path
        self.attempted = attempted


def _parse_mimir(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid mimir response structure: {data!r}")
    return data


def _parse_inbound_details(data: Any) -> list[ServerInboundDetail]:
    return INBOUND_DETAILS_ADAPTER.validate_python(data)


class MidgardClient:
    """Reads THORChain network state from Midgard.

    Args:
        settings: Source of the Midgard base URLs and request timeout.
            Defaults to ``XChainUtilSettings()``.
    """

    def __init__(self, settings: XChainUtilSettings | None = None):
        self.settings = settings if settings is not None else XChainUtilSettings()

    async def _http_get(self, url: str) -> requests.Response:
        return await asyncio.to_thread(
            requests.get, url, timeout=self.settings.request_timeout
        )

    async def _get_with_failover(
        self, network: Network, path: str, parse: Callable[[Any], T]
    ) -> T:
        network = Network(network)
        base_urls = self.settings.midgard_base_urls(network)
        for base_url in base_urls:
            url = f"{base_url}{path}"
            logger.debug("Calling %s", url)
            try:
                response = await self._http_get(url)
                response.raise_for_status()
                return parse(response.json())
            except requests.exceptions.RequestException as e:
                logger.warning("Midgard request to %s failed: %s", url, e)
            except ValueError as e:
                logger.warning("Invalid Midgard response from %s: %s", url, e)

        logger.error(
            "Midgard not responding for %s on %s (tried %d endpoints)",
            path,
            network.value,
            len(base_urls),
        )
        raise MidgardUnavailableError(path, base_urls)

    async def get_mimir_details(
        self, network: Network = Network.MAINNET
    ) -> dict[str, Any]:
        """Fetch the mimir key/value flags."""
        return await self._get_with_failover(network, MIMIR_PATH, _parse_mimir)

    async def get_all_inbound_details(
        self, network: Network = Network.MAINNET
    ) -> list[ServerInboundDetail]:
        """Fetch inbound address records of all chains."""
        return await self._get_with_failover(
            network, INBOUND_ADDRESSES_PATH, _parse_inbound_details
        )

    async def get_inbound_details(
        self, chain: Chain | str, network: Network = Network.MAINNET
    ) -> InboundDetail:
        """Vault, router and halt status of ``chain``.

        Mimir flags and inbound addresses are fetched concurrently; both
        must succeed.

        Raises:
            MidgardUnavailableError: If either lookup ran out of endpoints.
        """
        mimir, inbound_details = await asyncio.gather(
            self.get_mimir_details(network),
            self.get_all_inbound_details(network),
        )
        return merge_inbound_detail(chain, mimir, inbound_details)


async def get_mimir_details(
    network: Network = Network.MAINNET,
    settings: XChainUtilSettings | None = None,
) -> dict[str, Any]:
    return await MidgardClient(settings).get_mimir_details(network)


async def get_all_inbound_details(
    network: Network = Network.MAINNET,
    settings: XChainUtilSettings | None = None,
) -> list[ServerInboundDetail]:
    return await MidgardClient(settings).get_all_inbound_details(network)


async def get_inbound_details(
    chain: Chain | str,
    network: Network = Network.MAINNET,
    settings: XChainUtilSettings | None = None,
) -> InboundDetail:
    return await MidgardClient(settings).get_inbound_details(chain, network)
