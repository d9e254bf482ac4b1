"""Supported chains."""

from __future__ import annotations

from enum import Enum


class Chain(str, Enum):
    BINANCE = "BNB"
    BITCOIN = "BTC"
    ETHEREUM = "ETH"
    THORCHAIN = "THOR"
    COSMOS = "GAIA"
    POLKADOT = "POLKA"
    BITCOIN_CASH = "BCH"
    LITECOIN = "LTC"
    TERRA = "TERRA"
    DOGE = "DOGE"

    def __str__(self) -> str:
        return self.value


BNB_CHAIN = Chain.BINANCE
BTC_CHAIN = Chain.BITCOIN
ETH_CHAIN = Chain.ETHEREUM
THOR_CHAIN = Chain.THORCHAIN
COSMOS_CHAIN = Chain.COSMOS
POLKADOT_CHAIN = Chain.POLKADOT
BCH_CHAIN = Chain.BITCOIN_CASH
LTC_CHAIN = Chain.LITECOIN
TERRA_CHAIN = Chain.TERRA
DOGE_CHAIN = Chain.DOGE

UNKNOWN_CHAIN = "unknown chain"

CHAIN_DISPLAY_NAMES: dict[Chain, str] = {
    Chain.THORCHAIN: "Thorchain",
    Chain.BITCOIN: "Bitcoin",
    Chain.BITCOIN_CASH: "Bitcoin Cash",
    Chain.LITECOIN: "Litecoin",
    Chain.ETHEREUM: "Ethereum",
    Chain.BINANCE: "Binance Chain",
    Chain.COSMOS: "Cosmos",
    Chain.POLKADOT: "Polkadot",
    Chain.TERRA: "Terra",
    Chain.DOGE: "Dogecoin",
}


def is_supported_chain(code: object) -> bool:
    """Check whether ``code`` is exactly one of the supported chain codes.

    Matching is case-sensitive: ``"BTC"`` is supported, ``"btc"`` is not.
    """
    return isinstance(code, str) and any(code == chain.value for chain in Chain)


def chain_display_name(chain: Chain | str) -> str:
    """Human readable name of ``chain``, or ``"unknown chain"`` for anything else."""
    if not is_supported_chain(chain):
        return UNKNOWN_CHAIN
    return CHAIN_DISPLAY_NAMES[Chain(chain)]
