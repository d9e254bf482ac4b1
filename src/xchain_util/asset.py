"""Asset identifiers and their string notation.

Notation follows THORChain's asset memos
(https://docs.thorchain.org/developers/transaction-memos#asset-notation):

    CHAIN.SYMBOL[-SUFFIX]   native asset, e.g. ``ETH.RUNE-0x3155...``
    CHAIN/SYMBOL[-SUFFIX]   synthetic asset, e.g. ``BTC/BTC``

The ticker is the part of the symbol before the first ``-``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .chain import Chain, is_supported_chain

SYNTH_DELIMITER = "/"
NON_SYNTH_DELIMITER = "."

RUNE_TICKER = "RUNE"


@dataclass(frozen=True)
class Asset:
    """Asset on a chain. Two assets are equal when all four fields match."""

    chain: Chain
    symbol: str
    ticker: str
    synth: bool = False

    def __str__(self) -> str:
        return asset_to_string(self)


# Base "chain" assets, as defined in THORNode common/asset.go
ASSET_BNB = Asset(chain=Chain.BINANCE, symbol="BNB", ticker="BNB")
ASSET_BTC = Asset(chain=Chain.BITCOIN, symbol="BTC", ticker="BTC")
ASSET_BCH = Asset(chain=Chain.BITCOIN_CASH, symbol="BCH", ticker="BCH")
ASSET_LTC = Asset(chain=Chain.LITECOIN, symbol="LTC", ticker="LTC")
ASSET_DOGE = Asset(chain=Chain.DOGE, symbol="DOGE", ticker="DOGE")
ASSET_ETH = Asset(chain=Chain.ETHEREUM, symbol="ETH", ticker="ETH")

# RUNE on Binance chain (testnet / mainnet)
ASSET_RUNE_67C = Asset(chain=Chain.BINANCE, symbol="RUNE-67C", ticker=RUNE_TICKER)
ASSET_RUNE_B1A = Asset(chain=Chain.BINANCE, symbol="RUNE-B1A", ticker=RUNE_TICKER)

ASSET_RUNE_NATIVE = Asset(
    chain=Chain.THORCHAIN, symbol=RUNE_TICKER, ticker=RUNE_TICKER
)

# ERC20 RUNE (mainnet / testnet contracts)
ASSET_RUNE_ERC20 = Asset(
    chain=Chain.ETHEREUM,
    symbol=f"{RUNE_TICKER}-0x3155ba85d5f96b2d030a4966af206230e46849cb",
    ticker=RUNE_TICKER,
)
ASSET_RUNE_ERC20_TESTNET = Asset(
    chain=Chain.ETHEREUM,
    symbol=f"{RUNE_TICKER}-0xd601c6A3a36721320573885A8d8420746dA3d7A0",
    ticker=RUNE_TICKER,
)


def is_valid_asset(asset: Asset) -> bool:
    return bool(asset.chain) and bool(asset.ticker) and bool(asset.symbol)


def is_synth_asset(asset: Asset) -> bool:
    return asset.synth


def eq_asset(a: Asset, b: Asset) -> bool:
    return (
        a.chain == b.chain
        and a.symbol == b.symbol
        and a.ticker == b.ticker
        and a.synth == b.synth
    )


def parse_asset(s: str) -> Asset | None:
    """Parse an asset string such as ``BNB.RUNE-B1A`` or ``BTC/BTC``.

    A ``/`` anywhere in the string marks a synth, even if a ``.`` comes first.

    Returns:
        The parsed asset, or None if there is no delimiter, the symbol is
        empty or the chain is not supported.
    """
    synth = SYNTH_DELIMITER in s
    delimiter = SYNTH_DELIMITER if synth else NON_SYNTH_DELIMITER
    parts = s.split(delimiter, 1)
    if len(parts) < 2 or not parts[1]:
        return None

    chain = parts[0]
    if not is_supported_chain(chain):
        return None

    symbol = parts[1]
    ticker = symbol.split("-")[0]
    return Asset(chain=Chain(chain), symbol=symbol, ticker=ticker, synth=synth)


def asset_to_string(asset: Asset) -> str:
    """Render ``asset`` as ``CHAIN.SYMBOL`` or ``CHAIN/SYMBOL`` for synths.

    The ticker is not part of the notation and is not checked against the
    symbol.
    """
    delimiter = SYNTH_DELIMITER if asset.synth else NON_SYNTH_DELIMITER
    return f"{asset.chain}{delimiter}{asset.symbol}"
