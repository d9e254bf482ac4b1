"""Human readable rendering of amounts."""

from __future__ import annotations

import re
from enum import Enum

from .amount import AssetAmount, BaseAmount, asset_to_base, base_to_asset
from .asset import ASSET_BTC, ASSET_ETH, RUNE_TICKER, Asset
from .decimals import format_decimal

# Amounts of BTC at or below this many sats are shown in sats
SATOSHI_DISPLAY_THRESHOLD = 1_000_000

_TRAILING_ZEROS = re.compile(r"(\.[0-9]*[1-9])0+$|\.0*$")
_LEADING_ZEROS = re.compile(r"\b0*([1-9][0-9]*|0)\b")


class AssetCurrencySymbol(str, Enum):
    RUNE = "ᚱ"
    BTC = "₿"
    SATOSHI = "⚡"
    ETH = "Ξ"
    USD = "$"


def trim_zeros(value: str) -> str:
    """Remove trailing fractional zeros, then superfluous leading zeros."""
    value = _TRAILING_ZEROS.sub(r"\1", value, count=1)
    return _LEADING_ZEROS.sub(r"\1", value, count=1)


def format_asset_amount(
    amount: AssetAmount,
    decimal_places: int | None = None,
    trim_trailing_zeros: bool = False,
) -> str:
    """Format an asset amount.

    Uses ``amount.decimal_places`` if ``decimal_places`` is None. Trimming is
    applied last, so ``trim_trailing_zeros`` wins over ``decimal_places``.
    """
    places = amount.decimal_places if decimal_places is None else decimal_places
    formatted = format_decimal(amount.value, places)
    return trim_zeros(formatted) if trim_trailing_zeros else formatted


def format_base_amount(amount: BaseAmount) -> str:
    return format_decimal(amount.value, 0)


def currency_symbol_by_asset(asset: Asset) -> str:
    """Currency symbol for ``asset``, or its ticker if there is none."""
    ticker = asset.ticker
    if ticker == RUNE_TICKER:
        return AssetCurrencySymbol.RUNE.value
    if ticker == ASSET_BTC.ticker:
        return AssetCurrencySymbol.BTC.value
    if ticker == ASSET_ETH.ticker:
        return AssetCurrencySymbol.ETH.value
    if "USD" in ticker or "UST" in ticker:
        return AssetCurrencySymbol.USD.value
    return ticker


def format_asset_amount_currency(
    amount: AssetAmount,
    asset: Asset | None = None,
    decimal_places: int | None = None,
    trim_trailing_zeros: bool = False,
) -> str:
    """Format an asset amount prefixed by its currency symbol.

    Tickers are matched in order, first match wins:

    1. ``RUNE`` (exact) -> ``ᚱ``
    2. contains ``BTC`` -> ``₿``, or ``⚡`` with the amount in sats when it is
       at most 1,000,000 sats
    3. contains ``ETH`` -> ``Ξ``
    4. contains ``USD`` -> ``$``
    5. anything else -> ``"<amount> <ticker>"``

    The ``BTC``, ``ETH`` and ``USD`` matches ignore case. Without an asset
    (or with an empty ticker) ``$`` is used.
    """
    formatted = format_asset_amount(amount, decimal_places, trim_trailing_zeros)
    ticker = asset.ticker if asset is not None else ""
    if not ticker:
        return f"{AssetCurrencySymbol.USD.value} {formatted}"

    upper = ticker.upper()
    if ticker == RUNE_TICKER:
        return f"{AssetCurrencySymbol.RUNE.value} {formatted}"
    if ASSET_BTC.ticker in upper:
        base = asset_to_base(amount)
        if base.less_or_equal(SATOSHI_DISPLAY_THRESHOLD):
            return f"{AssetCurrencySymbol.SATOSHI.value} {format_base_amount(base)}"
        return f"{AssetCurrencySymbol.BTC.value} {formatted}"
    if ASSET_ETH.ticker in upper:
        return f"{AssetCurrencySymbol.ETH.value} {formatted}"
    if "USD" in upper:
        return f"{AssetCurrencySymbol.USD.value} {formatted}"
    return f"{formatted} {ticker}"


def format_base_as_asset_amount(
    amount: BaseAmount,
    decimal_places: int | None = None,
    trim_trailing_zeros: bool = False,
) -> str:
    """Format a base amount as its asset amount."""
    return format_asset_amount(
        base_to_asset(amount), decimal_places, trim_trailing_zeros
    )
