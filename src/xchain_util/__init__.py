"""Amounts, assets, chains and Midgard lookups for cross-chain clients."""

from __future__ import annotations

from .amount import (
    ASSET_DECIMAL,
    Amount,
    AssetAmount,
    BaseAmount,
    Denomination,
    asset_amount,
    asset_to_base,
    base_amount,
    base_to_asset,
    is_asset_amount,
    is_base_amount,
)
from .asset import (
    ASSET_BCH,
    ASSET_BNB,
    ASSET_BTC,
    ASSET_DOGE,
    ASSET_ETH,
    ASSET_LTC,
    ASSET_RUNE_67C,
    ASSET_RUNE_B1A,
    ASSET_RUNE_ERC20,
    ASSET_RUNE_ERC20_TESTNET,
    ASSET_RUNE_NATIVE,
    RUNE_TICKER,
    Asset,
    asset_to_string,
    eq_asset,
    is_synth_asset,
    is_valid_asset,
    parse_asset,
)
from .async_utils import delay
from .chain import (
    BCH_CHAIN,
    BNB_CHAIN,
    BTC_CHAIN,
    CHAIN_DISPLAY_NAMES,
    COSMOS_CHAIN,
    DOGE_CHAIN,
    ETH_CHAIN,
    LTC_CHAIN,
    POLKADOT_CHAIN,
    TERRA_CHAIN,
    THOR_CHAIN,
    UNKNOWN_CHAIN,
    Chain,
    chain_display_name,
    is_supported_chain,
)
from .decimals import (
    SymbolPosition,
    decimal_or_zero,
    fixed_decimal,
    format_decimal,
    format_decimal_currency,
    is_valid_decimal,
    to_decimal,
    valid_decimal_or_zero,
)
from .formatting import (
    AssetCurrencySymbol,
    currency_symbol_by_asset,
    format_asset_amount,
    format_asset_amount_currency,
    format_base_amount,
    format_base_as_asset_amount,
    trim_zeros,
)
from .inbound import InboundDetail, ServerInboundDetail, merge_inbound_detail
from .midgard import (
    MidgardClient,
    MidgardUnavailableError,
    get_all_inbound_details,
    get_inbound_details,
    get_mimir_details,
)
from .logger import setup_logging
from .settings import Network, XChainUtilSettings

__all__ = [
    "ASSET_DECIMAL",
    "Amount",
    "AssetAmount",
    "BaseAmount",
    "Denomination",
    "asset_amount",
    "asset_to_base",
    "base_amount",
    "base_to_asset",
    "is_asset_amount",
    "is_base_amount",
    "ASSET_BCH",
    "ASSET_BNB",
    "ASSET_BTC",
    "ASSET_DOGE",
    "ASSET_ETH",
    "ASSET_LTC",
    "ASSET_RUNE_67C",
    "ASSET_RUNE_B1A",
    "ASSET_RUNE_ERC20",
    "ASSET_RUNE_ERC20_TESTNET",
    "ASSET_RUNE_NATIVE",
    "RUNE_TICKER",
    "Asset",
    "asset_to_string",
    "eq_asset",
    "is_synth_asset",
    "is_valid_asset",
    "parse_asset",
    "delay",
    "BCH_CHAIN",
    "BNB_CHAIN",
    "BTC_CHAIN",
    "CHAIN_DISPLAY_NAMES",
    "COSMOS_CHAIN",
    "DOGE_CHAIN",
    "ETH_CHAIN",
    "LTC_CHAIN",
    "POLKADOT_CHAIN",
    "TERRA_CHAIN",
    "THOR_CHAIN",
    "UNKNOWN_CHAIN",
    "Chain",
    "chain_display_name",
    "is_supported_chain",
    "SymbolPosition",
    "decimal_or_zero",
    "fixed_decimal",
    "format_decimal",
    "format_decimal_currency",
    "is_valid_decimal",
    "to_decimal",
    "valid_decimal_or_zero",
    "AssetCurrencySymbol",
    "currency_symbol_by_asset",
    "format_asset_amount",
    "format_asset_amount_currency",
    "format_base_amount",
    "format_base_as_asset_amount",
    "trim_zeros",
    "InboundDetail",
    "ServerInboundDetail",
    "merge_inbound_detail",
    "MidgardClient",
    "MidgardUnavailableError",
    "get_all_inbound_details",
    "get_inbound_details",
    "get_mimir_details",
    "Network",
    "XChainUtilSettings",
    "setup_logging",
]
