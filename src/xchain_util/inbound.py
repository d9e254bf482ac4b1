"""Inbound address records and the per-chain status merge."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter

from .chain import Chain


class ServerInboundDetail(BaseModel):
    """One record of Midgard's ``/v2/thorchain/inbound_addresses``.

    Only the fields read by ``merge_inbound_detail`` are required.
    """

    chain: str
    pub_key: str | None = None
    address: str
    halted: bool
    gas_rate: str | int | float | None = None
    router: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


INBOUND_DETAILS_ADAPTER = TypeAdapter(list[ServerInboundDetail])


@dataclass(frozen=True)
class InboundDetail:
    """Deposit vault and halt flags of a chain.

    ``router`` is None when the chain has no router contract.
    """

    vault: str
    halted_chain: bool
    halted_trading: bool
    halted_lp: bool
    router: str | None = None


def _flag(mimir: Mapping[str, Any], key: str) -> bool:
    return bool(mimir.get(key))


def merge_inbound_detail(
    chain: Chain | str,
    mimir: Mapping[str, Any],
    inbound_details: Iterable[ServerInboundDetail],
) -> InboundDetail:
    """Combine the inbound address record of ``chain`` with mimir flags.

    A missing record is not an error: the vault is empty and only the
    mimir flags apply.
    """
    code = chain.value if isinstance(chain, Chain) else str(chain)
    record = next((item for item in inbound_details if item.chain == code), None)

    halted_chain = (
        (record is not None and record.halted)
        or _flag(mimir, f"HALT{code}CHAIN")
        or _flag(mimir, "HALTCHAINGLOBAL")
    )
    halted_trading = _flag(mimir, "HALTTRADING") or _flag(mimir, f"HALT{code}TRADING")
    halted_lp = _flag(mimir, "PAUSELP") or _flag(mimir, f"PAUSELP{code}")

    return InboundDetail(
        vault=record.address if record is not None and record.address else "",
        halted_chain=halted_chain,
        halted_trading=halted_trading,
        halted_lp=halted_lp,
        router=record.router if record is not None and record.router else None,
    )
