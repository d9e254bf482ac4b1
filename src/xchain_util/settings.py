"""Settings module with unified configuration precedence: INIT > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

load_dotenv()


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


DEFAULT_MIDGARD_MAINNET_URLS = [
    "https://midgard.ninerealms.com",
    "https://midgard.thorswap.net",
]
DEFAULT_MIDGARD_TESTNET_URLS = ["https://testnet.midgard.thorchain.info"]


class XChainUtilSettings(BaseSettings):
    """Single source of truth for configuration. Values may come from:
    - init kwargs
    - ENV / .env (prefixed with XCHAIN_UTIL_)
    - Config file (TOML), lowest precedence

    Do not read os.environ or files elsewhere in the codebase.
    """

    # --- midgard endpoints, tried in order ---
    midgard_mainnet_urls: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIDGARD_MAINNET_URLS)
    )
    midgard_testnet_urls: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIDGARD_TESTNET_URLS)
    )

    # --- http ---
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for a single Midgard request.",
    )

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="XCHAIN_UTIL_",
        env_file=".env",
        extra="ignore",  # ignore unknown keys in env/config file
    )

    @field_validator("midgard_mainnet_urls", "midgard_testnet_urls")
    @classmethod
    def validate_urls(cls, v: list[str]) -> list[str]:
        """Require at least one URL and drop trailing slashes."""
        urls = [url.strip().rstrip("/") for url in v if url and url.strip()]
        if not urls:
            raise ValueError("at least one Midgard URL must be configured")
        return urls

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: INIT > ENV > FILE."""
        env_cfg = os.environ.get("XCHAIN_UTIL_CONFIG")
        cfg_path = Path(env_cfg) if env_cfg else None

        class TomlConfigSource(PydanticBaseSettingsSource):
            def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
                super().__init__(settings_cls)
                self._path = path

            def get_field_value(
                self, field: Any, field_name: str
            ) -> tuple[Any, str, bool]:
                return None, "", False

            def __call__(self) -> dict[str, Any]:
                if not self._path:
                    # Try default locations
                    local_config = Path("xchain-util.toml")
                    user_config = (
                        Path.home() / ".config" / "xchain-util" / "config.toml"
                    )
                    if local_config.exists():
                        self._path = local_config
                    elif user_config.exists():
                        self._path = user_config
                    else:
                        return {}

                if not self._path.exists():
                    return {}

                with self._path.open("rb") as f:
                    data = tomllib.load(f)  # supports top-level or [xchain_util]
                body = data.get("xchain_util", data)
                if not isinstance(body, dict):
                    return {}
                return body

        return (
            init_settings,  # init kwargs (highest)
            env_settings,  # ENV
            dotenv_settings,  # .env
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
            file_secret_settings,  # optional secrets dir
        )

    def midgard_base_urls(self, network: Network) -> list[str]:
        """Candidate Midgard base URLs for ``network``, in failover order."""
        if network == Network.MAINNET:
            return list(self.midgard_mainnet_urls)
        if network == Network.TESTNET:
            return list(self.midgard_testnet_urls)
        raise ValueError(f"Unknown network: {network}")
