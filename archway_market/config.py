"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChainConfig:
    chain_id: str = "archway-1"
    lcd_endpoints: tuple[str, ...] = ()
    grpc_url: str = "grpc+https://grpc.mainnet.archway.io:443"
    rpc_timeout: int = 30
    denom: str = "aarch"
    display_denom: str = "ARCH"
    decimals: int = 18
    bech32_prefix: str = "archway"
    gas_price: float = 140000000000.0


@dataclass(frozen=True)
class ContractsConfig:
    marketplace: str = ""
    cw721: str = ""
    minter: str = ""
    cw20: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class WalletConfig:
    mnemonic: str = ""
    gas_limit: int | None = None


@dataclass(frozen=True)
class AppConfig:
    chain: ChainConfig = field(default_factory=ChainConfig)
    contracts: ContractsConfig = field(default_factory=ContractsConfig)
    wallet: WalletConfig = field(default_factory=WalletConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_chain(raw: dict[str, Any]) -> ChainConfig:
    return ChainConfig(
        chain_id=raw.get("chain_id", ChainConfig.chain_id),
        lcd_endpoints=tuple(raw.get("lcd_endpoints", [])),
        grpc_url=raw.get("grpc_url", ChainConfig.grpc_url),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
        denom=raw.get("denom", ChainConfig.denom),
        display_denom=raw.get("display_denom", ChainConfig.display_denom),
        decimals=int(raw.get("decimals", 18)),
        bech32_prefix=raw.get("bech32_prefix", ChainConfig.bech32_prefix),
        gas_price=float(raw.get("gas_price", ChainConfig.gas_price)),
    )


def _build_contracts(raw: dict[str, Any]) -> ContractsConfig:
    return ContractsConfig(
        marketplace=raw.get("marketplace", ""),
        cw721=raw.get("cw721", ""),
        minter=raw.get("minter", ""),
        cw20=dict(raw.get("cw20", {})),
    )


def _build_wallet(raw: dict[str, Any]) -> WalletConfig:
    gas_limit = raw.get("gas_limit")
    return WalletConfig(
        mnemonic=raw.get("mnemonic", ""),
        gas_limit=int(gas_limit) if gas_limit not in (None, "") else None,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        chain=_build_chain(raw.get("chain", {})),
        contracts=_build_contracts(raw.get("contracts", {})),
        wallet=_build_wallet(raw.get("wallet", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.chain.lcd_endpoints:
        raise ValueError("At least one LCD endpoint must be configured")

    if not cfg.contracts.marketplace:
        raise ValueError("Marketplace contract address is not configured")

    if cfg.chain.decimals < 0:
        raise ValueError(f"Invalid denom decimals: {cfg.chain.decimals}")

    prefix = cfg.chain.bech32_prefix
    addresses = {
        "marketplace": cfg.contracts.marketplace,
        "cw721": cfg.contracts.cw721,
        "minter": cfg.contracts.minter,
        **{f"cw20 '{sym}'": addr for sym, addr in cfg.contracts.cw20.items()},
    }
    for name, address in addresses.items():
        if address and not address.startswith(prefix):
            raise ValueError(
                f"Contract {name} address '{address}' does not use prefix '{prefix}'"
            )
