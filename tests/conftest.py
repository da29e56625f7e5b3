"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from archway_market.config import AppConfig, ChainConfig, ContractsConfig, WalletConfig
from archway_market.models import TxResult

MARKETPLACE = "archway1marketplacecontract000000000000000000000000000000000000"
CW721 = "archway1cf5rq0amcl5m2flqrtl4gw2mdl3zdec9vlp5hfa9hgxlwnmrlazsdycu4l"
WARCH = "archway1jcahx3ruep9zwrhefwkdnuxrhk44w9zedeef0eg9pg3wjj66zyps9z2jrv"
MINTER = "archway1mintercontract0000000000000000000000000000000000000000"
WALLET = "archway1f395p0gg67mmfd5zcqvpnp9cxnu0hg6r9hfczq"


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_chain_config() -> ChainConfig:
    return ChainConfig(
        chain_id="archway-1",
        lcd_endpoints=("https://lcd1.example.com", "https://lcd2.example.com"),
        rpc_timeout=10,
    )


@pytest.fixture()
def sample_app_config(sample_chain_config: ChainConfig) -> AppConfig:
    return AppConfig(
        chain=sample_chain_config,
        contracts=ContractsConfig(
            marketplace=MARKETPLACE,
            cw721=CW721,
            minter=MINTER,
            cw20={"WARCH": WARCH},
        ),
        wallet=WalletConfig(mnemonic="test mnemonic words"),
    )


SAMPLE_YAML = textwrap.dedent(f"""\
    chain:
      chain_id: archway-1
      lcd_endpoints: ["https://lcd.example.com"]
      rpc_timeout: 10
      denom: aarch
      decimals: 18
      bech32_prefix: archway
    contracts:
      marketplace: "{MARKETPLACE}"
      cw721: "{CW721}"
      cw20:
        WARCH: "{WARCH}"
    wallet:
      mnemonic: "${{TEST_MNEMONIC}}"
      gas_limit: 400000
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample on-chain data
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_swap_dict() -> dict:
    return {
        "creator": WALLET,
        "nft_contract": CW721,
        "payment_token": None,
        "token_id": "1",
        "expires": {"at_time": "1785271356000000000"},
        "price": "1000000000000000000000",
        "swap_type": "Sale",
    }


@pytest.fixture()
def sample_cw20_offer_dict() -> dict:
    return {
        "creator": WALLET,
        "nft_contract": CW721,
        "payment_token": WARCH,
        "token_id": "2",
        "expires": {"at_time": "1723050464000000000"},
        "price": "100000000000000000000",
        "swap_type": "Offer",
    }


# ---------------------------------------------------------------------------
# Mocked collaborators
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_chain_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def mock_signer() -> AsyncMock:
    signer = AsyncMock()
    signer.address = WALLET
    signer.execute.return_value = TxResult(
        tx_hash="ABCDEF", height=123, gas_wanted=200000, gas_used=150000
    )
    return signer
