"""Unit tests for config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from archway_market.config import (
    AppConfig,
    ChainConfig,
    ContractsConfig,
    _interpolate_env,
    load_config,
)

MARKET = "archway1marketplace"


def _write(tmp_path: Path, content: str) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(content)
    return cfg_file


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}") == "hello"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOK", "secret")
        result = _interpolate_env({"key": ["${TOK}", "plain"]})
        assert result == {"key": ["secret", "plain"]}

    def test_non_string_passthrough(self) -> None:
        assert _interpolate_env(42) == 42


class TestLoadConfig:
    def test_loads_valid_yaml(
        self, sample_yaml_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEST_MNEMONIC", "abandon abandon art")
        cfg = load_config(sample_yaml_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.chain.lcd_endpoints == ("https://lcd.example.com",)
        assert cfg.chain.rpc_timeout == 10
        assert cfg.contracts.cw20["WARCH"].startswith("archway1")
        assert cfg.wallet.mnemonic == "abandon abandon art"
        assert cfg.wallet.gas_limit == 400000

    def test_defaults(self, tmp_path: Path) -> None:
        cfg = load_config(
            _write(
                tmp_path,
                f"""\
chain:
  lcd_endpoints: ["https://lcd.test.com"]
contracts:
  marketplace: "{MARKET}"
""",
            )
        )
        assert cfg.chain.denom == "aarch"
        assert cfg.chain.decimals == 18
        assert cfg.chain.chain_id == "archway-1"
        assert cfg.wallet.gas_limit is None
        assert cfg.contracts.cw721 == ""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")


class TestValidation:
    def test_no_endpoints_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, f'contracts:\n  marketplace: "{MARKET}"\n')
        with pytest.raises(ValueError, match="LCD endpoint"):
            load_config(path)

    def test_no_marketplace_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'chain:\n  lcd_endpoints: ["https://lcd.test.com"]\n')
        with pytest.raises(ValueError, match="Marketplace contract"):
            load_config(path)

    def test_wrong_prefix_raises(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            """\
chain:
  lcd_endpoints: ["https://lcd.test.com"]
contracts:
  marketplace: "stars1marketplace"
""",
        )
        with pytest.raises(ValueError, match="prefix 'archway'"):
            load_config(path)

    def test_negative_decimals_raises(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            f"""\
chain:
  lcd_endpoints: ["https://lcd.test.com"]
  decimals: -1
contracts:
  marketplace: "{MARKET}"
""",
        )
        with pytest.raises(ValueError, match="decimals"):
            load_config(path)


class TestFrozenConfigs:
    def test_chain_config_immutable(self) -> None:
        c = ChainConfig(lcd_endpoints=("a",))
        with pytest.raises(AttributeError):
            c.rpc_timeout = 999  # type: ignore[misc]

    def test_contracts_config_immutable(self) -> None:
        c = ContractsConfig(marketplace=MARKET)
        with pytest.raises(AttributeError):
            c.marketplace = "other"  # type: ignore[misc]
