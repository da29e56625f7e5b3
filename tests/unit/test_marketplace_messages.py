"""Unit tests for marketplace message builders."""
from __future__ import annotations

import pytest

from archway_market.contracts.marketplace import messages
from archway_market.models import MarketplaceConfig, Swap, SwapType

CW721 = "archway1cf5rq0amcl5m2flqrtl4gw2mdl3zdec9vlp5hfa9hgxlwnmrlazsdycu4l"
WARCH = "archway1jcahx3ruep9zwrhefwkdnuxrhk44w9zedeef0eg9pg3wjj66zyps9z2jrv"


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestSimpleQueries:
    def test_config(self) -> None:
        assert messages.config_query() == {"config": {}}

    def test_details(self) -> None:
        assert messages.details_query("swap1") == {"details": {"id": "swap1"}}

    def test_get_total_default_sale(self) -> None:
        assert messages.get_total_query() == {"get_total": {"swap_type": "Sale"}}

    def test_get_offers(self) -> None:
        assert messages.get_offers_query(2, 25) == {"get_offers": {"page": 2, "limit": 25}}

    def test_get_listings_defaults(self) -> None:
        assert messages.get_listings_query() == {"get_listings": {"page": 0, "limit": 10}}


class TestListQuery:
    def test_no_arguments(self) -> None:
        assert messages.list_query() == {"list": {}}

    def test_start_and_limit(self) -> None:
        assert messages.list_query("swap10", 30) == {
            "list": {"start_after": "swap10", "limit": 30}
        }


class TestSwapsOf:
    def test_all_fields(self) -> None:
        assert messages.swaps_of_query("archway1me", "offer", 1, 5) == {
            "swaps_of": {
                "address": "archway1me",
                "swap_type": "Offer",
                "page": 1,
                "limit": 5,
            }
        }

    def test_bad_type_raises(self) -> None:
        with pytest.raises(ValueError):
            messages.swaps_of_query("archway1me", "Bid")


class TestListingsOfToken:
    def test_without_type(self) -> None:
        msg = messages.listings_of_token_query("1", CW721)
        assert msg == {
            "listings_of_token": {"token_id": "1", "cw721": CW721, "page": 0, "limit": 10}
        }

    def test_with_type(self) -> None:
        msg = messages.listings_of_token_query("1", CW721, SwapType.OFFER)
        assert msg["listings_of_token"]["swap_type"] == "Offer"


class TestSwapsByPrice:
    def test_no_bounds(self) -> None:
        assert messages.swaps_by_price_query() == {
            "swaps_by_price": {"swap_type": "Sale", "page": 0, "limit": 10}
        }

    def test_bounds_are_strings(self) -> None:
        body = messages.swaps_by_price_query(10**18, 2 * 10**18)["swaps_by_price"]
        assert body["min"] == "1000000000000000000"
        assert body["max"] == "2000000000000000000"

    def test_zero_min_omitted(self) -> None:
        assert "min" not in messages.swaps_by_price_query(0, 5)["swaps_by_price"]

    def test_negative_min_raises(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            messages.swaps_by_price_query(-1)


class TestSwapsByDenom:
    def test_native(self) -> None:
        assert "payment_token" not in messages.swaps_by_denom_query()["swaps_by_denom"]

    def test_cw20(self) -> None:
        body = messages.swaps_by_denom_query(WARCH, "Offer")["swaps_by_denom"]
        assert body["payment_token"] == WARCH
        assert body["swap_type"] == "Offer"


class TestSwapsByPaymentType:
    def test_cw20_flag(self) -> None:
        assert messages.swaps_by_payment_type_query(True) == {
            "swaps_by_payment_type": {
                "cw20": True,
                "swap_type": "Sale",
                "page": 0,
                "limit": 10,
            }
        }


# ---------------------------------------------------------------------------
# Executes
# ---------------------------------------------------------------------------


class TestCreate:
    def test_native(self) -> None:
        assert messages.create_msg("swap1", "7", 1724388997000000000, 10**18) == {
            "create": {
                "id": "swap1",
                "payment_token": None,
                "token_id": "7",
                "expires": {"at_time": "1724388997000000000"},
                "price": "1000000000000000000",
                "swap_type": "Sale",
            }
        }

    def test_cw20_offer(self) -> None:
        body = messages.create_msg(
            "swap2", "7", "1724388997000000000", "5", "Offer", payment_token=WARCH
        )["create"]
        assert body["payment_token"] == WARCH
        assert body["swap_type"] == "Offer"
        assert body["price"] == "5"

    def test_negative_price_raises(self) -> None:
        with pytest.raises(ValueError):
            messages.create_msg("swap1", "7", 1, -5)


class TestFinish:
    def test_echoes_swap_terms(self, sample_cw20_offer_dict: dict) -> None:
        swap = Swap.from_dict(sample_cw20_offer_dict)
        assert messages.finish_msg("swap2", swap) == {
            "finish": {
                "id": "swap2",
                "payment_token": WARCH,
                "token_id": "2",
                "expires": {"at_time": "1723050464000000000"},
                "price": "100000000000000000000",
                "swap_type": "Offer",
            }
        }


class TestOtherExecutes:
    def test_cancel(self) -> None:
        assert messages.cancel_msg("swap1") == {"cancel": {"id": "swap1"}}

    def test_update(self) -> None:
        assert messages.update_msg("swap1", 99, 42) == {
            "update": {"id": "swap1", "expires": {"at_time": "99"}, "price": "42"}
        }

    def test_update_config_from_model(self) -> None:
        cfg = MarketplaceConfig(admin="archway1admin", denom="aarch", cw721=(CW721,), fees=0.05)
        assert messages.update_config_msg(cfg) == {
            "update_config": {
                "config": {
                    "admin": "archway1admin",
                    "denom": "aarch",
                    "cw721": [CW721],
                    "fees": 0.05,
                }
            }
        }

    def test_add_and_remove_nft(self) -> None:
        assert messages.add_nft_msg(CW721) == {"add_nft": {"contract": CW721}}
        assert messages.remove_nft_msg(CW721) == {"remove_nft": {"contract": CW721}}

    def test_withdraw(self) -> None:
        assert messages.withdraw_msg(100, "aarch") == {
            "withdraw": {"amount": "100", "denom": "aarch", "payment_token": None}
        }

    def test_withdraw_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            messages.withdraw_msg(0, "aarch")
