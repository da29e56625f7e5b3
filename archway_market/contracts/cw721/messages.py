"""Pure message builders for cw721 collections — no I/O."""
from __future__ import annotations

import base64
import json
from typing import Any

from ...models import Expiration


def _paging(start_after: str | None, limit: int | None) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if start_after:
        body["start_after"] = start_after
    if limit:
        body["limit"] = limit
    return body


def encode_hook(msg: dict[str, Any]) -> str:
    """Base64 JSON, the ``Binary`` form receivers expect in ``send_nft``."""
    return base64.b64encode(json.dumps(msg, separators=(",", ":")).encode()).decode()


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def owner_of_query(token_id: str, include_expired: bool = False) -> dict[str, Any]:
    return {"owner_of": {"token_id": token_id, "include_expired": include_expired}}


def approval_query(
    token_id: str, spender: str, include_expired: bool = False
) -> dict[str, Any]:
    return {
        "approval": {
            "token_id": token_id,
            "spender": spender,
            "include_expired": include_expired,
        }
    }


def approvals_query(token_id: str, include_expired: bool = False) -> dict[str, Any]:
    return {"approvals": {"token_id": token_id, "include_expired": include_expired}}


def num_tokens_query() -> dict[str, Any]:
    return {"num_tokens": {}}


def contract_info_query() -> dict[str, Any]:
    return {"contract_info": {}}


def nft_info_query(token_id: str) -> dict[str, Any]:
    return {"nft_info": {"token_id": token_id}}


def all_nft_info_query(token_id: str, include_expired: bool = False) -> dict[str, Any]:
    return {"all_nft_info": {"token_id": token_id, "include_expired": include_expired}}


def tokens_query(
    owner: str, start_after: str | None = None, limit: int | None = None
) -> dict[str, Any]:
    return {"tokens": {"owner": owner, **_paging(start_after, limit)}}


def all_tokens_query(
    start_after: str | None = None, limit: int | None = None
) -> dict[str, Any]:
    return {"all_tokens": _paging(start_after, limit)}


# ---------------------------------------------------------------------------
# Executes
# ---------------------------------------------------------------------------


def transfer_nft_msg(recipient: str, token_id: str) -> dict[str, Any]:
    return {"transfer_nft": {"recipient": recipient, "token_id": token_id}}


def send_nft_msg(contract: str, token_id: str, hook: dict[str, Any]) -> dict[str, Any]:
    return {
        "send_nft": {
            "contract": contract,
            "token_id": token_id,
            "msg": encode_hook(hook),
        }
    }


def approve_msg(
    spender: str, token_id: str, expires: Expiration | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {"spender": spender, "token_id": token_id}
    if expires is not None and not expires.never:
        body["expires"] = expires.to_msg()
    return {"approve": body}


def revoke_msg(spender: str, token_id: str) -> dict[str, Any]:
    return {"revoke": {"spender": spender, "token_id": token_id}}


def approve_all_msg(operator: str, expires: Expiration | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"operator": operator}
    if expires is not None and not expires.never:
        body["expires"] = expires.to_msg()
    return {"approve_all": body}


def revoke_all_msg(operator: str) -> dict[str, Any]:
    return {"revoke_all": {"operator": operator}}


def burn_msg(token_id: str) -> dict[str, Any]:
    return {"burn": {"token_id": token_id}}
