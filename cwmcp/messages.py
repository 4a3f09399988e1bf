"""Building wasm query requests and execute messages from JSON entry points."""

from __future__ import annotations

import base64
import json
import re
from dataclasses import dataclass
from typing import Any

UINT128_MAX = 2**128 - 1

_UINT_PATTERN = re.compile(r"\+?[0-9]+")


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def parse_uint128(text: str) -> int:
    """Parse a decimal unsigned 128-bit integer, raising ValueError if invalid."""
    if not isinstance(text, str) or not _UINT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid Uint128: {text!r}")
    value = int(text)
    if value > UINT128_MAX:
        raise ValueError(f"Uint128 overflow: {text!r}")
    return value


@dataclass(frozen=True)
class Coin:
    """An amount of a native denomination."""

    denom: str
    amount: int

    def to_dict(self) -> dict[str, str]:
        return {"denom": self.denom, "amount": str(self.amount)}


@dataclass(frozen=True)
class ValidatedQuery:
    """A query message together with the query request built from it."""

    query_msg: str
    query_request: str

    def to_json(self) -> str:
        return _to_json({"query_msg": self.query_msg, "query_request": self.query_request})


@dataclass(frozen=True)
class ValidatedExecute:
    """An execute message together with the cosmos message built from it."""

    execute_msg: str
    cosmos_msg: str

    def to_json(self) -> str:
        return _to_json({"execute_msg": self.execute_msg, "cosmos_msg": self.cosmos_msg})


def _encode_entry_point(text: str) -> str:
    """Parse a JSON entry-point message and return it as base64 of compact JSON."""
    try:
        parsed = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ValueError(f"message is not valid JSON: {exc}") from exc
    is_variant = isinstance(parsed, str) or (isinstance(parsed, dict) and len(parsed) == 1)
    if not is_variant:
        raise ValueError("message must name exactly one entry point")
    return base64.b64encode(_to_json(parsed).encode("utf-8")).decode("ascii")


def build_query_request(contract_addr: str, query_msg: str) -> dict[str, Any]:
    """Wrap a JSON query message in a smart wasm query request."""
    return {
        "wasm": {
            "smart": {
                "contract_addr": contract_addr,
                "msg": _encode_entry_point(query_msg),
            }
        }
    }


def _funds(payment: str | None, payment_denom: str | None) -> list[Coin]:
    if payment is None or payment_denom is None:
        return []
    try:
        amount = parse_uint128(payment)
    except ValueError:
        amount = 0
    return [Coin(payment_denom, amount)]


def build_cosmos_msg(
    contract_addr: str,
    execute_msg: str,
    payment: str | None = None,
    payment_denom: str | None = None,
) -> dict[str, Any]:
    """Wrap a JSON execute message in a wasm execute cosmos message.

    Funds are attached only when both ``payment`` and ``payment_denom`` are
    given; an unparsable amount becomes zero.
    """
    funds = _funds(payment, payment_denom)
    return {
        "wasm": {
            "execute": {
                "contract_addr": contract_addr,
                "msg": _encode_entry_point(execute_msg),
                "funds": [coin.to_dict() for coin in funds],
            }
        }
    }