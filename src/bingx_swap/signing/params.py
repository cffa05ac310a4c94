"""Build signed query strings from typed request models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from bingx_swap.signing.canonical import canonicalise, contains_complex_values
from bingx_swap.signing.hmac import sign_message

__all__ = ["SIGNATURE_KEY", "SignedQuery", "TIMESTAMP_KEY", "is_zero_value", "signed_query", "to_params"]

TIMESTAMP_KEY = "timestamp"
SIGNATURE_KEY = "signature"


@dataclass(frozen=True)
class SignedQuery:
    """Result of signing one parameter set."""

    unencoded: str  # the string that was signed
    transmitted: str  # the string placed on the wire, before the signature
    signature: str

    @property
    def query(self) -> str:
        return f"{self.transmitted}&{SIGNATURE_KEY}={self.signature}"


def is_zero_value(value: Any) -> bool:
    """Return True if *value* means "not provided".

    Empty strings, empty structures and numeric zero are dropped. A boolean
    is a real value even when False.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, dict, list)):
        return len(value) == 0
    if isinstance(value, (int, float, Decimal)):
        return value == 0
    return False


def to_params(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Turn a request model into a ParameterSet keyed by wire names.

    Fields left at their zero value are omitted, so a caller cannot send an
    explicit ``0`` or ``""``.
    """
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        raw = request.model_dump(by_alias=True)
    else:
        raw = dict(request)
    return {k: v for k, v in raw.items() if not is_zero_value(v)}


def signed_query(
    params: Mapping[str, Any],
    secret: str | bytes,
    timestamp: int,
) -> SignedQuery:
    """Inject *timestamp*, sign the unencoded form and build the wire form.

    The signature always covers the unencoded string. Complex values are
    percent-encoded only in the transmitted copy.
    """
    stamped = {**params, TIMESTAMP_KEY: int(timestamp)}
    unencoded = canonicalise(stamped, encode=False)
    signature = sign_message(secret, unencoded)
    if contains_complex_values(stamped):
        transmitted = canonicalise(stamped, encode=True)
    else:
        transmitted = unencoded
    return SignedQuery(unencoded=unencoded, transmitted=transmitted, signature=signature)
