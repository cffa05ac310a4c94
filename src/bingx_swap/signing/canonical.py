"""Canonical query-string serialisation for BingX request signing.

The venue recomputes the signature from the query it receives, so the
string produced here must be byte-exact: keys sorted, values formatted by
fixed rules, and only structured values (JSON fragments) percent-encoded,
and only in the transmitted form.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import Any
from urllib.parse import quote_plus

from bingx_swap.errors import ParameterError

__all__ = [
    "ParamValue",
    "canonicalise",
    "contains_complex_values",
    "encode_value",
    "format_value",
    "is_complex_value",
]

logger = logging.getLogger(__name__)

ParamValue = str | int | float | bool | Decimal | dict[str, Any] | list[Any]

_COMPLEX_MARKERS = ("[", "{")

_SMALL_MAGNITUDE = Decimal("0.0001")
_PLACES_DEFAULT = 8
_PLACES_SMALL = 10

# Wide enough for the exact expansion of any finite double plus 10 places.
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_EVEN)


def _format_number(value: float | Decimal) -> str:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ParameterError(f"non-finite number cannot be signed: {value!r}")
        number = Decimal(value)  # exact binary value, no repr() round-trip
    else:
        if not value.is_finite():
            raise ParameterError(f"non-finite number cannot be signed: {value!r}")
        number = value

    if number.is_zero():
        return "0"

    magnitude = abs(number)
    if number == number.to_integral_value(context=_DECIMAL_CONTEXT):
        # plain digits at any magnitude, never scientific notation
        return f"{number:.0f}"

    places = _PLACES_DEFAULT if magnitude >= _SMALL_MAGNITUDE else _PLACES_SMALL
    try:
        rounded = number.quantize(Decimal(1).scaleb(-places), context=_DECIMAL_CONTEXT)
    except InvalidOperation as exc:
        raise ParameterError(f"number has too many digits to sign: {value!r}") from exc
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_value(value: Any) -> str:
    """Render one parameter value in its canonical wire form.

    Formatting does not depend on whether the value will be encoded;
    the signed and transmitted strings always agree on it.
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return _format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    logger.warning("Formatting unrecognised parameter type %s via str()", type(value).__name__)
    return str(value)


def is_complex_value(value: str) -> bool:
    """Return True if a formatted value carries an embedded JSON structure."""
    return any(marker in value for marker in _COMPLEX_MARKERS)


def contains_complex_values(params: Mapping[str, Any]) -> bool:
    """Return True if any value in *params* formats as a complex value."""
    return any(is_complex_value(format_value(v)) for v in params.values())


def encode_value(value: str) -> str:
    """Query-escape a value, spelling spaces as ``%20`` rather than ``+``."""
    return quote_plus(value, safe="").replace("+", "%20")


def canonicalise(params: Mapping[str, Any], *, encode: bool = False) -> str:
    """Produce the canonical ``k=v&k=v`` string for a parameter set.

    Args:
        params: Parameter names mapped to their values.
        encode: Percent-encode complex values. Scalar values are never
            escaped, whatever this flag says.

    Returns:
        Keys in sorted order, each paired with its formatted value.
    """
    parts: list[str] = []
    for key in sorted(params):
        value = format_value(params[key])
        if encode and is_complex_value(value):
            value = encode_value(value)
        parts.append(f"{key}={value}")
    return "&".join(parts)
