"""Tests for canonical parameter encoding and HMAC signing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from bingx_swap.errors import ParameterError
from bingx_swap.signing.canonical import (
    canonicalise,
    contains_complex_values,
    encode_value,
    format_value,
    is_complex_value,
)
from bingx_swap.signing.hmac import sign_message, verify_signature

GOLDEN_MESSAGE = "symbol=BTC-USDT&timestamp=1700000000000"
GOLDEN_SIGNATURE = "1b6fe3bf9023571c440bafe04dfbb5c032537306917b1eda723654fae0ef1a4f"


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0"),
            (-0.0, "0"),
            (100.0, "100"),
            (100000.0, "100000"),
            (0.1, "0.1"),
            (-2.5, "-2.5"),
            (0.00001234, "0.00001234"),
            (123456.789, "123456.789"),
            (0.1 + 0.2, "0.3"),
            (19.999999999999996, "20"),
            (1e15, "1000000000000000"),
            (1e-12, "0"),
            (-1e-12, "0"),
            (0.123456789, "0.12345679"),
            (0.0000123456789, "0.0000123457"),
        ],
    )
    def test_floats(self, value: float, expected: str) -> None:
        assert format_value(value) == expected

    def test_integral_float_has_no_exponent(self) -> None:
        assert format_value(1e20) == "100000000000000000000"

    def test_integers(self) -> None:
        assert format_value(0) == "0"
        assert format_value(42) == "42"
        assert format_value(-7) == "-7"
        assert format_value(1700000000000) == "1700000000000"

    def test_decimals_follow_float_rules(self) -> None:
        assert format_value(Decimal("1.50")) == "1.5"
        assert format_value(Decimal("2.000")) == "2"
        assert format_value(Decimal("0")) == "0"
        assert format_value(Decimal("0.000012345678912")) == "0.0000123457"

    def test_booleans_are_lowercase(self) -> None:
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_strings_pass_through(self) -> None:
        assert format_value("BTC-USDT") == "BTC-USDT"
        assert format_value('{"type": "TAKE_PROFIT"}') == '{"type": "TAKE_PROFIT"}'

    def test_structures_become_compact_json(self) -> None:
        value = {"type": "TAKE_PROFIT_MARKET", "stopPrice": 31000}
        assert format_value(value) == '{"type":"TAKE_PROFIT_MARKET","stopPrice":31000}'
        assert format_value([1, 2]) == "[1,2]"

    def test_huge_integral_decimal_is_plain_digits(self) -> None:
        assert format_value(Decimal("1E+500")) == "1" + "0" * 500
        assert format_value(Decimal("1000000000000000.00")) == "1000000000000000"

    def test_decimal_too_long_to_round_rejected(self) -> None:
        with pytest.raises(ParameterError):
            format_value(Decimal("1" * 450 + ".5"))

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ParameterError):
            format_value(float("nan"))
        with pytest.raises(ParameterError):
            format_value(float("inf"))
        with pytest.raises(ParameterError):
            format_value(Decimal("Infinity"))

    def test_unknown_type_falls_back_to_str(self) -> None:
        class Side:
            def __str__(self) -> str:
                return "BUY"

        assert format_value(Side()) == "BUY"


class TestComplexValues:
    def test_detects_brackets_and_braces(self) -> None:
        assert is_complex_value('{"a":1}')
        assert is_complex_value("[1,2]")
        assert not is_complex_value("BTC-USDT")
        assert not is_complex_value("0.5")

    def test_contains_complex_values_checks_formatted_form(self) -> None:
        assert contains_complex_values({"symbol": "BTC-USDT", "stopLoss": {"type": "STOP"}})
        assert not contains_complex_values({"symbol": "BTC-USDT", "price": 1.5})

    def test_encode_value_uses_percent_20_for_space(self) -> None:
        assert encode_value('{"type": "TAKE_PROFIT"}') == "%7B%22type%22%3A%20%22TAKE_PROFIT%22%7D"

    def test_encode_value_escapes_literal_plus(self) -> None:
        assert encode_value("[a+b]") == "%5Ba%2Bb%5D"


class TestCanonicalise:
    def test_sorted_keys_with_timestamp_in_place(self) -> None:
        assert canonicalise({"b": 1, "a": 2, "timestamp": 3}) == "a=2&b=1&timestamp=3"

    def test_sort_is_case_sensitive(self) -> None:
        assert canonicalise({"b": 1, "B": 2, "a": 3}) == "B=2&a=3&b=1"

    def test_empty(self) -> None:
        assert canonicalise({}) == ""

    def test_deterministic_regardless_of_insertion_order(self) -> None:
        forward = {"symbol": "BTC-USDT", "side": "BUY", "price": 30000.5, "quantity": 0.01}
        backward = dict(reversed(list(forward.items())))
        assert canonicalise(forward) == canonicalise(backward)
        assert canonicalise(forward) == "price=30000.5&quantity=0.01&side=BUY&symbol=BTC-USDT"

    def test_encode_is_noop_without_complex_values(self) -> None:
        params = {"symbol": "BTC-USDT", "price": 0.1, "note": "a b", "reduceOnly": True}
        assert canonicalise(params, encode=True) == canonicalise(params, encode=False)

    def test_encode_only_touches_complex_fields(self) -> None:
        params = {
            "symbol": "BTC-USDT",
            "takeProfit": '{"type": "TAKE_PROFIT"}',
            "quantity": 0.5,
        }
        plain = canonicalise(params)
        encoded = canonicalise(params, encode=True)

        assert plain == 'quantity=0.5&symbol=BTC-USDT&takeProfit={"type": "TAKE_PROFIT"}'
        assert encoded == "quantity=0.5&symbol=BTC-USDT&takeProfit=%7B%22type%22%3A%20%22TAKE_PROFIT%22%7D"
        assert "+" not in encoded

        plain_pairs = plain.split("&")
        encoded_pairs = encoded.split("&")
        assert [p.split("=", 1)[0] for p in plain_pairs] == [p.split("=", 1)[0] for p in encoded_pairs]
        assert plain_pairs[:2] == encoded_pairs[:2]


class TestHMACSign:
    def test_golden_value(self) -> None:
        assert sign_message("s3cr3t", GOLDEN_MESSAGE) == GOLDEN_SIGNATURE

    def test_bytes_secret_matches_str_secret(self) -> None:
        assert sign_message(b"s3cr3t", GOLDEN_MESSAGE) == GOLDEN_SIGNATURE

    def test_signature_is_lowercase_hex_256_bits(self) -> None:
        sig = sign_message("s", "a=1")
        assert len(sig) == 64
        assert all(c in "0123456789abcdef" for c in sig)

    def test_verify(self) -> None:
        assert verify_signature("s3cr3t", GOLDEN_MESSAGE, GOLDEN_SIGNATURE)

    def test_wrong_secret_fails(self) -> None:
        assert not verify_signature("other", GOLDEN_MESSAGE, GOLDEN_SIGNATURE)

    def test_tampered_message_fails(self) -> None:
        assert not verify_signature("s3cr3t", GOLDEN_MESSAGE.replace("BTC", "ETH"), GOLDEN_SIGNATURE)

    def test_empty_signature_fails(self) -> None:
        assert not verify_signature("s3cr3t", GOLDEN_MESSAGE, "")
