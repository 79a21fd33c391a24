"""Tests for the codec entry points."""

import logging
import math
from datetime import datetime
from decimal import Decimal

import pytest

from jcs_sdk import (
    CanonicalConfig,
    CanonicalizationError,
    InvalidStringError,
    MaxDepthExceededError,
    NonFiniteNumberError,
    ParseError,
    UnsupportedTypeError,
    canonicalize,
    canonicalize_bytes,
    canonicalize_to_string,
    parse_json,
    validate_integrity,
)


def nested(depth):
    value = []
    for _ in range(depth - 1):
        value = [value]
    return value


class TestCanonicalize:
    """canonicalize / canonicalize_to_string."""

    def test_bytes_are_utf8_of_string(self):
        """Test bytes are the UTF-8 of the string."""
        value = {"name": "J\u00fcrgen", "tags": ["\u6771\u4eac", 1.5]}
        text = canonicalize_to_string(value)
        assert canonicalize(value) == text.encode("utf-8")
        assert isinstance(canonicalize(value), bytes)

    def test_non_ascii_bytes_are_literal_utf8(self):
        """Test non-ASCII bytes are literal UTF-8."""
        assert canonicalize("\u00f6") == b'"\xc3\xb6"'

    def test_nan_and_infinity_fail(self):
        """Test NaN and Infinity fail."""
        for value in (math.nan, math.inf, -math.inf, {"a": [math.nan]}):
            with pytest.raises(NonFiniteNumberError):
                canonicalize(value)

    @pytest.mark.parametrize(
        "value",
        [b"raw", {1, 2}, Decimal("1.5"), datetime(2024, 1, 1), object(), len, {"nested": [object()]}],
    )
    def test_unsupported_types(self, value):
        """Test unsupported types."""
        with pytest.raises(UnsupportedTypeError) as exc:
            canonicalize(value)
        assert exc.value.code == "UNSUPPORTED_TYPE"
        assert isinstance(exc.value, TypeError)

    def test_errors_share_a_base(self):
        """Test errors share a base."""
        with pytest.raises(CanonicalizationError):
            canonicalize([math.inf])

    def test_depth_limit(self):
        """Test depth limit."""
        config = CanonicalConfig(max_depth=5)
        assert canonicalize(nested(5), config) == b"[[[[[]]]]]"
        with pytest.raises(MaxDepthExceededError):
            canonicalize(nested(6), config)

    def test_default_depth_limit_protects_stack(self):
        """Test default depth limit protects stack."""
        with pytest.raises(MaxDepthExceededError):
            canonicalize(nested(10_000))

    def test_scalars_do_not_count_toward_depth(self):
        """Test scalars do not count toward depth."""
        config = CanonicalConfig(max_depth=1)
        assert canonicalize([1, "a", None], config) == b'[1,"a",null]'
        assert canonicalize("top", config) == b'"top"'


class TestParseJson:
    """parse_json."""

    def test_parses_utf8(self):
        """Test parses UTF-8."""
        assert parse_json(b'{"a":[1,2.5,"x"]}') == {"a": [1, 2.5, "x"]}

    def test_accepts_bytearray_and_memoryview(self):
        """Test accepts bytearray and memoryview."""
        assert parse_json(bytearray(b"[1]")) == [1]
        assert parse_json(memoryview(b"[1]")) == [1]

    def test_rejects_str(self):
        """Test rejects str."""
        with pytest.raises(UnsupportedTypeError):
            parse_json('{"a":1}')

    @pytest.mark.parametrize(
        "data",
        [b"", b"{", b"[1,]", b"{'a':1}", b"NaN", b"[Infinity]", b"[-Infinity]", b'{"a":1,"a":2}', b"\xff\xfe", b"1 2"],
    )
    def test_malformed(self, data):
        """Test that malformed JSON text raises ParseError."""
        with pytest.raises(ParseError) as exc:
            parse_json(data)
        assert exc.value.code == "PARSE_ERROR"

    def test_bom_rejected(self):
        """Test BOM rejected."""
        with pytest.raises(ParseError):
            parse_json(b"\xef\xbb\xbf{}")


class TestCanonicalizeBytes:
    """canonicalize_bytes re-normalizes arbitrary JSON text."""

    def test_reorders_and_strips_whitespace(self):
        """Test reorders and strips whitespace."""
        assert canonicalize_bytes(b'{ "b" : [1, 2.0, 3e0] ,\n "a": {"d": 1, "c": -0.0} }') == (
            b'{"a":{"c":0,"d":1},"b":[1,2,3]}'
        )

    def test_unescapes_unicode(self):
        """Test unescapes unicode."""
        assert canonicalize_bytes(b'"\\u00f6\\u20ac"') == '"\u00f6\u20ac"'.encode("utf-8")

    def test_rfc8785_example(self):
        """Test RFC 8785 example."""
        data = (
            b'{"numbers": [333333333.33333329, 1E30, 4.50, 2e-3, 0.000000000000000000000000001],'
            b' "string": "\\u20ac$\\u000F\\u000aA\'\\u0042\\u0022\\u005c\\\\\\"\\/",'
            b' "literals": [null, true, false]}'
        )
        expected = (
            '{"literals":[null,true,false],"numbers":[333333333.3333333,1e+30,4.5,0.002,1e-27],'
            '"string":"\u20ac$\\u000f\\nA\'B\\"\\\\\\\\\\"/"}'
        ).encode("utf-8")
        assert canonicalize_bytes(data) == expected

    def test_overflowing_literal(self):
        """Test overflowing literal."""
        with pytest.raises(NonFiniteNumberError):
            canonicalize_bytes(b"[1e400]")

    def test_lone_surrogate_escape(self):
        """Test lone surrogate escape."""
        with pytest.raises(InvalidStringError):
            canonicalize_bytes(b'"\\ud800"')

    def test_surrogate_pair_escape(self):
        """Test surrogate pair escape."""
        assert canonicalize_bytes(b'"\\ud83d\\ude00"') == '"\U0001f600"'.encode("utf-8")

    def test_idempotent(self):
        """Test that canonical bytes are unchanged by re-canonicalization."""
        first = canonicalize({"z": 3, "a": 1, "m": 2})
        assert canonicalize_bytes(first) == first

    def test_deep_input(self):
        """Test deep input."""
        with pytest.raises(MaxDepthExceededError):
            canonicalize_bytes(b"[" * 100_000 + b"]" * 100_000)


class TestValidateIntegrity:
    """validate_integrity never raises."""

    def test_canonical(self):
        """Test that canonical bytes pass the check."""
        assert validate_integrity(b'{"A":1,"a":2}') is True

    def test_whitespace(self):
        """Test that inserted whitespace fails the check."""
        assert validate_integrity(b'{ "A": 1, "a": 2 }') is False

    def test_key_order(self):
        """Test key order."""
        assert validate_integrity(b'{"a":2,"A":1}') is False

    def test_number_form(self):
        """Test number form."""
        assert validate_integrity(b"[1.0]") is False
        assert validate_integrity(b"[1]") is True

    def test_escape_form(self):
        """Test escape form."""
        assert validate_integrity(b'"\\u00f6"') is False
        assert validate_integrity('"\u00f6"'.encode("utf-8")) is True

    def test_decomposed_text_is_not_canonical(self):
        """Test decomposed text is not canonical."""
        assert validate_integrity('"e\u0301"'.encode("utf-8")) is False

    @pytest.mark.parametrize(
        "data",
        [b"", b"{", b"NaN", b"[1e400]", b'{"a":1,"a":2}', b"\xff", "text", None, 42],
    )
    def test_bad_input_is_false(self, data):
        """Test bad input is false."""
        assert validate_integrity(data) is False

    def test_round_trip_of_canonical_output(self):
        """Test round trip of canonical output."""
        data = canonicalize({"b": [True, None, 0.5], "a": "x"})
        assert validate_integrity(data) is True
        assert validate_integrity(bytearray(data)) is True

    def test_rejection_logged_at_debug(self, caplog):
        """Test rejection logged at debug."""
        with caplog.at_level(logging.DEBUG, logger="jcs_sdk"):
            assert validate_integrity(b"[NaN]") is False
        assert "PARSE_ERROR" in caplog.text

    def test_respects_config(self):
        """Test respects config."""
        data = b"[[[]]]"
        assert validate_integrity(data) is True
        assert validate_integrity(data, CanonicalConfig(max_depth=2)) is False


class TestConfig:
    """CanonicalConfig."""

    def test_defaults(self):
        """Test default depth limit."""
        assert CanonicalConfig().max_depth == 128

    def test_from_env(self, monkeypatch):
        """Test from env."""
        monkeypatch.setenv("JCS_MAX_DEPTH", "7")
        assert CanonicalConfig.from_env().max_depth == 7

    def test_from_env_default(self, monkeypatch):
        """Test from env default."""
        monkeypatch.delenv("JCS_MAX_DEPTH", raising=False)
        assert CanonicalConfig.from_env() == CanonicalConfig()

    def test_invalid(self):
        """Test that a non-positive depth is rejected."""
        with pytest.raises(ValueError):
            CanonicalConfig(max_depth=0)
