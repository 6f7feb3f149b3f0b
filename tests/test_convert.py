# tests/test_convert.py

"""Unit tests for the field conversion helpers

Covers amount parsing in both JSON shapes, hex decoding, integer bounds,
closed enumerations and how error paths are built up.
"""

from decimal import Decimal

import pytest

from btcrpc.core.exceptions import (
    ConversionError,
    InvalidAmountError,
    InvalidHexError,
    OutOfRangeError,
    UnknownVariantError,
)
from btcrpc.models.primitives import MAX_MONEY, ChainTipsStatus
from btcrpc.schemas.base import RawAmount
from btcrpc.utils import convert


class TestAmounts:
    """Test suite for BTC -> satoshi conversion"""

    def test_number_and_string_agree(self):
        """Same digits as JSON number or JSON string give the same satoshis"""
        as_number = RawAmount(text="1.23", quoted=False)
        as_string = RawAmount(text="1.23", quoted=True)

        assert convert.amount(as_number, "balance") == 123_000_000
        assert convert.amount(as_string, "balance") == 123_000_000

    def test_accepts_decimal_int_and_float(self):
        assert convert.amount(Decimal("0.00000001"), "fee") == 1
        assert convert.amount(21, "total") == 2_100_000_000
        assert convert.amount(0.1, "fee") == 10_000_000

    def test_zero(self):
        assert convert.amount("0.00", "unconfirmed") == 0

    def test_max_money_is_accepted(self):
        assert convert.amount("21000000", "total") == MAX_MONEY

    def test_beyond_max_money_is_rejected(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.amount("21000000.00000001", "total")

        assert exc_info.value.field == "total"
        assert "money range" in exc_info.value.cause

    def test_sub_satoshi_precision_is_rejected(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.amount("0.000000001", "fee")

        assert "one satoshi" in exc_info.value.cause

    def test_trailing_zeros_are_fine(self):
        assert convert.amount("0.100000000000", "fee") == 10_000_000

    def test_exponent_notation(self):
        assert convert.amount("1e-8", "fee") == 1
        assert convert.amount(Decimal("2.5E+1"), "total") == 2_500_000_000
        assert convert.amount("0e999999", "fee") == 0

    @pytest.mark.parametrize("text", ["1e999999", "-1e999999", "1E+9"])
    def test_huge_exponent_is_out_of_range(self, text):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.signed_amount(RawAmount(text=text, quoted=False), "amount")

        assert exc_info.value.field == "amount"
        assert "money range" in exc_info.value.cause

    @pytest.mark.parametrize("text", ["1.000000000000000000000000000001", "1e-999999999"])
    def test_precision_beyond_decimal_context_is_rejected(self, text):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.amount(RawAmount(text=text, quoted=True), "amount")

        assert "one satoshi" in exc_info.value.cause

    def test_negative_rejected_for_unsigned(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.amount("-0.5", "balance")

        assert exc_info.value.field == "balance"

    def test_signed_amount_keeps_sign(self):
        assert convert.signed_amount("-0.5", "amount") == -50_000_000
        assert convert.signed_amount(Decimal("-21000000"), "amount") == -MAX_MONEY

    @pytest.mark.parametrize("text", ["abc", "", "1,5", "NaN", "Infinity"])
    def test_unparsable_strings(self, text):
        with pytest.raises(InvalidAmountError) as exc_info:
            convert.amount(RawAmount(text=text, quoted=True), "balance")

        assert exc_info.value.field == "balance"
        assert exc_info.value.value == text

    def test_satoshi_amounts_are_range_checked(self):
        assert convert.satoshis(1410, "ancestorfees") == 1410
        with pytest.raises(InvalidAmountError):
            convert.satoshis(-1, "ancestorfees")
        with pytest.raises(InvalidAmountError):
            convert.satoshis(MAX_MONEY + 1, "ancestorfees")

    def test_fee_rate_is_sats_per_kvb(self):
        assert convert.fee_rate(Decimal("0.00001000"), "relayfee") == 1000


class TestHex:
    """Test suite for hex and base64 decoding"""

    def test_hex_bytes(self):
        assert convert.hex_bytes("00ff", "hex") == b"\x00\xff"
        assert convert.hex_bytes("", "hex") == b""

    def test_uppercase_hex(self):
        assert convert.hex_bytes("ABCD", "hex") == b"\xab\xcd"

    def test_non_hex_characters(self):
        with pytest.raises(InvalidHexError) as exc_info:
            convert.hex_bytes("zz", "hex")

        assert exc_info.value.field == "hex"
        assert "non-hex" in exc_info.value.cause

    def test_odd_length(self):
        with pytest.raises(InvalidHexError) as exc_info:
            convert.hex_bytes("abc", "hex")

        assert "odd" in exc_info.value.cause

    def test_hash256_keeps_display_order(self):
        text = "00" * 31 + "01"

        decoded = convert.hash256(text, "txid")

        assert len(decoded) == 32
        assert decoded[-1] == 1
        assert decoded.hex() == text

    def test_hash256_wrong_length(self):
        with pytest.raises(InvalidHexError) as exc_info:
            convert.hash256("00" * 31, "blockhash")

        assert exc_info.value.field == "blockhash"
        assert "expected 32 bytes, got 31" in exc_info.value.cause

    def test_hash160(self):
        assert len(convert.hash160("11" * 20, "hdseedid")) == 20
        with pytest.raises(InvalidHexError):
            convert.hash160("11" * 32, "hdseedid")

    def test_hex_list_tags_index(self):
        with pytest.raises(InvalidHexError) as exc_info:
            convert.hex_list("txinwitness", ["00", "zz"])

        assert exc_info.value.field == "txinwitness[1]"

    def test_hashes(self):
        values = ["aa" * 32, "bb" * 32]

        assert convert.hashes("depends", values) == (b"\xaa" * 32, b"\xbb" * 32)

    def test_base64(self):
        assert convert.base64_bytes("cHNidP8=", "psbt") == b"psbt\xff"
        with pytest.raises(ConversionError) as exc_info:
            convert.base64_bytes("not base64!", "psbt")

        assert exc_info.value.field == "psbt"


class TestIntegersAndVariants:
    """Test suite for bounded integers and closed enumerations"""

    def test_u32_bounds(self):
        assert convert.u32(0, "height") == 0
        assert convert.u32(2**32 - 1, "height") == 2**32 - 1
        with pytest.raises(OutOfRangeError):
            convert.u32(-1, "height")
        with pytest.raises(OutOfRangeError) as exc_info:
            convert.u32(2**32, "height")

        assert exc_info.value.field == "height"

    def test_i32_allows_negative(self):
        assert convert.i32(-1, "version") == -1
        with pytest.raises(OutOfRangeError):
            convert.i32(2**31, "version")

    def test_i64_and_u64(self):
        assert convert.i64(-(2**63), "timeoffset") == -(2**63)
        assert convert.u64(2**64 - 1, "size_on_disk") == 2**64 - 1
        with pytest.raises(OutOfRangeError):
            convert.u64(2**64, "size_on_disk")

    def test_variant_known(self):
        assert convert.variant(ChainTipsStatus, "headers-only", "status") is ChainTipsStatus.HEADERS_ONLY

    def test_variant_unknown_has_no_fallback(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            convert.variant(ChainTipsStatus, "weird", "status")

        error = exc_info.value
        assert error.field == "status"
        assert error.value == "weird"
        assert "active" in error.expected
        assert "unknown variant 'weird'" in error.message


class TestPaths:
    """Test suite for error path tagging"""

    def test_field_prefixes_nested_errors(self):
        with pytest.raises(ConversionError) as exc_info:
            with convert.field("fees"):
                convert.amount("x", "base")

        assert exc_info.value.field == "fees.base"
        assert exc_info.value.path == ("fees", "base")
        assert str(exc_info.value).startswith("fees.base:")

    def test_each_tags_failing_index(self):
        with pytest.raises(ConversionError) as exc_info:
            convert.each("tips", ["00" * 32, "zz"], lambda value: convert.hash256(value, "hash"))

        assert exc_info.value.field == "tips[1].hash"

    def test_each_value_tags_failing_key(self):
        items = {"csv": "1", "segwit": "-1"}

        with pytest.raises(ConversionError) as exc_info:
            convert.each_value("softforks", items, lambda key, value: (key, convert.amount(value, "since")))

        assert exc_info.value.field == "softforks[segwit].since"

    def test_each_value_rekeys(self):
        result = convert.each_value("entries", {"ab": 1}, lambda key, value: (bytes.fromhex(key), value))

        assert result == {b"\xab": 1}

    def test_nested_prefixes_accumulate(self):
        with pytest.raises(ConversionError) as exc_info:
            with convert.field("mine"):
                convert.each("outputs", [{"v": "x"}], lambda item: convert.amount(item["v"], "amount"))

        assert exc_info.value.field == "mine.outputs[0].amount"
        assert exc_info.value.details["field"] == "mine.outputs[0].amount"

    def test_optional(self):
        assert convert.optional(None, lambda value: 1 / 0) is None
        assert convert.optional(3, lambda value: value * 2) == 6
