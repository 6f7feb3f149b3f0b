# btcrpc/utils/convert.py

"""Field Conversion Helpers

Building blocks for the ``to_model()`` methods on wire types. Every helper
takes the wire field name so a failure is raised as a ConversionError that
already names its field; composite conversions add their own segment on
the way up with ``field()`` and ``each()``.

All helpers are pure: no logging, no I/O, no shared state.
"""

import base64
import binascii
import re
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Type, TypeVar

from btcrpc.core.exceptions import (
    ConversionError,
    InvalidAmountError,
    InvalidHexError,
    OutOfRangeError,
    UnknownVariantError,
)
from btcrpc.models.primitives import MAX_MONEY

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Enum)

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")
_SATS_DIGITS = 8  # SATOSHIS_PER_BITCOIN == 10**8


# ============================================================================
# Path tagging
# ============================================================================

@contextmanager
def field(name: str) -> Iterator[None]:
    """Prefix any ConversionError raised inside the block with ``name``

    Example:
        with field("fees"):
            fees = self.fees.to_model()
    """
    try:
        yield
    except ConversionError as e:
        raise e.prefixed(name)


def each(name: str, items: Iterable[T], convert: Callable[[T], U]) -> Tuple[U, ...]:
    """Convert a list element-wise, failing on the first bad element

    The failing element's error is tagged ``name[index]``.
    """
    converted = []
    for index, item in enumerate(items):
        try:
            converted.append(convert(item))
        except ConversionError as e:
            raise e.prefixed(name, index)
    return tuple(converted)


def each_value(name: str, items: Dict[str, T], convert: Callable[[str, T], Tuple[Any, U]]) -> Dict[Any, U]:
    """Convert a JSON object entry-wise; ``convert`` returns the new (key, value)

    A failure is tagged ``name[key]``.
    """
    converted = {}
    for key, item in items.items():
        try:
            new_key, new_value = convert(key, item)
        except ConversionError as e:
            raise e.prefixed(name, f"[{key}]")
        converted[new_key] = new_value
    return converted


def optional(value: Optional[T], convert: Callable[[T], U]) -> Optional[U]:
    """Absent stays absent, present is converted"""
    if value is None:
        return None
    return convert(value)


# ============================================================================
# Hex and binary
# ============================================================================

def hex_bytes(value: str, name: str, length: Optional[int] = None) -> bytes:
    """
    Decode a hex string

    Args:
        value: Hex string from the wire
        name: Wire field name for error reporting
        length: Required decoded length in bytes, if fixed

    Returns:
        Decoded bytes

    Raises:
        InvalidHexError: Non-hex characters, odd length or length mismatch
    """
    if not _HEX_RE.match(value):
        raise InvalidHexError([name], "non-hex characters", value)
    if len(value) % 2:
        raise InvalidHexError([name], f"odd number of hex digits ({len(value)})", value)
    decoded = bytes.fromhex(value)
    if length is not None and len(decoded) != length:
        raise InvalidHexError(
            [name], f"expected {length} bytes, got {len(decoded)}", value
        )
    return decoded


def hash256(value: str, name: str) -> bytes:
    """Decode a 32-byte hash (txid, block hash, chain work)"""
    return hex_bytes(value, name, length=32)


def hash160(value: str, name: str) -> bytes:
    """Decode a 20-byte hash"""
    return hex_bytes(value, name, length=20)


def hex_list(name: str, values: Iterable[str], length: Optional[int] = None) -> Tuple[bytes, ...]:
    """Decode a list of hex strings; a failure is tagged ``name[index]``"""
    converted = []
    for index, value in enumerate(values):
        try:
            converted.append(hex_bytes(value, name, length=length))
        except ConversionError as e:
            e.path = e.path[1:]
            raise e.prefixed(name, index)
    return tuple(converted)


def hashes(name: str, values: Iterable[str]) -> Tuple[bytes, ...]:
    """Decode a list of 32-byte hashes"""
    return hex_list(name, values, length=32)


def base64_bytes(value: str, name: str) -> bytes:
    """Decode a base64 string (PSBTs, message signatures)"""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ConversionError([name], "invalid base64", value)


# ============================================================================
# Amounts
# ============================================================================

def _amount_text(value: Any) -> str:
    # WireAmount carries the normalised text of either JSON shape
    text = getattr(value, "text", None)
    if text is not None:
        return text
    if isinstance(value, float):
        return repr(value)
    return str(value)


def signed_amount(value: Any, name: str) -> int:
    """
    Convert a BTC amount to signed integer satoshis

    Accepts a WireAmount (JSON number or JSON string), Decimal, int or float.
    Both representations of the same number yield the same result.

    Raises:
        InvalidAmountError: Unparsable, non-finite, finer than one satoshi,
            or beyond 21 million BTC in magnitude
    """
    text = _amount_text(value)
    try:
        btc = Decimal(text)
    except InvalidOperation:
        raise InvalidAmountError([name], "not a decimal number", text)
    if not btc.is_finite():
        raise InvalidAmountError([name], "not a finite number", text)

    # Scale by 10**8 on the integer coefficient, never through a rounding context
    sign, digits, exponent = btc.as_tuple()
    coefficient = int("".join(map(str, digits)))
    if coefficient == 0:
        return 0
    if btc.adjusted() > _SATS_DIGITS:
        raise InvalidAmountError([name], "outside the money range", text)
    shift = exponent + _SATS_DIGITS
    if shift >= 0:
        sats = coefficient * 10 ** shift
    elif -shift > len(digits) or coefficient % 10 ** -shift:
        raise InvalidAmountError([name], "more precise than one satoshi", text)
    else:
        sats = coefficient // 10 ** -shift

    result = -sats if sign else sats
    if abs(result) > MAX_MONEY:
        raise InvalidAmountError([name], "outside the money range", text)
    return result


def amount(value: Any, name: str) -> int:
    """Convert a BTC amount to non-negative integer satoshis"""
    result = signed_amount(value, name)
    if result < 0:
        raise InvalidAmountError([name], "negative amount", _amount_text(value))
    return result


def satoshis(value: int, name: str) -> int:
    """Validate an amount that the daemon already reports in satoshis"""
    if value < 0 or value > MAX_MONEY:
        raise InvalidAmountError([name], "outside the money range", value)
    return value


def fee_rate(value: Any, name: str) -> int:
    """Convert a BTC/kvB fee rate to satoshis per 1000 virtual bytes"""
    return amount(value, name)


# ============================================================================
# Integers
# ============================================================================

def _bounded(value: int, name: str, low: int, high: int, kind: str) -> int:
    if value < low or value > high:
        raise OutOfRangeError([name], f"{value} does not fit {kind}", value)
    return value


def u32(value: int, name: str) -> int:
    return _bounded(value, name, 0, 2**32 - 1, "an unsigned 32-bit integer")


def u64(value: int, name: str) -> int:
    return _bounded(value, name, 0, 2**64 - 1, "an unsigned 64-bit integer")


def i32(value: int, name: str) -> int:
    return _bounded(value, name, -(2**31), 2**31 - 1, "a signed 32-bit integer")


def i64(value: int, name: str) -> int:
    return _bounded(value, name, -(2**63), 2**63 - 1, "a signed 64-bit integer")


# ============================================================================
# Enumerations
# ============================================================================

def variant(enum_type: Type[E], value: str, name: str) -> E:
    """
    Map a closed-set string onto its enum member

    Raises:
        UnknownVariantError: For any string outside the enum's values; there
            is no fallback member
    """
    try:
        return enum_type(value)
    except ValueError:
        raise UnknownVariantError([name], value, [member.value for member in enum_type])
