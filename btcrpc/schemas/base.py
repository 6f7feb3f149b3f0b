# btcrpc/schemas/base.py

"""Wire Type Foundations

Pydantic bases for the per-version response schemas. Wire types reject
unknown fields so that a daemon whose schema drifted fails loudly at
deserialization instead of being silently misread.

JSON is parsed with ``decimal.Decimal`` for non-integer numbers so amounts
keep the exact digits the daemon printed.
"""

import json
from decimal import Decimal
from functools import lru_cache
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    RootModel,
    TypeAdapter,
    ValidationError,
    model_serializer,
)

from btcrpc.core.exceptions import MalformedResponseError, render_path


def parse_json(raw: Union[str, bytes, bytearray]) -> Any:
    """Parse a JSON document keeping non-integer numbers as Decimal"""
    return json.loads(raw, parse_float=Decimal)


def _encode(value: Any) -> str:
    """JSON text with Decimals written out digit for digit"""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        items = (f"{json.dumps(str(key))}: {_encode(item)}" for key, item in value.items())
        return "{" + ", ".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_encode(item) for item in value) + "]"
    return json.dumps(value)


def _malformed(type_name: str, error: ValidationError) -> MalformedResponseError:
    errors = error.errors(include_url=False, include_context=False)
    fields = []
    for item in errors:
        path = render_path(item["loc"])
        if path not in fields:
            fields.append(path)
    return MalformedResponseError(type_name, fields, errors)


class JsonResponse:
    """Deserialization entry points shared by object and root wire types"""

    @classmethod
    def from_json(cls, raw: Union[str, bytes, bytearray]):
        """
        Deserialize a raw JSON response body

        Raises:
            MalformedResponseError: Invalid JSON or a structural mismatch
        """
        try:
            value = parse_json(raw)
        except ValueError as e:
            raise MalformedResponseError(cls.__name__, [], [{"msg": f"invalid JSON: {e}"}])
        return cls.from_value(value)

    @classmethod
    def from_value(cls, value: Any):
        """
        Deserialize an already parsed JSON value

        Raises:
            MalformedResponseError: Structural mismatch, listing offending fields
        """
        try:
            return cls.model_validate(value, strict=True)
        except ValidationError as e:
            raise _malformed(cls.__name__, e) from e

    def to_json(self) -> str:
        """Re-encode in the daemon's JSON shape"""
        data = self.model_dump(mode="python", by_alias=True, exclude_unset=True)
        return _encode(data)


class WireModel(JsonResponse, BaseModel):
    """Base for JSON object responses and sub-objects

    Strict: a JSON string never stands in for a number or a boolean.
    """

    model_config = ConfigDict(extra="forbid", strict=True)


class WireRoot(JsonResponse):
    """Mixin for responses that are a bare JSON value (string, number, array, map)

    Subclasses also derive from ``RootModel[...]``.
    """
    pass


# ============================================================================
# Number-or-string amounts
# ============================================================================

class RawAmount(BaseModel):
    """An amount exactly as the daemon sent it

    ``text`` holds the decimal digits of either JSON shape; ``quoted`` records
    whether it arrived as a JSON string. Parsing into satoshis happens during
    conversion, so an unparsable string is a field conversion failure rather
    than a malformed response.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    quoted: bool = False

    @model_serializer(mode="plain")
    def serialize_amount(self) -> Any:
        if self.quoted:
            return self.text
        return Decimal(self.text)


def _read_amount(value: Any) -> Any:
    if isinstance(value, RawAmount):
        return value
    if isinstance(value, bool):
        raise ValueError("amount must be a JSON number or string, got boolean")
    if isinstance(value, (int, Decimal)):
        return RawAmount(text=str(value), quoted=False)
    if isinstance(value, float):
        return RawAmount(text=repr(value), quoted=False)
    if isinstance(value, str):
        return RawAmount(text=value, quoted=True)
    raise ValueError(f"amount must be a JSON number or string, got {type(value).__name__}")


WireAmount = Annotated[RawAmount, BeforeValidator(_read_amount)]


def _read_float(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("expected a JSON number, got boolean")
    if isinstance(value, (int, Decimal)):
        return float(value)
    if isinstance(value, float):
        return value
    raise ValueError(f"expected a JSON number, got {type(value).__name__}")


# Non-amount fractional numbers (difficulty, progress); JSON parsing yields Decimal
WireFloat = Annotated[float, BeforeValidator(_read_float)]


# ============================================================================
# Generic result decoding (used by the method surface)
# ============================================================================

@lru_cache(maxsize=None)
def _adapter(wire: Any) -> TypeAdapter:
    return TypeAdapter(wire)


def decode_result(wire: Any, value: Any) -> Any:
    """
    Decode a JSON-RPC ``result`` value into its wire representation

    Args:
        wire: A wire class, a plain Python type for primitive results
            (str, int, float, bool), or None for methods returning nothing
        value: Parsed ``result`` value

    Returns:
        Wire instance, validated primitive, or None

    Raises:
        MalformedResponseError: If the value does not match
    """
    if wire is None:
        if value is not None:
            raise MalformedResponseError("null", [], [{"msg": "expected null result", "input": value}])
        return None

    if isinstance(wire, type) and issubclass(wire, JsonResponse):
        return wire.from_value(value)

    if wire is float and isinstance(value, (int, Decimal)) and not isinstance(value, bool):
        value = float(value)
    try:
        return _adapter(wire).validate_python(value, strict=True)
    except ValidationError as e:
        raise _malformed(getattr(wire, "__name__", str(wire)), e) from e
