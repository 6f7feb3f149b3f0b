# btcrpc/core/exceptions.py

"""Custom exceptions for the bitcoind compatibility layer

Two families live here. Response errors (malformed response, field
conversion failures) are raised by the wire and model layers. Usage and
collaborator errors (unsupported version/method, transport, daemon RPC
errors, configuration) are raised around them.
"""

from typing import Any, Optional, Sequence, Tuple, Union

PathSegment = Union[str, int]


class BtcRpcError(Exception):
    """Base exception for all btcrpc errors"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Response errors
# ============================================================================

class MalformedResponseError(BtcRpcError):
    """Raw JSON does not structurally match the expected wire type

    Raised for wrong JSON types, missing required fields and unknown
    fields. A daemon that produces this error is not running the version
    the wire type was written for.
    """

    def __init__(self, type_name: str, fields: Sequence[str], errors: Sequence[dict] = ()):
        self.type_name = type_name
        self.fields = list(fields)
        self.errors = list(errors)
        listed = ", ".join(self.fields) if self.fields else "<root>"
        super().__init__(
            f"malformed {type_name} response: {listed}",
            details={"type": type_name, "fields": self.fields, "errors": self.errors},
        )


def render_path(path: Sequence[PathSegment]) -> str:
    """Render a field path as ``entry[3].fees.base``"""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif segment.startswith("["):
            rendered += segment
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


class ConversionError(BtcRpcError):
    """A wire field could not be mapped to its model representation

    Attributes:
        path: Segments from the converted object down to the failing field.
            String segments are field names, int segments are list indices.
        cause: Human readable reason.
        value: The offending raw value (or a description of it).
    """

    def __init__(self, path: Sequence[PathSegment], cause: str, value: Any = None):
        self.path: Tuple[PathSegment, ...] = tuple(path)
        self.cause = cause
        self.value = value
        super().__init__(self._render(), details=self._details())

    @property
    def field(self) -> str:
        """Rendered path of the failing field"""
        return render_path(self.path)

    def prefixed(self, *segments: PathSegment) -> "ConversionError":
        """Prepend path segments while the error propagates upward"""
        self.path = tuple(segments) + self.path
        self.message = self._render()
        self.args = (self.message,)
        self.details = self._details()
        return self

    def _render(self) -> str:
        return f"{self.field or '<root>'}: {self.cause}"

    def _details(self) -> dict:
        return {"field": self.field, "cause": self.cause, "value": self.value}


class InvalidHexError(ConversionError):
    """Hex string has non-hex characters, odd length or the wrong size"""
    pass


class InvalidAmountError(ConversionError):
    """Amount string is unparsable, too precise or outside the money range"""
    pass


class UnknownVariantError(ConversionError):
    """A closed enumeration field carries a string outside the known set"""

    def __init__(self, path: Sequence[PathSegment], value: str, expected: Sequence[str]):
        self.expected = tuple(expected)
        super().__init__(
            path,
            f"unknown variant {value!r}, expected one of {', '.join(self.expected)}",
            value,
        )


class OutOfRangeError(ConversionError):
    """Numeric field does not fit the model's integer width or sign"""
    pass


class InconsistentFieldsError(ConversionError):
    """Sibling fields contradict each other"""
    pass


# ============================================================================
# Usage errors
# ============================================================================

class UnsupportedVersionError(BtcRpcError):
    """Daemon version is not one of the supported versions"""

    def __init__(self, version: Any, supported: Sequence[int]):
        self.version = version
        self.supported = tuple(supported)
        super().__init__(
            f"unsupported daemon version: {version}",
            details={"supported": list(self.supported)},
        )


class MethodTableError(BtcRpcError):
    """A version's method table does not account for its parent's methods"""
    pass


class UnsupportedMethodError(BtcRpcError):
    """Method is not part of the selected version's surface"""

    def __init__(self, method: str, version: int):
        self.method = method
        self.version = version
        super().__init__(
            f"method {method} is not supported by daemon version {version}",
            details={"method": method, "version": version},
        )


# ============================================================================
# Collaborator errors
# ============================================================================

class TransportError(BtcRpcError):
    """Daemon unreachable, HTTP failure, or response body is not JSON-RPC"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, details={"status_code": status_code})


class RpcError(BtcRpcError):
    """Daemon answered with a JSON-RPC error object"""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.data = data
        super().__init__(f"RPC error {code}: {message}", details={"code": code, "data": data})
        self.rpc_message = message


class ConfigurationError(BtcRpcError):
    """Exception raised when configuration is invalid or missing"""
    pass
