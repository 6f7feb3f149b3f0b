# btcrpc/services/client.py

"""Method Surface

One client class per daemon version, generated from the version's method
table. Each wrapper sends its RPC and decodes the ``result`` into the
version's wire type; methods a version does not support are simply not
attributes of its class.

Example:
    with connect(version=26) as client:
        info = client.get_blockchain_info().to_model()
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Type

from btcrpc.core.config import Settings, settings
from btcrpc.core.exceptions import UnsupportedVersionError
from btcrpc.schemas.base import decode_result
from btcrpc.services import resolver
from btcrpc.services.transport import RpcTransport
from btcrpc.versions.registry import MethodSpec, MethodTable

logger = logging.getLogger(__name__)


class BitcoindClient:
    """Base class for the generated per-version clients"""

    version: int = 0
    methods: Optional[MethodTable] = None

    def __init__(self, transport: RpcTransport):
        self.transport = transport

    def call(self, name: str, *args, **kwargs) -> Any:
        """
        Invoke a wrapper by name

        Raises:
            UnsupportedMethodError: If this version has no such wrapper
        """
        spec = resolver.resolve(self.version, name)
        return _invoke(self, spec, args, kwargs)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.transport.endpoint}>"


def _bind(spec: MethodSpec, args: tuple, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Map wrapper arguments onto named RPC params; None means omitted"""
    if len(args) > len(spec.params):
        raise TypeError(
            f"{spec.name}() takes at most {len(spec.params)} positional arguments ({len(args)} given)"
        )
    params = dict(zip(spec.params, args))
    for key, value in kwargs.items():
        if key in params:
            raise TypeError(f"{spec.name}() got multiple values for argument {key!r}")
        if key in spec.fixed:
            raise TypeError(f"{spec.name}() sets {key!r} itself")
        params[key] = value
    params = {key: value for key, value in params.items() if value is not None}
    params.update(spec.fixed)
    return params


def _invoke(client: BitcoindClient, spec: MethodSpec, args: tuple, kwargs: Dict[str, Any]) -> Any:
    params = _bind(spec, args, kwargs)
    result = client.transport.call(spec.rpc, params)
    if result is None and spec.nullable:
        return None
    return decode_result(spec.wire, result)


def _make_wrapper(spec: MethodSpec):
    def wrapper(self, *args, **kwargs):
        return _invoke(self, spec, args, kwargs)

    wrapper.__name__ = spec.name
    wrapper.__qualname__ = spec.name
    returns = spec.wire.__name__ if spec.wire is not None else "None"
    wrapper.__doc__ = (
        f"Call ``{spec.rpc}``({', '.join(spec.params)}) and decode into {returns}"
        + (f"\n\n{spec.notes}" if spec.notes else "")
    )
    wrapper.spec = spec
    return wrapper


def client_class(version: Any) -> Type[BitcoindClient]:
    """
    The generated client class for a daemon version, built once per version

    Raises:
        UnsupportedVersionError: If the version is not supported
    """
    return _build_client_class(resolver.normalize_version(version))


@lru_cache(maxsize=None)
def _build_client_class(version: int) -> Type[BitcoindClient]:
    table = resolver.method_table(version)
    namespace = {name: _make_wrapper(spec) for name, spec in table.items()}
    namespace.update(version=version, methods=table, __module__=__name__)
    return type(f"BitcoindClientV{version}", (BitcoindClient,), namespace)


def detect_version(transport: RpcTransport) -> int:
    """Ask the daemon for its version via ``getnetworkinfo``"""
    info = transport.call("getnetworkinfo", {})
    reported = info.get("version") if isinstance(info, dict) else None
    if not isinstance(reported, int):
        raise UnsupportedVersionError(reported, resolver.SUPPORTED_VERSIONS)
    version = resolver.normalize_version(info["version"])
    logger.info(f"Detected bitcoind version {info['version']} (schema v{version})")
    return version


def connect(
    version: Optional[Any] = None,
    transport: Optional[RpcTransport] = None,
    config: Optional[Settings] = None,
    detect: bool = False,
) -> BitcoindClient:
    """
    Create a client for a daemon

    Args:
        version: Daemon version (defaults to DAEMON_VERSION)
        transport: Transport to use (defaults to one built from config)
        config: Settings (defaults to module settings)
        detect: Ask the daemon for its version instead of using ``version``

    Returns:
        An instance of the version's generated client class

    Raises:
        UnsupportedVersionError: If the version is not supported
    """
    config = config or settings
    transport = transport or RpcTransport(config=config)
    if detect:
        version = detect_version(transport)
    elif version is None:
        version = config.DAEMON_VERSION
    return client_class(version)(transport)
