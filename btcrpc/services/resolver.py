# btcrpc/services/resolver.py

"""Version Resolver

Maps a daemon version to its method table. The mapping is static: callers
declare the version once and get the wire types written for it.
"""

import importlib
from types import ModuleType
from typing import Any, List, Tuple

from btcrpc.core.exceptions import UnsupportedMethodError, UnsupportedVersionError
from btcrpc.versions.registry import MethodRow, MethodSpec, MethodTable

SUPPORTED_VERSIONS: Tuple[int, ...] = tuple(range(17, 27))


def normalize_version(version: Any) -> int:
    """
    Reduce a version designation to its major number

    Accepts the major number (``26``), the daemon's numeric version as
    reported by ``getnetworkinfo`` (``170100``, ``260000``) or a version
    string (``"v0.17.1"``, ``"26.0"``).

    Raises:
        UnsupportedVersionError: If the version is not one of SUPPORTED_VERSIONS
    """
    major = None
    if isinstance(version, int) and not isinstance(version, bool):
        major = version // 10000 if version >= 10000 else version
    elif isinstance(version, str):
        parts = version.strip().lstrip("vV").split(".")
        if parts[0] == "0" and len(parts) > 1:
            parts = parts[1:]
        if parts[0].isdigit():
            major = int(parts[0])

    if major not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(version, SUPPORTED_VERSIONS)
    return major


def version_module(version: Any) -> ModuleType:
    """The ``btcrpc.versions.vNN`` module for a version"""
    return importlib.import_module(f"btcrpc.versions.v{normalize_version(version)}")


def method_table(version: Any) -> MethodTable:
    return version_module(version).METHODS


def resolve(version: Any, name: str) -> MethodSpec:
    """
    Look up a method by its Python wrapper name

    Raises:
        UnsupportedVersionError: Unknown version
        UnsupportedMethodError: The version does not expose ``name``
    """
    table = method_table(version)
    try:
        return table[name]
    except KeyError:
        raise UnsupportedMethodError(name, table.version)


def resolve_rpc(version: Any, rpc: str) -> Tuple[MethodSpec, ...]:
    """
    Look up the wrappers for a daemon method name

    ``getblock`` and the other verbosity-switched methods map to more than
    one wrapper.

    Raises:
        UnsupportedVersionError: Unknown version
        UnsupportedMethodError: The version does not expose ``rpc``
    """
    table = method_table(version)
    specs = table.by_rpc(rpc)
    if not specs:
        raise UnsupportedMethodError(rpc, table.version)
    return specs


def wire_type(version: Any, name: str) -> Any:
    """Wire class (or primitive type, or None) returned by a method"""
    return resolve(version, name).wire


def describe(version: Any) -> List[MethodRow]:
    """Introspection rows for every method of a version, sorted by RPC name"""
    return method_table(version).rows()
