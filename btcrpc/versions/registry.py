# btcrpc/versions/registry.py

"""Method Tables

Each supported daemon version owns one MethodTable. A table is derived
from the previous version's table by naming, for every parent method,
whether it is inherited, overridden or dropped, plus the methods the
version adds. Inherited entries are the parent's MethodSpec objects, so
unchanged methods resolve to the identical wire class and conversion.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from btcrpc.core.exceptions import MethodTableError
from btcrpc.schemas.base import JsonResponse


@dataclass(frozen=True, eq=False)
class MethodSpec:
    """
    One callable RPC method as exposed for a daemon version

    Attributes:
        name: Python wrapper name (``get_block_verbose_one``)
        rpc: Daemon method name (``getblock``)
        wire: Wire class, primitive result type (str, int, bool), or None
            when the method returns nothing
        params: Daemon argument names accepted positionally, in order
        fixed: Named arguments always sent (verbosity flags and the like)
        nullable: True if the daemon may answer null (``gettxout``)
        notes: Free-form remark shown by ``describe``
    """

    name: str
    rpc: str
    wire: Any
    params: Tuple[str, ...] = ()
    fixed: Mapping[str, Any] = field(default_factory=dict)
    nullable: bool = False
    notes: str = ""

    @property
    def has_model(self) -> bool:
        return self.is_wire_type and hasattr(self.wire, "to_model")

    @property
    def is_wire_type(self) -> bool:
        return isinstance(self.wire, type) and issubclass(self.wire, JsonResponse)

    @property
    def returns(self) -> str:
        """``version + model``, ``version``, ``returns <type>`` or ``returns nothing``"""
        if self.wire is None:
            return "returns nothing"
        if self.has_model:
            return "version + model"
        if self.is_wire_type:
            return "version"
        return f"returns {self.wire.__name__}"

    @property
    def model(self) -> Optional[type]:
        """Model class produced by the wire type's ``to_model``"""
        if not self.has_model:
            return None
        return self.wire.to_model.__annotations__.get("return")


class MethodRow(NamedTuple):
    """Introspection row for one method of a version"""

    name: str
    rpc: str
    returns: str
    model: Optional[str]
    notes: str


class MethodTable(Mapping[str, MethodSpec]):
    """Immutable name -> MethodSpec mapping for one daemon version"""

    def __init__(self, version: int, methods: Iterable[MethodSpec]):
        self.version = version
        self._methods: Dict[str, MethodSpec] = {}
        for spec in methods:
            if spec.name in self._methods:
                raise MethodTableError(
                    f"v{version}: method {spec.name} declared twice",
                    details={"version": version, "method": spec.name},
                )
            self._methods[spec.name] = spec

    def __getitem__(self, name: str) -> MethodSpec:
        return self._methods[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        return f"<MethodTable v{self.version}: {len(self)} methods>"

    def derive(
        self,
        version: int,
        inherit: Sequence[str] = (),
        override: Sequence[MethodSpec] = (),
        add: Sequence[MethodSpec] = (),
        drop: Sequence[str] = (),
    ) -> "MethodTable":
        """
        Build the next version's table from this one

        Every method of this table must be named exactly once across
        ``inherit``, ``override`` and ``drop``; methods in ``add`` must be
        new.

        Args:
            version: The derived table's daemon version
            inherit: Names carried over unchanged (same MethodSpec object)
            override: Replacement specs for changed methods
            add: Specs for methods introduced in ``version``
            drop: Names removed in ``version``

        Returns:
            The derived MethodTable

        Raises:
            MethodTableError: If a parent method is unaccounted for or named
                more than once, an override/drop names an unknown method,
                or an added method already exists
        """
        claimed: List[str] = list(inherit) + [spec.name for spec in override] + list(drop)

        doubled = sorted(name for name, count in Counter(claimed).items() if count > 1)
        unknown = sorted(set(claimed) - set(self))
        missing = sorted(set(self) - set(claimed))
        clashing = sorted(spec.name for spec in add if spec.name in self)

        problems = {
            "declared more than once": doubled,
            "not in the parent table": unknown,
            "not accounted for": missing,
            "added but already present": clashing,
        }
        problems = {problem: names for problem, names in problems.items() if names}
        if problems:
            summary = "; ".join(f"{problem}: {', '.join(names)}" for problem, names in problems.items())
            raise MethodTableError(
                f"v{version} derived from v{self.version}: {summary}",
                details={"version": version, "parent": self.version, **problems},
            )

        replaced = {spec.name: spec for spec in override}
        methods = [replaced.get(name, self[name]) for name in self if name not in drop]
        return MethodTable(version, methods + list(add))

    def wire_types(self) -> Dict[str, type]:
        """Wire classes reachable from this table, keyed by class name"""
        wires = {}
        for spec in self.values():
            if spec.is_wire_type:
                wires[spec.wire.__name__] = spec.wire
        return wires

    def by_rpc(self, rpc: str) -> Tuple[MethodSpec, ...]:
        """All wrappers calling ``rpc`` (e.g. both ``getblock`` verbosities)"""
        return tuple(spec for spec in self.values() if spec.rpc == rpc)

    def rows(self) -> List[MethodRow]:
        return [
            MethodRow(
                name=spec.name,
                rpc=spec.rpc,
                returns=spec.returns,
                model=spec.model.__name__ if spec.model is not None else None,
                notes=spec.notes,
            )
            for spec in sorted(self.values(), key=lambda spec: (spec.rpc, spec.name))
        ]


def module_attribute(table: MethodTable, module: str, name: str) -> type:
    """PEP 562 ``__getattr__`` body for version modules: look up a wire class"""
    wire = table.wire_types().get(name)
    if wire is None:
        raise AttributeError(f"module {module!r} has no attribute {name!r}")
    return wire
