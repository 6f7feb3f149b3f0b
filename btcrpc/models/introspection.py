# btcrpc/models/introspection.py

"""Introspection API Schemas

Response bodies of the read-only HTTP surface that lists supported daemon
versions and their methods.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from btcrpc.versions.registry import MethodSpec


class VersionSummary(BaseModel):
    """One supported daemon version"""

    version: int = Field(..., description="Daemon major version (17 = v0.17)")
    method_count: int = Field(..., description="Methods exposed for this version")


class VersionsResponse(BaseModel):
    versions: List[VersionSummary]
    default: int = Field(..., description="Version used when none is given")


class MethodSummary(BaseModel):
    """Row of the per-version method listing"""

    name: str = Field(..., description="Python wrapper name")
    rpc: str = Field(..., description="Daemon method name")
    returns: str = Field(..., description="version + model, version, returns <type> or returns nothing")
    model: Optional[str] = Field(default=None, description="Canonical model class")
    notes: str = ""


class MethodListResponse(BaseModel):
    version: int
    count: int
    methods: List[MethodSummary]


class MethodDetail(MethodSummary):
    """Full description of one method"""

    wire: Optional[str] = Field(default=None, description="Wire type or primitive result type")
    params: List[str] = Field(default_factory=list, description="Positional daemon arguments")
    fixed: Dict[str, Any] = Field(default_factory=dict, description="Arguments always sent")
    nullable: bool = False

    @classmethod
    def from_spec(cls, spec: MethodSpec) -> "MethodDetail":
        return cls(
            name=spec.name,
            rpc=spec.rpc,
            returns=spec.returns,
            model=spec.model.__name__ if spec.model is not None else None,
            notes=spec.notes,
            wire=spec.wire.__name__ if spec.wire is not None else None,
            params=list(spec.params),
            fixed=dict(spec.fixed),
            nullable=spec.nullable,
        )


class ErrorResponse(BaseModel):
    error: str
    details: Dict[str, Any] = Field(default_factory=dict)
