# btcrpc/routes/surface.py

"""Method Surface Endpoints

Read-only listing of the supported daemon versions, the methods each
version exposes, and what every method returns.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from btcrpc.core.exceptions import BtcRpcError, UnsupportedMethodError, UnsupportedVersionError
from btcrpc.models.introspection import (
    ErrorResponse,
    MethodDetail,
    MethodListResponse,
    MethodSummary,
    VersionsResponse,
    VersionSummary,
)
from btcrpc.services import resolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/versions", tags=["versions"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def _not_found(e: BtcRpcError) -> JSONResponse:
    logger.info(f"Introspection lookup failed: {e}")
    body = ErrorResponse(error=e.message, details=e.details)
    return JSONResponse(content=body.model_dump(), status_code=404)


@router.get("", response_model=VersionsResponse)
async def list_versions(request: Request) -> VersionsResponse:
    """
    List supported daemon versions

    Args:
        request: Incoming request; ``default`` comes from the app's settings

    Returns:
        Versions with their method counts
    """
    versions = [
        VersionSummary(version=version, method_count=len(resolver.method_table(version)))
        for version in resolver.SUPPORTED_VERSIONS
    ]
    return VersionsResponse(versions=versions, default=request.app.state.settings.DAEMON_VERSION)


@router.get("/{version}/methods", response_model=MethodListResponse, responses=NOT_FOUND)
async def list_methods(version: str):
    """
    List the methods of one daemon version

    Args:
        version: ``26``, ``v0.17`` or the daemon's numeric version

    Returns:
        Method rows sorted by daemon method name
    """
    try:
        rows = resolver.describe(version)
        major = resolver.normalize_version(version)
    except UnsupportedVersionError as e:
        return _not_found(e)

    methods = [MethodSummary(**row._asdict()) for row in rows]
    return MethodListResponse(version=major, count=len(methods), methods=methods)


@router.get("/{version}/methods/{name}", response_model=MethodDetail, responses=NOT_FOUND)
async def get_method(version: str, name: str):
    """
    Describe one method of a daemon version

    ``name`` is the wrapper name (``get_block_verbose_one``); a daemon
    method name (``getblockchaininfo``) is accepted when it maps to a single
    wrapper.
    """
    try:
        spec = resolver.resolve(version, name)
    except UnsupportedMethodError as e:
        specs = resolver.method_table(version).by_rpc(name)
        if len(specs) != 1:
            return _not_found(e)
        spec = specs[0]
    except UnsupportedVersionError as e:
        return _not_found(e)

    return MethodDetail.from_spec(spec)
