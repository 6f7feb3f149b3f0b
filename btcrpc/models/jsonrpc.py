# btcrpc/models/jsonrpc.py

"""JSON-RPC envelope as spoken by bitcoind

bitcoind accepts JSON-RPC 1.0 and 2.0 requests and answers in the
request's dialect. Params may be positional (list) or named (object); this
package always sends named params.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class JSONRPCRequest(BaseModel):
    """JSON-RPC Request"""
    jsonrpc: Literal["1.0", "2.0"] = "1.0"
    id: Union[str, int]
    method: str
    params: Union[List[Any], Dict[str, Any]] = Field(default_factory=dict)


class JSONRPCError(BaseModel):
    """JSON-RPC Error Object"""
    code: int
    message: str
    data: Optional[Any] = None


class JSONRPCResponse(BaseModel):
    """JSON-RPC Response; 1.0 replies carry both keys, one of them null"""
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Optional[str] = None
    result: Optional[Any] = None
    error: Optional[JSONRPCError] = None
    id: Optional[Union[str, int]] = None
