# btcrpc/schemas/v17/control.py

"""Wire Types: Control, Utility and Zmq (Bitcoin Core v0.17)"""

from typing import Any, Dict, List, Optional

from pydantic import Field, RootModel

from btcrpc.models import network as model
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.utils import convert


class GetMemoryInfoLocked(WireModel):
    """Locked memory pool statistics"""

    used: int
    free: int
    total: int
    locked: int
    chunks_used: int
    chunks_free: int


class GetMemoryInfoStats(WireModel):
    """Result of ``getmemoryinfo`` in the default "stats" mode

    Exposed at the wire level only.
    """

    locked: GetMemoryInfoLocked


class Logging(WireRoot, RootModel[Dict[str, bool]]):
    """Result of ``logging``: debug category -> enabled"""


# ============================================================================
# Util
# ============================================================================

class EstimateSmartFee(WireModel):
    """Result of ``estimatesmartfee``

    ``feerate`` (BTC/kvB) is omitted and ``errors`` filled in when the
    estimator has too little data.
    """

    feerate: Optional[WireAmount] = None
    errors: Optional[List[str]] = None
    blocks: int

    def to_model(self) -> model.EstimateSmartFee:
        return model.EstimateSmartFee(
            fee_rate=convert.optional(self.feerate, lambda v: convert.fee_rate(v, "feerate")),
            errors=None if self.errors is None else tuple(self.errors),
            blocks=convert.u32(self.blocks, "blocks"),
        )


class CreateMultisig(WireModel):
    """Result of ``createmultisig``"""

    address: str
    redeem_script: str = Field(alias="redeemScript")

    def multisig_fields(self) -> Dict[str, Any]:
        return dict(
            address=self.address,
            redeem_script=convert.hex_bytes(self.redeem_script, "redeemScript"),
            descriptor=None,
            warnings=None,
        )

    def to_model(self) -> model.CreateMultisig:
        return model.CreateMultisig(**self.multisig_fields())


class ValidateAddress(WireModel):
    """Result of ``validateaddress``

    An invalid address only reports ``isvalid``; later daemons add
    ``error`` and ``error_locations`` explaining what is wrong with it.
    """

    isvalid: bool
    address: Optional[str] = None
    script_pubkey: Optional[str] = Field(default=None, alias="scriptPubKey")
    isscript: Optional[bool] = None
    iswitness: Optional[bool] = None
    witness_version: Optional[int] = None
    witness_program: Optional[str] = None
    error: Optional[str] = None
    error_locations: Optional[List[int]] = None

    def to_model(self) -> model.ValidateAddress:
        return model.ValidateAddress(
            is_valid=self.isvalid,
            address=self.address,
            script_pubkey=convert.optional(
                self.script_pubkey, lambda v: convert.hex_bytes(v, "scriptPubKey")
            ),
            is_script=self.isscript,
            is_witness=self.iswitness,
            witness_version=convert.optional(
                self.witness_version, lambda v: convert.u32(v, "witness_version")
            ),
            witness_program=convert.optional(
                self.witness_program, lambda v: convert.hex_bytes(v, "witness_program")
            ),
            error=self.error,
            error_locations=None if self.error_locations is None else tuple(self.error_locations),
        )


# ============================================================================
# Zmq
# ============================================================================

class ZmqNotification(WireModel):
    """``hwm`` (outbound message high water mark) is reported from v0.19 on"""

    type: str
    address: str
    hwm: Optional[int] = None


class GetZmqNotifications(WireRoot, RootModel[List[ZmqNotification]]):
    """Result of ``getzmqnotifications``; exposed at the wire level only"""
