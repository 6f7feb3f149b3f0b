# btcrpc/schemas/v18/raw_transactions.py

"""Wire Types: Raw Transactions (Bitcoin Core v0.18)

``analyzepsbt``, ``joinpsbts`` and ``utxoupdatepsbt`` first appear in v0.18.
"""

from typing import List, Optional

from pydantic import RootModel

from btcrpc.models import raw_transactions as model
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.utils import convert


class AnalyzePsbtInputMissing(WireModel):
    """``analyzepsbt.inputs[].missing``; each list or hash only when something is missing"""

    pubkeys: Optional[List[str]] = None
    signatures: Optional[List[str]] = None
    redeemscript: Optional[str] = None
    witnessscript: Optional[str] = None

    def to_model(self) -> model.AnalyzePsbtInputMissing:
        return model.AnalyzePsbtInputMissing(
            pubkeys=convert.hex_list("pubkeys", self.pubkeys or []),
            signatures=convert.hex_list("signatures", self.signatures or []),
            redeem_script_hash=convert.optional(
                self.redeemscript, lambda v: convert.hex_bytes(v, "redeemscript")
            ),
            witness_script_hash=convert.optional(
                self.witnessscript, lambda v: convert.hex_bytes(v, "witnessscript")
            ),
        )


class AnalyzePsbtInput(WireModel):
    """Element of ``analyzepsbt.inputs``"""

    has_utxo: bool
    is_final: bool
    missing: Optional[AnalyzePsbtInputMissing] = None
    next: Optional[str] = None

    def to_model(self) -> model.AnalyzePsbtInput:
        with convert.field("missing"):
            missing = convert.optional(self.missing, lambda v: v.to_model())
        return model.AnalyzePsbtInput(
            has_utxo=self.has_utxo,
            is_final=self.is_final,
            missing=missing,
            next=self.next,
        )


class AnalyzePsbt(WireModel):
    """Result of ``analyzepsbt``

    The estimates and ``fee`` need every input's UTXO; ``error`` is set
    for an invalid PSBT.
    """

    inputs: List[AnalyzePsbtInput]
    estimated_vsize: Optional[int] = None
    estimated_feerate: Optional[WireAmount] = None
    fee: Optional[WireAmount] = None
    next: str
    error: Optional[str] = None

    def to_model(self) -> model.AnalyzePsbt:
        return model.AnalyzePsbt(
            inputs=convert.each("inputs", self.inputs, lambda item: item.to_model()),
            estimated_vsize=convert.optional(
                self.estimated_vsize, lambda v: convert.u32(v, "estimated_vsize")
            ),
            estimated_fee_rate=convert.optional(
                self.estimated_feerate, lambda v: convert.fee_rate(v, "estimated_feerate")
            ),
            fee=convert.optional(self.fee, lambda v: convert.amount(v, "fee")),
            next=self.next,
            error=self.error,
        )


class JoinPsbts(WireRoot, RootModel[str]):
    """Result of ``joinpsbts``: base64 PSBT"""

    def to_model(self) -> model.JoinPsbts:
        return model.JoinPsbts(psbt=convert.base64_bytes(self.root, "psbt"))


class UtxoUpdatePsbt(WireRoot, RootModel[str]):
    """Result of ``utxoupdatepsbt``: base64 PSBT"""

    def to_model(self) -> model.UtxoUpdatePsbt:
        return model.UtxoUpdatePsbt(psbt=convert.base64_bytes(self.root, "psbt"))
