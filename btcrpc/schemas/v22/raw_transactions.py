# btcrpc/schemas/v22/raw_transactions.py

"""Wire Types: Raw Transactions (Bitcoin Core v22)

``scriptPubKey`` and ``decodescript`` report a single ``address``;
``addresses`` and ``reqSigs`` are gone.
"""

from typing import List, Optional

from pydantic import Field

from btcrpc.models import raw_transactions as model
from btcrpc.models.primitives import ScriptType
from btcrpc.schemas.base import WireModel
from btcrpc.schemas.v17 import raw_transactions as v17
from btcrpc.utils import convert


class ScriptPubKey(WireModel):
    """Output script; ``address`` is absent when the script has none"""

    asm: str
    hex: str
    address: Optional[str] = None
    type: str

    def descriptor(self) -> Optional[str]:
        """Output descriptors are not reported before v23"""
        return None

    def to_model(self) -> model.ScriptPubKey:
        return model.ScriptPubKey(
            asm=self.asm,
            script=convert.hex_bytes(self.hex, "hex"),
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=self.descriptor(),
            address=self.address,
            addresses=None,
            required_signatures=None,
        )


class TransactionOutput(v17.TransactionOutput):
    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")


class DecodeRawTransaction(v17.DecodeRawTransaction):
    """Result of ``decoderawtransaction``"""

    vout: List[TransactionOutput]


class GetRawTransactionVerbose(v17.GetRawTransactionVerbose):
    """Result of ``getrawtransaction <txid> true``"""

    vout: List[TransactionOutput]


class DecodeScriptSegwit(WireModel):
    """``decodescript.segwit`` with a single ``address``"""

    asm: str
    hex: str
    address: Optional[str] = None
    type: str
    p2sh_segwit: Optional[str] = Field(default=None, alias="p2sh-segwit")

    def descriptor(self) -> Optional[str]:
        return None

    def to_model(self) -> model.DecodeScriptSegwit:
        return model.DecodeScriptSegwit(
            asm=self.asm,
            script=convert.hex_bytes(self.hex, "hex"),
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=self.descriptor(),
            address=self.address,
            addresses=None,
            required_signatures=None,
            p2sh_segwit=self.p2sh_segwit,
        )


class DecodeScript(WireModel):
    """Result of ``decodescript``"""

    asm: str
    address: Optional[str] = None
    type: str
    p2sh: Optional[str] = None
    segwit: Optional[DecodeScriptSegwit] = None

    def descriptor(self) -> Optional[str]:
        return None

    def to_model(self) -> model.DecodeScript:
        with convert.field("segwit"):
            segwit = convert.optional(self.segwit, lambda v: v.to_model())
        return model.DecodeScript(
            asm=self.asm,
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=self.descriptor(),
            address=self.address,
            addresses=None,
            required_signatures=None,
            p2sh=self.p2sh,
            segwit=segwit,
        )
