# btcrpc/schemas/v21/raw_transactions.py

"""Wire Types: Raw Transactions (Bitcoin Core v0.21)"""

from typing import List, Optional

from pydantic import Field, RootModel

from btcrpc.models import raw_transactions as model
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.utils import convert


class MempoolAcceptanceFees(WireModel):
    base: WireAmount


class MempoolAcceptance(WireModel):
    """Element of the ``testmempoolaccept`` array

    ``vsize`` and ``fees`` are only reported for transactions that would
    be accepted.
    """

    txid: str
    wtxid: str
    allowed: bool
    vsize: Optional[int] = None
    fees: Optional[MempoolAcceptanceFees] = None
    reject_reason: Optional[str] = Field(default=None, alias="reject-reason")

    def to_model(self) -> model.MempoolAcceptance:
        with convert.field("fees"):
            base_fee = convert.optional(self.fees, lambda fees: convert.amount(fees.base, "base"))
        return model.MempoolAcceptance(
            txid=convert.hash256(self.txid, "txid"),
            wtxid=convert.hash256(self.wtxid, "wtxid"),
            allowed=self.allowed,
            vsize=convert.optional(self.vsize, lambda v: convert.u32(v, "vsize")),
            base_fee=base_fee,
            reject_reason=self.reject_reason,
        )


class TestMempoolAccept(WireRoot, RootModel[List[MempoolAcceptance]]):
    """Result of ``testmempoolaccept``"""

    __test__ = False

    def to_model(self) -> model.TestMempoolAccept:
        return model.TestMempoolAccept(
            results=convert.each("results", self.root, lambda result: result.to_model())
        )
