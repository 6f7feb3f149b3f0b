# btcrpc/schemas/v20/wallet.py

"""Wire Types: Wallet (Bitcoin Core v0.20)

Confirmed wallet transactions now report ``blockheight`` and multisig
addresses come with their output descriptor.
"""

from typing import Any, Dict, List, Optional

from pydantic import RootModel

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireRoot
from btcrpc.schemas.v17 import wallet as v17
from btcrpc.utils import convert


class GetTransaction(v17.GetTransaction):
    """Result of ``gettransaction``"""

    blockheight: Optional[int] = None

    def block_height(self) -> Optional[int]:
        return convert.optional(self.blockheight, lambda v: convert.u32(v, "blockheight"))


class ListTransactionsItem(v17.ListTransactionsItem):
    """Element of the ``listtransactions`` array"""

    blockheight: Optional[int] = None

    def block_height(self) -> Optional[int]:
        return convert.optional(self.blockheight, lambda v: convert.u32(v, "blockheight"))


class ListTransactions(WireRoot, RootModel[List[ListTransactionsItem]]):
    """Result of ``listtransactions``"""

    def to_model(self) -> model.ListTransactions:
        return model.ListTransactions(
            transactions=convert.each("transactions", self.root, lambda item: item.to_model())
        )


class ListSinceBlock(v17.ListSinceBlock):
    """Result of ``listsinceblock``"""

    transactions: List[ListTransactionsItem]
    removed: Optional[List[ListTransactionsItem]] = None


class AddMultisigAddress(v17.AddMultisigAddress):
    """Result of ``addmultisigaddress``; ``warnings`` is reported from v23 on"""

    descriptor: str
    warnings: Optional[List[str]] = None

    def multisig_fields(self) -> Dict[str, Any]:
        fields = super().multisig_fields()
        fields.update(
            descriptor=self.descriptor,
            warnings=None if self.warnings is None else tuple(self.warnings),
        )
        return fields
