# btcrpc/schemas/v26/wallet.py

"""Wire Types: Wallet (Bitcoin Core v26)"""

from typing import Any, Dict, Optional

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireModel
from btcrpc.schemas.v17 import wallet as v17
from btcrpc.schemas.v19 import wallet as v19
from btcrpc.utils import convert


class LastProcessedBlock(WireModel):
    hash: str
    height: int

    def to_model(self) -> model.LastProcessedBlock:
        return model.LastProcessedBlock(
            hash=convert.hash256(self.hash, "hash"),
            height=convert.u32(self.height, "height"),
        )


class GetBalances(v19.GetBalances):
    """Result of ``getbalances``; adds the block the balances are as of"""

    lastprocessedblock: LastProcessedBlock

    def balances_fields(self) -> Dict[str, Any]:
        fields = super().balances_fields()
        with convert.field("lastprocessedblock"):
            fields["last_processed_block"] = self.lastprocessedblock.to_model()
        return fields


class WalletProcessPsbt(v17.WalletProcessPsbt):
    """Result of ``walletprocesspsbt``; ``hex`` is set once the PSBT is complete"""

    hex: Optional[str] = None

    def extracted(self) -> Optional[bytes]:
        return convert.optional(self.hex, lambda v: convert.hex_bytes(v, "hex"))
