# btcrpc/schemas/v21/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v0.21)

Mempool entries gain ``unbroadcast`` and BIP-9 deployments gain
``min_activation_height``.
"""

from typing import Any, Dict, Optional

from pydantic import RootModel

from btcrpc.models import blockchain as model
from btcrpc.schemas.base import WireRoot
from btcrpc.schemas.v17 import blockchain as v17
from btcrpc.schemas.v19 import blockchain as v19
from btcrpc.utils import convert


class Bip9SoftforkInfo(v19.Bip9SoftforkInfo):
    min_activation_height: int

    def info_fields(self) -> Dict[str, Any]:
        fields = super().info_fields()
        fields["min_activation_height"] = convert.u32(
            self.min_activation_height, "min_activation_height"
        )
        return fields


class Softfork(v19.Softfork):
    bip9: Optional[Bip9SoftforkInfo] = None


class GetBlockchainInfo(v19.GetBlockchainInfo):
    """Result of ``getblockchaininfo``"""

    softforks: Dict[str, Softfork]


class MempoolEntry(v19.MempoolEntry):
    """Mempool entry; ``unbroadcast`` marks transactions not yet announced to peers"""

    unbroadcast: bool

    def entry_fields(self) -> Dict[str, Any]:
        fields = super().entry_fields()
        fields["unbroadcast"] = self.unbroadcast
        return fields


class GetMempoolEntry(MempoolEntry):
    """Result of ``getmempoolentry``"""
    pass


class GetRawMempoolVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getrawmempool true``"""

    def to_model(self) -> model.GetRawMempoolVerbose:
        return model.GetRawMempoolVerbose(entries=v17.mempool_entries("entries", self.root))


class GetMempoolAncestorsVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getmempoolancestors <txid> true``"""

    def to_model(self) -> model.GetMempoolAncestorsVerbose:
        return model.GetMempoolAncestorsVerbose(entries=v17.mempool_entries("entries", self.root))


class GetMempoolDescendantsVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getmempooldescendants <txid> true``"""

    def to_model(self) -> model.GetMempoolDescendantsVerbose:
        return model.GetMempoolDescendantsVerbose(entries=v17.mempool_entries("entries", self.root))


class GetMempoolInfo(v19.GetMempoolInfo):
    """Result of ``getmempoolinfo``; adds ``unbroadcastcount``"""

    unbroadcastcount: int

    def info_fields(self) -> Dict[str, Any]:
        fields = super().info_fields()
        fields["unbroadcast_count"] = convert.u64(self.unbroadcastcount, "unbroadcastcount")
        return fields
