# btcrpc/schemas/v19/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v0.19)

v0.19 reports all deployments in one ``softforks`` map, replaces the
mempool entry ``size`` with ``vsize``/``weight`` and adds
``bip125-replaceable``. ``getblockfilter`` is new.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, RootModel

from btcrpc.models import blockchain as model
from btcrpc.models.primitives import Bip9SoftforkStatus, SoftforkType
from btcrpc.schemas.base import WireAmount, WireFloat, WireModel, WireRoot
from btcrpc.schemas.v17 import blockchain as v17
from btcrpc.utils import convert


# ============================================================================
# getblockchaininfo
# ============================================================================

class Bip9SoftforkInfo(WireModel):
    """``bip9`` object of a softfork map entry"""

    status: str
    bit: Optional[int] = None
    start_time: int
    timeout: int
    since: int
    statistics: Optional[v17.Bip9SoftforkStatistics] = None

    def info_fields(self) -> Dict[str, Any]:
        with convert.field("statistics"):
            statistics = convert.optional(self.statistics, lambda s: s.to_model())
        return dict(
            status=convert.variant(Bip9SoftforkStatus, self.status, "status"),
            bit=convert.optional(self.bit, lambda v: convert.u32(v, "bit")),
            start_time=convert.i64(self.start_time, "start_time"),
            timeout=convert.i64(self.timeout, "timeout"),
            since=convert.u32(self.since, "since"),
            statistics=statistics,
        )

    def to_model(self) -> model.Bip9SoftforkInfo:
        return model.Bip9SoftforkInfo(**self.info_fields())


class Softfork(WireModel):
    """Value of the ``softforks`` map

    Buried deployments carry ``height``; BIP-9 deployments carry ``bip9``
    and ``height`` only once active.
    """

    type: str
    bip9: Optional[Bip9SoftforkInfo] = None
    height: Optional[int] = None
    active: bool

    def to_model(self) -> model.Softfork:
        with convert.field("bip9"):
            bip9 = convert.optional(self.bip9, lambda info: info.to_model())
        return model.Softfork(
            type=convert.variant(SoftforkType, self.type, "type"),
            active=self.active,
            height=convert.optional(self.height, lambda v: convert.u32(v, "height")),
            bip9=bip9,
        )


class GetBlockchainInfo(WireModel):
    """Result of ``getblockchaininfo``"""

    chain: str
    blocks: int
    headers: int
    bestblockhash: str
    difficulty: WireFloat
    mediantime: int
    verificationprogress: WireFloat
    initialblockdownload: bool
    chainwork: str
    size_on_disk: int
    pruned: bool
    pruneheight: Optional[int] = None
    automatic_pruning: Optional[bool] = None
    prune_target_size: Optional[int] = None
    softforks: Dict[str, Softfork]
    warnings: str

    def to_model(self) -> model.GetBlockchainInfo:
        return model.GetBlockchainInfo(
            chain=self.chain,
            blocks=convert.u32(self.blocks, "blocks"),
            headers=convert.u32(self.headers, "headers"),
            best_block_hash=convert.hash256(self.bestblockhash, "bestblockhash"),
            time=None,
            difficulty=self.difficulty,
            median_time=convert.u32(self.mediantime, "mediantime"),
            verification_progress=self.verificationprogress,
            initial_block_download=self.initialblockdownload,
            chain_work=convert.hash256(self.chainwork, "chainwork"),
            size_on_disk=convert.u64(self.size_on_disk, "size_on_disk"),
            pruned=self.pruned,
            prune_height=convert.optional(self.pruneheight, lambda v: convert.u32(v, "pruneheight")),
            automatic_pruning=self.automatic_pruning,
            prune_target_size=convert.optional(
                self.prune_target_size, lambda v: convert.u64(v, "prune_target_size")
            ),
            softforks=convert.each_value(
                "softforks", self.softforks, lambda name, fork: (name, fork.to_model())
            ),
            warnings=self.warnings,
        )


class GetChainTxStats(v17.GetChainTxStats):
    """Result of ``getchaintxstats``; adds ``window_final_block_height``"""

    window_final_block_height: int

    def to_model(self) -> model.GetChainTxStats:
        return super().to_model().model_copy(update={
            "window_final_block_height": convert.u32(
                self.window_final_block_height, "window_final_block_height"
            ),
        })


class GetBlockFilter(WireModel):
    """Result of ``getblockfilter``"""

    filter: str
    header: str

    def to_model(self) -> model.GetBlockFilter:
        return model.GetBlockFilter(
            filter=convert.hex_bytes(self.filter, "filter"),
            header=convert.hash256(self.header, "header"),
        )


# ============================================================================
# Mempool
# ============================================================================

class MempoolEntry(WireModel):
    """Mempool entry (v0.19 shape)

    The top-level fee fields are deprecated duplicates of ``fees``.
    """

    vsize: int
    weight: int
    fee: WireAmount
    modifiedfee: WireAmount
    time: int
    height: int
    descendantcount: int
    descendantsize: int
    descendantfees: int
    ancestorcount: int
    ancestorsize: int
    ancestorfees: int
    wtxid: str
    fees: v17.MempoolEntryFees
    depends: List[str]
    spentby: List[str]
    bip125_replaceable: bool = Field(alias="bip125-replaceable")

    def entry_fields(self) -> Dict[str, Any]:
        with convert.field("fees"):
            fees = self.fees.to_model()
        v17.check_legacy_fees(self, fees)
        return dict(
            vsize=convert.u32(self.vsize, "vsize"),
            size=None,
            weight=convert.u32(self.weight, "weight"),
            time=convert.u32(self.time, "time"),
            height=convert.u32(self.height, "height"),
            descendant_count=convert.u32(self.descendantcount, "descendantcount"),
            descendant_size=convert.u64(self.descendantsize, "descendantsize"),
            ancestor_count=convert.u32(self.ancestorcount, "ancestorcount"),
            ancestor_size=convert.u64(self.ancestorsize, "ancestorsize"),
            wtxid=convert.hash256(self.wtxid, "wtxid"),
            fees=fees,
            depends=convert.hashes("depends", self.depends),
            spent_by=convert.hashes("spentby", self.spentby),
            bip125_replaceable=self.bip125_replaceable,
            unbroadcast=None,
        )

    def to_model(self) -> model.MempoolEntry:
        return model.MempoolEntry(**self.entry_fields())


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


class GetMempoolInfo(v17.GetMempoolInfo):
    """Result of ``getmempoolinfo``; adds ``loaded``"""

    loaded: bool

    def info_fields(self) -> Dict[str, Any]:
        return dict(
            loaded=self.loaded,
            size=convert.u64(self.size, "size"),
            total_vsize=convert.u64(self.bytes_, "bytes"),
            usage=convert.u64(self.usage, "usage"),
            max_mempool=convert.u64(self.maxmempool, "maxmempool"),
            mempool_min_fee=convert.fee_rate(self.mempoolminfee, "mempoolminfee"),
            min_relay_tx_fee=convert.fee_rate(self.minrelaytxfee, "minrelaytxfee"),
            unbroadcast_count=None,
            incremental_relay_fee=None,
            full_rbf=None,
        )

    def to_model(self) -> model.GetMempoolInfo:
        return model.GetMempoolInfo(**self.info_fields())
