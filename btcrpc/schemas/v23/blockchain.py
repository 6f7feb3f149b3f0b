# btcrpc/schemas/v23/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v23)

Deployments move from ``getblockchaininfo`` to the new
``getdeploymentinfo``, and mempool entries drop the deprecated top-level
fee fields in favour of ``fees``.
"""

from typing import Dict, List, Optional

from pydantic import Field, RootModel

from btcrpc.models import blockchain as model
from btcrpc.models.primitives import Bip9SoftforkStatus, SoftforkType
from btcrpc.schemas.base import WireFloat, WireModel, WireRoot
from btcrpc.schemas.v17 import blockchain as v17
from btcrpc.schemas.v22 import blockchain as v22
from btcrpc.schemas.v23.raw_transactions import ScriptPubKey
from btcrpc.utils import convert


class GetBlockchainInfo(WireModel):
    """Result of ``getblockchaininfo``"""

    chain: str
    blocks: int
    headers: int
    bestblockhash: str
    difficulty: WireFloat
    time: int
    mediantime: int
    verificationprogress: WireFloat
    initialblockdownload: bool
    chainwork: str
    size_on_disk: int
    pruned: bool
    pruneheight: Optional[int] = None
    automatic_pruning: Optional[bool] = None
    prune_target_size: Optional[int] = None
    warnings: str

    def to_model(self) -> model.GetBlockchainInfo:
        return model.GetBlockchainInfo(
            chain=self.chain,
            blocks=convert.u32(self.blocks, "blocks"),
            headers=convert.u32(self.headers, "headers"),
            best_block_hash=convert.hash256(self.bestblockhash, "bestblockhash"),
            time=convert.u32(self.time, "time"),
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
            softforks=None,
            warnings=self.warnings,
        )


# ============================================================================
# getdeploymentinfo
# ============================================================================

class DeploymentStatistics(WireModel):
    """Signalling statistics; ``threshold``/``possible`` only while started"""

    period: int
    threshold: Optional[int] = None
    elapsed: int
    count: int
    possible: Optional[bool] = None

    def to_model(self) -> model.Bip9SoftforkStatistics:
        return model.Bip9SoftforkStatistics(
            period=convert.u32(self.period, "period"),
            threshold=convert.optional(self.threshold, lambda v: convert.u32(v, "threshold")),
            elapsed=convert.u32(self.elapsed, "elapsed"),
            count=convert.u32(self.count, "count"),
            possible=self.possible,
        )


class DeploymentBip9(WireModel):
    """``bip9`` object of a deployment

    ``signalling`` is a string of '#' (signalled) and '-' per block of the
    current period.
    """

    bit: Optional[int] = None
    start_time: int
    timeout: int
    min_activation_height: int
    status: str
    since: int
    status_next: str
    statistics: Optional[DeploymentStatistics] = None
    signalling: Optional[str] = None

    def to_model(self) -> model.Bip9SoftforkInfo:
        with convert.field("statistics"):
            statistics = convert.optional(self.statistics, lambda s: s.to_model())
        return model.Bip9SoftforkInfo(
            status=convert.variant(Bip9SoftforkStatus, self.status, "status"),
            bit=convert.optional(self.bit, lambda v: convert.u32(v, "bit")),
            start_time=convert.i64(self.start_time, "start_time"),
            timeout=convert.i64(self.timeout, "timeout"),
            since=convert.u32(self.since, "since"),
            min_activation_height=convert.u32(self.min_activation_height, "min_activation_height"),
            status_next=convert.variant(Bip9SoftforkStatus, self.status_next, "status_next"),
            statistics=statistics,
            signalling=self.signalling,
        )


class Deployment(WireModel):
    """Value of the ``deployments`` map"""

    type: str
    height: Optional[int] = None
    active: bool
    bip9: Optional[DeploymentBip9] = None

    def to_model(self) -> model.Softfork:
        with convert.field("bip9"):
            bip9 = convert.optional(self.bip9, lambda info: info.to_model())
        return model.Softfork(
            type=convert.variant(SoftforkType, self.type, "type"),
            active=self.active,
            height=convert.optional(self.height, lambda v: convert.u32(v, "height")),
            bip9=bip9,
        )


class GetDeploymentInfo(WireModel):
    """Result of ``getdeploymentinfo``"""

    hash: str
    height: int
    deployments: Dict[str, Deployment]

    def to_model(self) -> model.GetDeploymentInfo:
        return model.GetDeploymentInfo(
            hash=convert.hash256(self.hash, "hash"),
            height=convert.u32(self.height, "height"),
            deployments=convert.each_value(
                "deployments", self.deployments, lambda name, deployment: (name, deployment.to_model())
            ),
        )


# ============================================================================
# Mempool
# ============================================================================

class MempoolEntry(WireModel):
    """Mempool entry (v23 shape); all fees live in ``fees``"""

    vsize: int
    weight: int
    time: int
    height: int
    descendantcount: int
    descendantsize: int
    ancestorcount: int
    ancestorsize: int
    wtxid: str
    fees: v17.MempoolEntryFees
    depends: List[str]
    spentby: List[str]
    bip125_replaceable: bool = Field(alias="bip125-replaceable")
    unbroadcast: bool

    def to_model(self) -> model.MempoolEntry:
        with convert.field("fees"):
            fees = self.fees.to_model()
        return model.MempoolEntry(
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
            unbroadcast=self.unbroadcast,
        )


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


# ============================================================================
# gettxout
# ============================================================================

class GetTxOut(v22.GetTxOut):
    """Result of ``gettxout``; ``scriptPubKey`` carries ``desc``"""

    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")
