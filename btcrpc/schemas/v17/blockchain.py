# btcrpc/schemas/v17/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v0.17)

Response shapes for the ``== Blockchain ==`` section as first introduced in
v0.17. Later versions reuse these classes unless their schema changed.
"""

from typing import Dict, List, Optional

from pydantic import Field, RootModel

from btcrpc.core.exceptions import InconsistentFieldsError
from btcrpc.models import blockchain as model
from btcrpc.models.primitives import Bip9SoftforkStatus, ChainTipsStatus, SoftforkType
from btcrpc.schemas.base import WireAmount, WireFloat, WireModel, WireRoot
from btcrpc.schemas.v17.raw_transactions import ScriptPubKey
from btcrpc.utils import convert


class GetBestBlockHash(WireRoot, RootModel[str]):
    """Result of ``getbestblockhash``: block hash hex string"""

    def to_model(self) -> model.GetBestBlockHash:
        return model.GetBestBlockHash(hash=convert.hash256(self.root, "hash"))


class GetBlockCount(WireRoot, RootModel[int]):
    """Result of ``getblockcount``"""

    def to_model(self) -> model.GetBlockCount:
        return model.GetBlockCount(count=convert.u64(self.root, "count"))


class GetBlockHash(WireRoot, RootModel[str]):
    """Result of ``getblockhash``"""

    def to_model(self) -> model.GetBlockHash:
        return model.GetBlockHash(hash=convert.hash256(self.root, "hash"))


class GetDifficulty(WireRoot, RootModel[WireFloat]):
    """Result of ``getdifficulty``"""

    def to_model(self) -> model.GetDifficulty:
        return model.GetDifficulty(difficulty=self.root)


class GetBlockVerboseZero(WireRoot, RootModel[str]):
    """Result of ``getblock <hash> 0``: serialized block hex"""

    def to_model(self) -> model.GetBlockVerboseZero:
        return model.GetBlockVerboseZero(block=convert.hex_bytes(self.root, "block"))


class GetBlockVerboseOne(WireModel):
    """Result of ``getblock <hash> 1``

    ``previousblockhash`` is absent for the genesis block and
    ``nextblockhash`` for the tip.
    """

    hash: str
    confirmations: int
    size: int
    strippedsize: int
    weight: int
    height: int
    version: int
    version_hex: str = Field(alias="versionHex")
    merkleroot: str
    tx: List[str]
    time: int
    mediantime: int
    nonce: int
    bits: str
    difficulty: WireFloat
    chainwork: str
    n_tx: int = Field(alias="nTx")
    previousblockhash: Optional[str] = None
    nextblockhash: Optional[str] = None

    def to_model(self) -> model.GetBlockVerboseOne:
        return model.GetBlockVerboseOne(
            hash=convert.hash256(self.hash, "hash"),
            confirmations=convert.i64(self.confirmations, "confirmations"),
            size=convert.u32(self.size, "size"),
            stripped_size=convert.u32(self.strippedsize, "strippedsize"),
            weight=convert.u32(self.weight, "weight"),
            height=convert.u32(self.height, "height"),
            version=convert.i32(self.version, "version"),
            version_hex=convert.hex_bytes(self.version_hex, "versionHex", length=4),
            merkle_root=convert.hash256(self.merkleroot, "merkleroot"),
            tx=convert.hashes("tx", self.tx),
            time=convert.u32(self.time, "time"),
            median_time=convert.u32(self.mediantime, "mediantime"),
            nonce=convert.u32(self.nonce, "nonce"),
            bits=convert.hex_bytes(self.bits, "bits", length=4),
            difficulty=self.difficulty,
            chain_work=convert.hash256(self.chainwork, "chainwork"),
            n_tx=convert.u32(self.n_tx, "nTx"),
            previous_block_hash=convert.optional(
                self.previousblockhash, lambda v: convert.hash256(v, "previousblockhash")
            ),
            next_block_hash=convert.optional(
                self.nextblockhash, lambda v: convert.hash256(v, "nextblockhash")
            ),
        )


class GetBlockHeader(WireRoot, RootModel[str]):
    """Result of ``getblockheader <hash> false``: 80-byte header hex"""

    def to_model(self) -> model.GetBlockHeader:
        return model.GetBlockHeader(header=convert.hex_bytes(self.root, "header", length=80))


class GetBlockHeaderVerbose(WireModel):
    """Result of ``getblockheader <hash> true``"""

    hash: str
    confirmations: int
    height: int
    version: int
    version_hex: str = Field(alias="versionHex")
    merkleroot: str
    time: int
    mediantime: int
    nonce: int
    bits: str
    difficulty: WireFloat
    chainwork: str
    n_tx: int = Field(alias="nTx")
    previousblockhash: Optional[str] = None
    nextblockhash: Optional[str] = None

    def to_model(self) -> model.GetBlockHeaderVerbose:
        return model.GetBlockHeaderVerbose(
            hash=convert.hash256(self.hash, "hash"),
            confirmations=convert.i64(self.confirmations, "confirmations"),
            height=convert.u32(self.height, "height"),
            version=convert.i32(self.version, "version"),
            version_hex=convert.hex_bytes(self.version_hex, "versionHex", length=4),
            merkle_root=convert.hash256(self.merkleroot, "merkleroot"),
            time=convert.u32(self.time, "time"),
            median_time=convert.u32(self.mediantime, "mediantime"),
            nonce=convert.u32(self.nonce, "nonce"),
            bits=convert.hex_bytes(self.bits, "bits", length=4),
            difficulty=self.difficulty,
            chain_work=convert.hash256(self.chainwork, "chainwork"),
            n_tx=convert.u32(self.n_tx, "nTx"),
            previous_block_hash=convert.optional(
                self.previousblockhash, lambda v: convert.hash256(v, "previousblockhash")
            ),
            next_block_hash=convert.optional(
                self.nextblockhash, lambda v: convert.hash256(v, "nextblockhash")
            ),
        )


# ============================================================================
# getblockchaininfo
# ============================================================================

class SoftforkReject(WireModel):
    """``reject`` object of a legacy IsSuperMajority softfork"""

    status: bool


class LegacySoftfork(WireModel):
    """Element of the v0.17 ``softforks`` array (bip34, bip66, bip65)"""

    id: str
    version: int
    reject: SoftforkReject

    def to_model(self) -> model.Softfork:
        return model.Softfork(
            type=SoftforkType.BURIED,
            active=self.reject.status,
            height=None,
            bip9=None,
        )


class Bip9SoftforkStatistics(WireModel):
    """Signalling statistics, present only while a deployment is ``started``"""

    period: int
    threshold: int
    elapsed: int
    count: int
    possible: bool

    def to_model(self) -> model.Bip9SoftforkStatistics:
        return model.Bip9SoftforkStatistics(
            period=convert.u32(self.period, "period"),
            threshold=convert.u32(self.threshold, "threshold"),
            elapsed=convert.u32(self.elapsed, "elapsed"),
            count=convert.u32(self.count, "count"),
            possible=self.possible,
        )


class Bip9Softfork(WireModel):
    """Value of the v0.17 ``bip9_softforks`` map (csv, segwit)"""

    status: str
    bit: Optional[int] = None
    start_time: int = Field(alias="startTime")
    timeout: int
    since: int
    statistics: Optional[Bip9SoftforkStatistics] = None

    def to_model(self) -> model.Softfork:
        status = convert.variant(Bip9SoftforkStatus, self.status, "status")
        with convert.field("statistics"):
            statistics = convert.optional(self.statistics, lambda s: s.to_model())
        info = model.Bip9SoftforkInfo(
            status=status,
            bit=convert.optional(self.bit, lambda v: convert.u32(v, "bit")),
            start_time=convert.i64(self.start_time, "startTime"),
            timeout=convert.i64(self.timeout, "timeout"),
            since=convert.u32(self.since, "since"),
            statistics=statistics,
        )
        return model.Softfork(
            type=SoftforkType.BIP9,
            active=status is Bip9SoftforkStatus.ACTIVE,
            height=None,
            bip9=info,
        )


class GetBlockchainInfo(WireModel):
    """Result of ``getblockchaininfo``

    v0.17 splits deployments into a ``softforks`` array and a
    ``bip9_softforks`` map; both are merged into the model's single
    ``softforks`` map keyed by deployment name. The prune fields only
    appear on pruned nodes.
    """

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
    softforks: List[LegacySoftfork]
    bip9_softforks: Dict[str, Bip9Softfork]
    warnings: str

    def to_model(self) -> model.GetBlockchainInfo:
        softforks = dict(zip(
            (fork.id for fork in self.softforks),
            convert.each("softforks", self.softforks, lambda fork: fork.to_model()),
        ))
        softforks.update(convert.each_value(
            "bip9_softforks", self.bip9_softforks, lambda name, fork: (name, fork.to_model())
        ))
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
            softforks=softforks,
            warnings=self.warnings,
        )


# ============================================================================
# Chain statistics
# ============================================================================

class ChainTipsItem(WireModel):
    """Element of the ``getchaintips`` array"""

    height: int
    hash: str
    branchlen: int
    status: str

    def to_model(self) -> model.ChainTip:
        return model.ChainTip(
            height=convert.u32(self.height, "height"),
            hash=convert.hash256(self.hash, "hash"),
            branch_length=convert.u32(self.branchlen, "branchlen"),
            status=convert.variant(ChainTipsStatus, self.status, "status"),
        )


class GetChainTips(WireRoot, RootModel[List[ChainTipsItem]]):
    """Result of ``getchaintips``"""

    def to_model(self) -> model.GetChainTips:
        return model.GetChainTips(tips=convert.each("tips", self.root, lambda tip: tip.to_model()))


class GetChainTxStats(WireModel):
    """Result of ``getchaintxstats``

    ``window_tx_count``, ``window_interval`` and ``txrate`` are omitted when
    the window is empty.
    """

    time: int
    txcount: int
    window_final_block_hash: str
    window_block_count: int
    window_tx_count: Optional[int] = None
    window_interval: Optional[int] = None
    txrate: Optional[WireFloat] = None

    def to_model(self) -> model.GetChainTxStats:
        return model.GetChainTxStats(
            time=convert.u32(self.time, "time"),
            tx_count=convert.u64(self.txcount, "txcount"),
            window_final_block_hash=convert.hash256(
                self.window_final_block_hash, "window_final_block_hash"
            ),
            window_final_block_height=None,
            window_block_count=convert.u32(self.window_block_count, "window_block_count"),
            window_tx_count=convert.optional(
                self.window_tx_count, lambda v: convert.u64(v, "window_tx_count")
            ),
            window_interval=convert.optional(
                self.window_interval, lambda v: convert.u32(v, "window_interval")
            ),
            tx_rate=self.txrate,
        )


class GetBlockStats(WireModel):
    """Result of ``getblockstats``; amounts are integer satoshis here"""

    avgfee: int
    avgfeerate: int
    avgtxsize: int
    blockhash: str
    feerate_percentiles: List[int]
    height: int
    ins: int
    maxfee: int
    maxfeerate: int
    maxtxsize: int
    medianfee: int
    mediantime: int
    mediantxsize: int
    minfee: int
    minfeerate: int
    mintxsize: int
    outs: int
    subsidy: int
    swtotal_size: int
    swtotal_weight: int
    swtxs: int
    time: int
    total_out: int
    total_size: int
    total_weight: int
    totalfee: int
    txs: int
    utxo_increase: int
    utxo_size_inc: int

    def to_model(self) -> model.GetBlockStats:
        if len(self.feerate_percentiles) != 5:
            raise InconsistentFieldsError(
                ["feerate_percentiles"],
                f"expected 5 percentiles, got {len(self.feerate_percentiles)}",
                self.feerate_percentiles,
            )
        return model.GetBlockStats(
            average_fee=convert.satoshis(self.avgfee, "avgfee"),
            average_fee_rate=convert.u64(self.avgfeerate, "avgfeerate"),
            average_tx_size=convert.u32(self.avgtxsize, "avgtxsize"),
            block_hash=convert.hash256(self.blockhash, "blockhash"),
            fee_rate_percentiles=tuple(
                convert.u64(rate, "feerate_percentiles") for rate in self.feerate_percentiles
            ),
            height=convert.u32(self.height, "height"),
            inputs=convert.u32(self.ins, "ins"),
            max_fee=convert.satoshis(self.maxfee, "maxfee"),
            max_fee_rate=convert.u64(self.maxfeerate, "maxfeerate"),
            max_tx_size=convert.u32(self.maxtxsize, "maxtxsize"),
            median_fee=convert.satoshis(self.medianfee, "medianfee"),
            median_time=convert.u32(self.mediantime, "mediantime"),
            median_tx_size=convert.u32(self.mediantxsize, "mediantxsize"),
            min_fee=convert.satoshis(self.minfee, "minfee"),
            min_fee_rate=convert.u64(self.minfeerate, "minfeerate"),
            min_tx_size=convert.u32(self.mintxsize, "mintxsize"),
            outputs=convert.u32(self.outs, "outs"),
            subsidy=convert.satoshis(self.subsidy, "subsidy"),
            segwit_total_size=convert.u64(self.swtotal_size, "swtotal_size"),
            segwit_total_weight=convert.u64(self.swtotal_weight, "swtotal_weight"),
            segwit_txs=convert.u32(self.swtxs, "swtxs"),
            time=convert.u32(self.time, "time"),
            total_out=convert.satoshis(self.total_out, "total_out"),
            total_size=convert.u64(self.total_size, "total_size"),
            total_weight=convert.u64(self.total_weight, "total_weight"),
            total_fee=convert.satoshis(self.totalfee, "totalfee"),
            txs=convert.u32(self.txs, "txs"),
            utxo_increase=convert.i32(self.utxo_increase, "utxo_increase"),
            utxo_size_increase=convert.i64(self.utxo_size_inc, "utxo_size_inc"),
        )


# ============================================================================
# Mempool
# ============================================================================

class MempoolEntryFees(WireModel):
    """``fees`` object of a mempool entry, amounts in BTC"""

    base: WireAmount
    modified: WireAmount
    ancestor: WireAmount
    descendant: WireAmount

    def to_model(self) -> model.MempoolEntryFees:
        return model.MempoolEntryFees(
            base=convert.amount(self.base, "base"),
            modified=convert.amount(self.modified, "modified"),
            ancestor=convert.amount(self.ancestor, "ancestor"),
            descendant=convert.amount(self.descendant, "descendant"),
        )


def check_legacy_fees(entry, fees: model.MempoolEntryFees) -> None:
    """
    Cross-check deprecated top-level fee fields against the ``fees`` object

    ``fee``/``modifiedfee`` are BTC, ``ancestorfees``/``descendantfees`` are
    satoshis; all four duplicate a ``fees`` member.

    Raises:
        InconsistentFieldsError: If a legacy field disagrees with ``fees``
    """
    pairs = (
        ("fee", convert.amount(entry.fee, "fee"), fees.base),
        ("modifiedfee", convert.amount(entry.modifiedfee, "modifiedfee"), fees.modified),
        ("ancestorfees", convert.satoshis(entry.ancestorfees, "ancestorfees"), fees.ancestor),
        ("descendantfees", convert.satoshis(entry.descendantfees, "descendantfees"), fees.descendant),
    )
    for name, legacy, current in pairs:
        if legacy != current:
            raise InconsistentFieldsError(
                [name], f"disagrees with fees object ({legacy} != {current} sat)", legacy
            )


class MempoolEntry(WireModel):
    """Mempool entry as reported by ``getmempoolentry`` and the verbose
    mempool listings (v0.17 shape)

    ``size`` is the virtual size. The top-level fee fields are deprecated
    duplicates of ``fees``.
    """

    size: int
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
    fees: MempoolEntryFees
    depends: List[str]
    spentby: List[str]

    def to_model(self) -> model.MempoolEntry:
        with convert.field("fees"):
            fees = self.fees.to_model()
        check_legacy_fees(self, fees)
        return model.MempoolEntry(
            vsize=None,
            size=convert.u32(self.size, "size"),
            weight=None,
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
            bip125_replaceable=None,
            unbroadcast=None,
        )


class GetMempoolEntry(MempoolEntry):
    """Result of ``getmempoolentry``"""
    pass


def mempool_entries(name: str, entries: Dict[str, MempoolEntry]) -> dict:
    """Convert a txid-keyed map of mempool entries"""
    return convert.each_value(
        name,
        entries,
        lambda txid, entry: (convert.hash256(txid, "txid"), entry.to_model()),
    )


class GetRawMempool(WireRoot, RootModel[List[str]]):
    """Result of ``getrawmempool`` (verbose=false)"""

    def to_model(self) -> model.GetRawMempool:
        return model.GetRawMempool(txids=convert.hashes("txids", self.root))


class GetRawMempoolVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getrawmempool true``: txid to entry map"""

    def to_model(self) -> model.GetRawMempoolVerbose:
        return model.GetRawMempoolVerbose(entries=mempool_entries("entries", self.root))


class GetMempoolAncestors(WireRoot, RootModel[List[str]]):
    """Result of ``getmempoolancestors`` (verbose=false)"""

    def to_model(self) -> model.GetMempoolAncestors:
        return model.GetMempoolAncestors(txids=convert.hashes("txids", self.root))


class GetMempoolAncestorsVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getmempoolancestors <txid> true``"""

    def to_model(self) -> model.GetMempoolAncestorsVerbose:
        return model.GetMempoolAncestorsVerbose(entries=mempool_entries("entries", self.root))


class GetMempoolDescendants(WireRoot, RootModel[List[str]]):
    """Result of ``getmempooldescendants`` (verbose=false)"""

    def to_model(self) -> model.GetMempoolDescendants:
        return model.GetMempoolDescendants(txids=convert.hashes("txids", self.root))


class GetMempoolDescendantsVerbose(WireRoot, RootModel[Dict[str, MempoolEntry]]):
    """Result of ``getmempooldescendants <txid> true``"""

    def to_model(self) -> model.GetMempoolDescendantsVerbose:
        return model.GetMempoolDescendantsVerbose(entries=mempool_entries("entries", self.root))


class GetMempoolInfo(WireModel):
    """Result of ``getmempoolinfo``; fee floors are BTC/kvB"""

    size: int
    bytes_: int = Field(alias="bytes")
    usage: int
    maxmempool: int
    mempoolminfee: WireAmount
    minrelaytxfee: WireAmount

    def to_model(self) -> model.GetMempoolInfo:
        return model.GetMempoolInfo(
            loaded=None,
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


# ============================================================================
# UTXO set
# ============================================================================

class GetTxOut(WireModel):
    """Result of ``gettxout``; the daemon returns null for spent outputs"""

    bestblock: str
    confirmations: int
    value: WireAmount
    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")
    coinbase: bool

    def to_model(self) -> model.GetTxOut:
        with convert.field("scriptPubKey"):
            script_pubkey = self.script_pubkey.to_model()
        return model.GetTxOut(
            best_block=convert.hash256(self.bestblock, "bestblock"),
            confirmations=convert.u32(self.confirmations, "confirmations"),
            value=convert.amount(self.value, "value"),
            script_pubkey=script_pubkey,
            coinbase=self.coinbase,
        )


class GetTxOutSetInfo(WireModel):
    """Result of ``gettxoutsetinfo``"""

    height: int
    bestblock: str
    transactions: int
    txouts: int
    bogosize: int
    hash_serialized_2: str
    disk_size: int
    total_amount: WireAmount

    def to_model(self) -> model.GetTxOutSetInfo:
        return model.GetTxOutSetInfo(
            height=convert.u32(self.height, "height"),
            best_block=convert.hash256(self.bestblock, "bestblock"),
            transactions=convert.u64(self.transactions, "transactions"),
            tx_outs=convert.u64(self.txouts, "txouts"),
            bogo_size=convert.u64(self.bogosize, "bogosize"),
            hash_serialized=convert.hash256(self.hash_serialized_2, "hash_serialized_2"),
            muhash=None,
            disk_size=convert.u64(self.disk_size, "disk_size"),
            total_amount=convert.amount(self.total_amount, "total_amount"),
        )



class VerifyTxOutProof(WireRoot, RootModel[List[str]]):
    """Result of ``verifytxoutproof``: txids the proof commits to"""

    def to_model(self) -> model.VerifyTxOutProof:
        return model.VerifyTxOutProof(txids=convert.hashes("txids", self.root))
