# btcrpc/models/blockchain.py

"""Blockchain Models

Version-independent models for the ``== Blockchain ==`` section: blocks,
headers, chain state, softfork deployments, mempool and UTXO set.
"""

from typing import Annotated, Dict, Optional, Tuple

from pydantic import Field

from btcrpc.models.primitives import (
    Amount,
    Bip9SoftforkStatus,
    BlockHash,
    ChainTipsStatus,
    FeeRate,
    Hash256,
    ModelBase,
    SoftforkType,
    Txid,
    Wtxid,
)
from btcrpc.models.raw_transactions import ScriptPubKey

BlockHeaderBytes = Annotated[bytes, Field(min_length=80, max_length=80)]
CompactTarget = Annotated[bytes, Field(min_length=4, max_length=4)]


class GetBestBlockHash(ModelBase):
    """Hash of the tip of the most-work chain"""
    hash: BlockHash


class GetBlockCount(ModelBase):
    """Height of the most-work chain"""
    count: int


class GetBlockHash(ModelBase):
    """Hash of the block at a given height"""
    hash: BlockHash


class GetDifficulty(ModelBase):
    """Proof-of-work difficulty as a multiple of the minimum difficulty"""
    difficulty: float


class GetBlockVerboseZero(ModelBase):
    """Serialized block"""
    block: bytes


class GetBlockVerboseOne(ModelBase):
    """Block summary with transaction ids"""
    hash: BlockHash
    confirmations: int  # -1 when not on the main chain
    size: int
    stripped_size: Optional[int]
    weight: int
    height: int
    version: int
    version_hex: bytes
    merkle_root: Hash256
    tx: Tuple[Txid, ...]
    time: int
    median_time: Optional[int]
    nonce: int
    bits: CompactTarget
    difficulty: float
    chain_work: Hash256
    n_tx: int
    previous_block_hash: Optional[BlockHash]
    next_block_hash: Optional[BlockHash]


class GetBlockHeader(ModelBase):
    """Serialized 80-byte block header"""
    header: BlockHeaderBytes


class GetBlockHeaderVerbose(ModelBase):
    """Decoded block header"""
    hash: BlockHash
    confirmations: int
    height: int
    version: int
    version_hex: bytes
    merkle_root: Hash256
    time: int
    median_time: int
    nonce: int
    bits: CompactTarget
    difficulty: float
    chain_work: Hash256
    n_tx: int
    previous_block_hash: Optional[BlockHash]
    next_block_hash: Optional[BlockHash]


# ============================================================================
# Chain state and deployments
# ============================================================================

class Bip9SoftforkStatistics(ModelBase):
    """Signalling statistics for the current BIP-9 period"""
    period: int
    threshold: Optional[int]
    elapsed: int
    count: int
    possible: Optional[bool]


class Bip9SoftforkInfo(ModelBase):
    """BIP-9 deployment parameters and state"""
    status: Bip9SoftforkStatus
    bit: Optional[int]
    start_time: int
    timeout: int
    since: int
    min_activation_height: Optional[int] = None
    status_next: Optional[Bip9SoftforkStatus] = None
    statistics: Optional[Bip9SoftforkStatistics] = None
    signalling: Optional[str] = None


class Softfork(ModelBase):
    """State of one consensus deployment"""
    type: SoftforkType
    active: bool
    height: Optional[int]
    bip9: Optional[Bip9SoftforkInfo]


class GetBlockchainInfo(ModelBase):
    """Chain processing state

    ``softforks`` is None on daemons that moved deployments to
    getdeploymentinfo.
    """
    chain: str
    blocks: int
    headers: int
    best_block_hash: BlockHash
    time: Optional[int]
    difficulty: float
    median_time: int
    verification_progress: float
    initial_block_download: bool
    chain_work: Hash256
    size_on_disk: int
    pruned: bool
    prune_height: Optional[int]
    automatic_pruning: Optional[bool]
    prune_target_size: Optional[int]
    softforks: Optional[Dict[str, Softfork]]
    warnings: str


class GetDeploymentInfo(ModelBase):
    """Deployment states at a given block"""
    hash: BlockHash
    height: int
    deployments: Dict[str, Softfork]


class ChainTip(ModelBase):
    """One known chain tip"""
    height: int
    hash: BlockHash
    branch_length: int
    status: ChainTipsStatus


class GetChainTips(ModelBase):
    tips: Tuple[ChainTip, ...]


class GetChainTxStats(ModelBase):
    """Transaction rate statistics over a window of blocks"""
    time: int
    tx_count: int
    window_final_block_hash: BlockHash
    window_final_block_height: Optional[int]
    window_block_count: int
    window_tx_count: Optional[int]
    window_interval: Optional[int]
    tx_rate: Optional[float]


class GetBlockStats(ModelBase):
    """Per-block statistics, amounts in satoshis and rates in sat/vB"""
    average_fee: Amount
    average_fee_rate: int
    average_tx_size: int
    block_hash: BlockHash
    fee_rate_percentiles: Tuple[int, int, int, int, int]
    height: int
    inputs: int
    max_fee: Amount
    max_fee_rate: int
    max_tx_size: int
    median_fee: Amount
    median_time: int
    median_tx_size: int
    min_fee: Amount
    min_fee_rate: int
    min_tx_size: int
    outputs: int
    subsidy: Amount
    segwit_total_size: int
    segwit_total_weight: int
    segwit_txs: int
    time: int
    total_out: Amount
    total_size: int
    total_weight: int
    total_fee: Amount
    txs: int
    utxo_increase: int
    utxo_size_increase: int
    utxo_increase_actual: Optional[int] = None
    utxo_size_increase_actual: Optional[int] = None


class GetBlockFilter(ModelBase):
    """Compact block filter and its header"""
    filter: bytes
    header: Hash256


# ============================================================================
# Mempool
# ============================================================================

class MempoolEntryFees(ModelBase):
    base: Amount
    modified: Amount
    ancestor: Amount
    descendant: Amount


class MempoolEntry(ModelBase):
    """One mempool transaction

    ``vsize``/``weight`` appear from v0.19 and replace ``size``, which older
    daemons report with the same meaning.
    """
    vsize: Optional[int]
    size: Optional[int]
    weight: Optional[int]
    time: int
    height: int
    descendant_count: int
    descendant_size: int
    ancestor_count: int
    ancestor_size: int
    wtxid: Wtxid
    fees: MempoolEntryFees
    depends: Tuple[Txid, ...]
    spent_by: Tuple[Txid, ...]
    bip125_replaceable: Optional[bool]
    unbroadcast: Optional[bool]


class GetMempoolInfo(ModelBase):
    """Mempool size and fee floor; ``loaded`` is reported from v0.19"""
    loaded: Optional[bool]
    size: int
    total_vsize: int
    usage: int
    max_mempool: int
    mempool_min_fee: FeeRate
    min_relay_tx_fee: FeeRate
    unbroadcast_count: Optional[int]
    incremental_relay_fee: Optional[FeeRate]
    full_rbf: Optional[bool]


class GetRawMempool(ModelBase):
    txids: Tuple[Txid, ...]


class GetRawMempoolVerbose(ModelBase):
    entries: Dict[Txid, MempoolEntry]


class GetMempoolAncestors(ModelBase):
    txids: Tuple[Txid, ...]


class GetMempoolAncestorsVerbose(ModelBase):
    entries: Dict[Txid, MempoolEntry]


class GetMempoolDescendants(ModelBase):
    txids: Tuple[Txid, ...]


class GetMempoolDescendantsVerbose(ModelBase):
    entries: Dict[Txid, MempoolEntry]


# ============================================================================
# UTXO set
# ============================================================================

class GetTxOut(ModelBase):
    """Unspent transaction output"""
    best_block: BlockHash
    confirmations: int
    value: Amount
    script_pubkey: ScriptPubKey
    coinbase: bool


class GetTxOutSetInfo(ModelBase):
    """UTXO set statistics

    ``hash_serialized`` is the legacy serialized-set hash (``hash_serialized_2``
    before v26, ``hash_serialized_3`` after); ``muhash`` is only reported for
    the muhash hash type.
    """
    height: int
    best_block: BlockHash
    transactions: Optional[int]
    tx_outs: int
    bogo_size: int
    hash_serialized: Optional[Hash256]
    muhash: Optional[Hash256]
    disk_size: Optional[int]
    total_amount: Amount
    total_unspendable_amount: Optional[Amount] = None


class DumpTxOutSet(ModelBase):
    """Result of writing a UTXO snapshot"""
    coins_written: int
    base_hash: BlockHash
    base_height: int
    path: str
    txoutset_hash: Hash256
    n_chain_tx: int


class VerifyTxOutProof(ModelBase):
    """Transactions a merkle proof commits to; empty for an invalid proof"""
    txids: Tuple[Txid, ...]
