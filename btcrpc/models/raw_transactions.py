# btcrpc/models/raw_transactions.py

"""Raw Transaction Models

Decoded transactions and the results of the ``== Rawtransactions ==``
section. Scripts and witness items are kept as bytes; the assembly string
is carried alongside for display only.
"""

from typing import Optional, Tuple, Union

from btcrpc.models.primitives import (
    Address,
    Amount,
    BlockHash,
    FeeRate,
    ModelBase,
    ScriptType,
    Txid,
    Wtxid,
)


class ScriptPubKey(ModelBase):
    """Output script

    ``address`` is the single address reported from v22 on; older daemons
    report ``addresses`` and ``required_signatures`` instead.
    """
    asm: str
    script: bytes
    type: ScriptType
    descriptor: Optional[str]
    address: Optional[Address]
    addresses: Optional[Tuple[Address, ...]]
    required_signatures: Optional[int]


class CoinbaseInput(ModelBase):
    """Input of a coinbase transaction"""
    coinbase: bytes
    witness: Optional[Tuple[bytes, ...]]
    sequence: int


class SpendInput(ModelBase):
    """Input spending a previous output"""
    txid: Txid
    vout: int
    script_sig: bytes
    script_sig_asm: str
    witness: Optional[Tuple[bytes, ...]]
    sequence: int


TransactionInput = Union[CoinbaseInput, SpendInput]


class TransactionOutput(ModelBase):
    value: Amount
    n: int
    script_pubkey: ScriptPubKey


class Transaction(ModelBase):
    """Decoded transaction"""
    txid: Txid
    wtxid: Wtxid
    version: int
    size: int
    vsize: int
    weight: int
    lock_time: int
    inputs: Tuple[TransactionInput, ...]
    outputs: Tuple[TransactionOutput, ...]


class GetRawTransaction(ModelBase):
    """Serialized transaction"""
    transaction: bytes


class GetRawTransactionVerbose(ModelBase):
    """Decoded transaction with its serialization and block context"""
    transaction: Transaction
    raw: bytes
    block_hash: Optional[BlockHash]
    confirmations: Optional[int]
    time: Optional[int]
    block_time: Optional[int]
    in_active_chain: Optional[bool]


class DecodeRawTransaction(ModelBase):
    transaction: Transaction


class CreateRawTransaction(ModelBase):
    """Serialized unsigned transaction"""
    transaction: bytes


class SendRawTransaction(ModelBase):
    txid: Txid


class MempoolAcceptance(ModelBase):
    """Mempool policy verdict for one transaction"""
    txid: Txid
    wtxid: Optional[Wtxid]
    allowed: Optional[bool]
    vsize: Optional[int]
    base_fee: Optional[Amount]
    reject_reason: Optional[str]


class TestMempoolAccept(ModelBase):
    __test__ = False

    results: Tuple[MempoolAcceptance, ...]


# ============================================================================
# Scripts
# ============================================================================

class DecodeScriptSegwit(ModelBase):
    """The script wrapped as a P2WSH (or P2WPKH) output"""
    asm: str
    script: bytes
    type: ScriptType
    descriptor: Optional[str]
    address: Optional[Address]
    addresses: Optional[Tuple[Address, ...]]
    required_signatures: Optional[int]
    p2sh_segwit: Optional[Address]


class DecodeScript(ModelBase):
    """Decoded script; ``p2sh`` is absent when the script cannot be wrapped"""
    asm: str
    type: ScriptType
    descriptor: Optional[str]
    address: Optional[Address]
    addresses: Optional[Tuple[Address, ...]]
    required_signatures: Optional[int]
    p2sh: Optional[Address]
    segwit: Optional[DecodeScriptSegwit]


class CombineRawTransaction(ModelBase):
    transaction: bytes


# ============================================================================
# Signing and funding
# ============================================================================

class FundRawTransaction(ModelBase):
    """Funded transaction; ``change_position`` is -1 without a change output"""
    transaction: bytes
    fee: Amount
    change_position: int


class SigningError(ModelBase):
    """Input that could not be signed"""
    txid: Txid
    vout: int
    script_sig: bytes
    witness: Optional[Tuple[bytes, ...]]
    sequence: int
    error: str


class SignRawTransactionWithKey(ModelBase):
    transaction: bytes
    complete: bool
    errors: Tuple[SigningError, ...]


# ============================================================================
# PSBT
# ============================================================================

class CreatePsbt(ModelBase):
    psbt: bytes


class CombinePsbt(ModelBase):
    psbt: bytes


class ConvertToPsbt(ModelBase):
    psbt: bytes


class JoinPsbts(ModelBase):
    psbt: bytes


class UtxoUpdatePsbt(ModelBase):
    psbt: bytes


class FinalizePsbt(ModelBase):
    """Finalized PSBT; ``transaction`` is set once extracted, ``psbt`` otherwise"""
    psbt: Optional[bytes]
    transaction: Optional[bytes]
    complete: bool


class AnalyzePsbtInputMissing(ModelBase):
    """Data an input still needs before it can be finalized

    Keys are identified by their key id, scripts by their hash.
    """
    pubkeys: Tuple[bytes, ...]
    signatures: Tuple[bytes, ...]
    redeem_script_hash: Optional[bytes]
    witness_script_hash: Optional[bytes]


class AnalyzePsbtInput(ModelBase):
    has_utxo: bool
    is_final: bool
    missing: Optional[AnalyzePsbtInputMissing]
    next: Optional[str]


class AnalyzePsbt(ModelBase):
    """Signing progress of a PSBT

    The size and fee estimates are only reported once every input has a
    UTXO; ``error`` is reported when the PSBT is invalid.
    """
    inputs: Tuple[AnalyzePsbtInput, ...]
    estimated_vsize: Optional[int]
    estimated_fee_rate: Optional[FeeRate]
    fee: Optional[Amount]
    next: str
    error: Optional[str]
