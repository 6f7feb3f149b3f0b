# btcrpc/models/wallet.py

"""Wallet Models

Version-independent models for the ``== Wallet ==`` section. Wallet
deltas (``amount``/``fee`` of wallet transactions) are signed; balances
are not.
"""

from typing import Dict, Literal, Optional, Tuple, Union

from btcrpc.models.primitives import (
    Address,
    AddressPurpose,
    Amount,
    Bip125Replaceable,
    BlockHash,
    FeeRate,
    Hash160,
    ModelBase,
    ScriptType,
    SignedAmount,
    TransactionCategory,
    Txid,
)
from btcrpc.models.raw_transactions import SigningError


class GetBalance(ModelBase):
    balance: SignedAmount


class GetUnconfirmedBalance(ModelBase):
    balance: Amount


class GetReceivedByAddress(ModelBase):
    amount: Amount


class GetBalancesMine(ModelBase):
    """Balances from outputs the wallet can sign for"""
    trusted: Amount
    untrusted_pending: Amount
    immature: Amount
    used: Optional[Amount]  # only with avoid_reuse


class GetBalancesWatchOnly(ModelBase):
    """Balances from watch-only outputs"""
    trusted: Amount
    untrusted_pending: Amount
    immature: Amount


class LastProcessedBlock(ModelBase):
    """Block the wallet state corresponds to"""
    hash: BlockHash
    height: int


class GetBalances(ModelBase):
    mine: GetBalancesMine
    watch_only: Optional[GetBalancesWatchOnly]
    last_processed_block: Optional[LastProcessedBlock]


class WalletScanning(ModelBase):
    """Progress of a running rescan"""
    duration: int
    progress: float


class GetWalletInfo(ModelBase):
    """Wallet state

    ``scanning`` is None when the daemon does not report it, False when no
    rescan is running.
    """
    wallet_name: str
    wallet_version: int
    balance: Amount
    unconfirmed_balance: Amount
    immature_balance: Amount
    tx_count: int
    keypool_oldest: Optional[int]
    keypool_size: int
    keypool_size_hd_internal: Optional[int]
    unlocked_until: Optional[int]
    pay_tx_fee: FeeRate
    hd_seed_id: Optional[Hash160]
    private_keys_enabled: bool
    avoid_reuse: Optional[bool]
    scanning: Optional[Union[WalletScanning, Literal[False]]]
    descriptors: Optional[bool]


# ============================================================================
# Transactions
# ============================================================================

class GetTransactionDetail(ModelBase):
    """Per-output effect of a wallet transaction"""
    involves_watch_only: Optional[bool]
    address: Optional[Address]
    category: TransactionCategory
    amount: SignedAmount
    label: Optional[str]
    vout: int
    fee: Optional[SignedAmount]
    abandoned: Optional[bool]


class GetTransaction(ModelBase):
    """Wallet transaction"""
    amount: SignedAmount
    fee: Optional[SignedAmount]
    confirmations: int  # negative when conflicted
    generated: Optional[bool]
    trusted: Optional[bool]
    block_hash: Optional[BlockHash]
    block_height: Optional[int]
    block_index: Optional[int]
    block_time: Optional[int]
    txid: Txid
    wallet_conflicts: Tuple[Txid, ...]
    time: int
    time_received: int
    comment: Optional[str]
    comment_to: Optional[str]
    replaces_txid: Optional[Txid]
    replaced_by_txid: Optional[Txid]
    bip125_replaceable: Bip125Replaceable
    details: Tuple[GetTransactionDetail, ...]
    transaction: bytes


class ListTransactionsItem(ModelBase):
    involves_watch_only: Optional[bool]
    address: Optional[Address]
    category: TransactionCategory
    amount: SignedAmount
    label: Optional[str]
    vout: int
    fee: Optional[SignedAmount]
    confirmations: int
    generated: Optional[bool]
    trusted: Optional[bool]
    block_hash: Optional[BlockHash]
    block_height: Optional[int]
    block_index: Optional[int]
    block_time: Optional[int]
    txid: Txid
    wallet_conflicts: Tuple[Txid, ...]
    time: int
    time_received: int
    comment: Optional[str]
    comment_to: Optional[str]
    replaces_txid: Optional[Txid]
    replaced_by_txid: Optional[Txid]
    bip125_replaceable: Bip125Replaceable
    abandoned: Optional[bool]


class ListTransactions(ModelBase):
    transactions: Tuple[ListTransactionsItem, ...]


class ListUnspentItem(ModelBase):
    txid: Txid
    vout: int
    address: Optional[Address]
    label: Optional[str]
    script_pubkey: bytes
    amount: Amount
    confirmations: int
    redeem_script: Optional[bytes]
    witness_script: Optional[bytes]
    spendable: bool
    solvable: bool
    descriptor: Optional[str]
    safe: bool


class ListUnspent(ModelBase):
    outputs: Tuple[ListUnspentItem, ...]


# ============================================================================
# Sending
# ============================================================================

class SendToAddress(ModelBase):
    txid: Txid


class SendMany(ModelBase):
    txid: Txid


class SendManyVerbose(ModelBase):
    txid: Txid
    fee_reason: str


class BumpFee(ModelBase):
    """Replacement transaction created by fee bumping"""
    txid: Txid
    original_fee: Amount
    fee: Amount
    errors: Tuple[str, ...]


class PsbtBumpFee(ModelBase):
    """Unsigned replacement PSBT"""
    psbt: bytes
    original_fee: Amount
    fee: Amount
    errors: Tuple[str, ...]


class Send(ModelBase):
    complete: bool
    txid: Optional[Txid]
    transaction: Optional[bytes]
    psbt: Optional[bytes]


# ============================================================================
# Wallet lifecycle
# ============================================================================

class CreateWallet(ModelBase):
    name: str
    warnings: Tuple[str, ...]


class LoadWallet(ModelBase):
    name: str
    warnings: Tuple[str, ...]


class UnloadWallet(ModelBase):
    warnings: Tuple[str, ...]


class ListWallets(ModelBase):
    wallets: Tuple[str, ...]


class UpgradeWallet(ModelBase):
    wallet_name: str
    previous_version: int
    current_version: int
    result: Optional[str]
    error: Optional[str]


class ImportDescriptorsError(ModelBase):
    code: int
    message: str


class ImportDescriptorsResult(ModelBase):
    success: bool
    warnings: Optional[Tuple[str, ...]]
    error: Optional[ImportDescriptorsError]


class ImportDescriptors(ModelBase):
    results: Tuple[ImportDescriptorsResult, ...]


class GetNewAddress(ModelBase):
    address: Address


class GetRawChangeAddress(ModelBase):
    address: Address


# ============================================================================
# Addresses and labels
# ============================================================================

class AddMultisigAddress(ModelBase):
    address: Address
    redeem_script: bytes
    descriptor: Optional[str]
    warnings: Optional[Tuple[str, ...]]


class GetAddressesByLabel(ModelBase):
    """Addresses carrying a label, with their address book purpose"""
    addresses: Dict[Address, AddressPurpose]


class AddressLabel(ModelBase):
    name: str
    purpose: Optional[AddressPurpose]


class GetAddressInfo(ModelBase):
    """What the wallet knows about an address

    Script details are only known for solvable addresses and the HD fields
    only for keys derived by the wallet. The nested ``embedded`` object of
    P2SH-wrapped addresses is not carried over.
    """
    address: Address
    script_pubkey: bytes
    is_mine: bool
    is_watch_only: bool
    solvable: Optional[bool]
    descriptor: Optional[str]
    parent_descriptor: Optional[str]
    is_script: Optional[bool]
    is_change: Optional[bool]
    is_witness: Optional[bool]
    witness_version: Optional[int]
    witness_program: Optional[bytes]
    script: Optional[ScriptType]
    hex: Optional[bytes]
    pubkeys: Optional[Tuple[bytes, ...]]
    sigs_required: Optional[int]
    pubkey: Optional[bytes]
    is_compressed: Optional[bool]
    label: Optional[str]
    timestamp: Optional[int]
    hd_key_path: Optional[str]
    hd_seed_id: Optional[Hash160]
    hd_master_key_id: Optional[Hash160]
    hd_master_fingerprint: Optional[bytes]
    labels: Tuple[AddressLabel, ...]


class GetReceivedByLabel(ModelBase):
    amount: Amount


class AddressGroupingItem(ModelBase):
    address: Address
    amount: Amount
    label: Optional[str]


class ListAddressGroupings(ModelBase):
    """Groups of addresses whose common ownership was revealed on chain"""
    groupings: Tuple[Tuple[AddressGroupingItem, ...], ...]


class ListLabels(ModelBase):
    labels: Tuple[str, ...]


class ListReceivedByAddressItem(ModelBase):
    involves_watch_only: Optional[bool]
    address: Address
    amount: Amount
    confirmations: int
    label: str
    txids: Tuple[Txid, ...]


class ListReceivedByAddress(ModelBase):
    entries: Tuple[ListReceivedByAddressItem, ...]


class ListReceivedByLabelItem(ModelBase):
    involves_watch_only: Optional[bool]
    amount: Amount
    confirmations: int
    label: str


class ListReceivedByLabel(ModelBase):
    entries: Tuple[ListReceivedByLabelItem, ...]


class SignMessage(ModelBase):
    """Compact signature over the message"""
    signature: bytes


# ============================================================================
# Coins and history
# ============================================================================

class OutPoint(ModelBase):
    txid: Txid
    vout: int


class ListLockUnspent(ModelBase):
    outputs: Tuple[OutPoint, ...]


class ListSinceBlock(ModelBase):
    """Wallet transactions since a block

    ``removed`` lists transactions dropped by a reorg and is only reported
    when asked for.
    """
    transactions: Tuple[ListTransactionsItem, ...]
    removed: Optional[Tuple[ListTransactionsItem, ...]]
    last_block: BlockHash


class RescanBlockchain(ModelBase):
    start_height: int
    stop_height: Optional[int]


# ============================================================================
# PSBT and signing
# ============================================================================

class SignRawTransactionWithWallet(ModelBase):
    transaction: bytes
    complete: bool
    errors: Tuple[SigningError, ...]


class WalletCreateFundedPsbt(ModelBase):
    """Funded PSBT; ``change_position`` is -1 without a change output"""
    psbt: bytes
    fee: Amount
    change_position: int


class WalletProcessPsbt(ModelBase):
    """PSBT after the wallet signed what it could

    ``transaction`` is the extracted network transaction, reported from v26
    on once the PSBT is complete.
    """
    psbt: bytes
    complete: bool
    transaction: Optional[bytes]


# ============================================================================
# Wallet directory
# ============================================================================

class ListWalletDirItem(ModelBase):
    name: str


class ListWalletDir(ModelBase):
    wallets: Tuple[ListWalletDirItem, ...]
