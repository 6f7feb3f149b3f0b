# btcrpc/schemas/v17/wallet.py

"""Wire Types: Wallet (Bitcoin Core v0.17)

Response shapes for the ``== Wallet ==`` section. Wallet transaction
amounts are deltas from the wallet's point of view and may be negative.
"""

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BeforeValidator, Field, RootModel

from btcrpc.models import wallet as model
from btcrpc.models.primitives import AddressPurpose, Bip125Replaceable, ScriptType, TransactionCategory
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.schemas.v17 import raw_transactions
from btcrpc.utils import convert


# ============================================================================
# Balances
# ============================================================================

class GetBalance(WireRoot, RootModel[WireAmount]):
    """Result of ``getbalance``; can be negative after spending unconfirmed change"""

    def to_model(self) -> model.GetBalance:
        return model.GetBalance(balance=convert.signed_amount(self.root, "balance"))


class GetUnconfirmedBalance(WireRoot, RootModel[WireAmount]):
    """Result of ``getunconfirmedbalance``"""

    def to_model(self) -> model.GetUnconfirmedBalance:
        return model.GetUnconfirmedBalance(balance=convert.amount(self.root, "balance"))


class GetReceivedByAddress(WireRoot, RootModel[WireAmount]):
    """Result of ``getreceivedbyaddress``"""

    def to_model(self) -> model.GetReceivedByAddress:
        return model.GetReceivedByAddress(amount=convert.amount(self.root, "amount"))


class GetWalletInfo(WireModel):
    """Result of ``getwalletinfo``

    ``keypoololdest`` is missing for descriptor wallets,
    ``keypoolsize_hd_internal`` is only reported for HD wallets,
    ``unlocked_until`` only for encrypted wallets and ``hdseedid`` only when
    HD is enabled.
    """

    walletname: str
    walletversion: int
    balance: WireAmount
    unconfirmed_balance: WireAmount
    immature_balance: WireAmount
    txcount: int
    keypoololdest: Optional[int] = None
    keypoolsize: int
    keypoolsize_hd_internal: Optional[int] = None
    unlocked_until: Optional[int] = None
    paytxfee: WireAmount
    hdseedid: Optional[str] = None
    private_keys_enabled: bool

    def info_fields(self) -> Dict[str, Any]:
        """Model fields common to every getwalletinfo shape"""
        return dict(
            wallet_name=self.walletname,
            wallet_version=convert.u32(self.walletversion, "walletversion"),
            balance=convert.amount(self.balance, "balance"),
            unconfirmed_balance=convert.amount(self.unconfirmed_balance, "unconfirmed_balance"),
            immature_balance=convert.amount(self.immature_balance, "immature_balance"),
            tx_count=convert.u32(self.txcount, "txcount"),
            keypool_oldest=convert.optional(self.keypoololdest, lambda v: convert.u32(v, "keypoololdest")),
            keypool_size=convert.u32(self.keypoolsize, "keypoolsize"),
            keypool_size_hd_internal=convert.optional(
                self.keypoolsize_hd_internal, lambda v: convert.u32(v, "keypoolsize_hd_internal")
            ),
            unlocked_until=convert.optional(
                self.unlocked_until, lambda v: convert.u32(v, "unlocked_until")
            ),
            pay_tx_fee=convert.fee_rate(self.paytxfee, "paytxfee"),
            hd_seed_id=convert.optional(self.hdseedid, lambda v: convert.hash160(v, "hdseedid")),
            private_keys_enabled=self.private_keys_enabled,
            avoid_reuse=None,
            scanning=None,
            descriptors=None,
        )

    def to_model(self) -> model.GetWalletInfo:
        return model.GetWalletInfo(**self.info_fields())


# ============================================================================
# Transactions
# ============================================================================

class WalletTransaction(WireModel):
    """Fields shared by ``gettransaction`` and ``listtransactions`` entries

    Block fields are present once confirmed, ``trusted`` only while
    unconfirmed and ``generated`` only for coinbase transactions. The
    ``comment``/``to``/``replaces_txid``/``replaced_by_txid`` keys come from
    the wallet's per-transaction metadata and appear when set.
    """

    confirmations: int
    generated: Optional[bool] = None
    trusted: Optional[bool] = None
    blockhash: Optional[str] = None
    blockindex: Optional[int] = None
    blocktime: Optional[int] = None
    txid: str
    walletconflicts: List[str]
    time: int
    timereceived: int
    comment: Optional[str] = None
    to: Optional[str] = None
    replaces_txid: Optional[str] = None
    replaced_by_txid: Optional[str] = None
    bip125_replaceable: str = Field(alias="bip125-replaceable")

    def block_height(self) -> Optional[int]:
        """``blockheight`` is not reported before v0.20"""
        return None

    def wallet_fields(self) -> Dict[str, Any]:
        return dict(
            confirmations=convert.i64(self.confirmations, "confirmations"),
            generated=self.generated,
            trusted=self.trusted,
            block_hash=convert.optional(self.blockhash, lambda v: convert.hash256(v, "blockhash")),
            block_height=self.block_height(),
            block_index=convert.optional(self.blockindex, lambda v: convert.u32(v, "blockindex")),
            block_time=convert.optional(self.blocktime, lambda v: convert.u32(v, "blocktime")),
            txid=convert.hash256(self.txid, "txid"),
            wallet_conflicts=convert.hashes("walletconflicts", self.walletconflicts),
            time=convert.u32(self.time, "time"),
            time_received=convert.u32(self.timereceived, "timereceived"),
            comment=self.comment,
            comment_to=self.to,
            replaces_txid=convert.optional(
                self.replaces_txid, lambda v: convert.hash256(v, "replaces_txid")
            ),
            replaced_by_txid=convert.optional(
                self.replaced_by_txid, lambda v: convert.hash256(v, "replaced_by_txid")
            ),
            bip125_replaceable=convert.variant(
                Bip125Replaceable, self.bip125_replaceable, "bip125-replaceable"
            ),
        )


class GetTransactionDetail(WireModel):
    """Element of ``gettransaction.details``"""

    involves_watchonly: Optional[bool] = Field(default=None, alias="involvesWatchonly")
    address: Optional[str] = None
    category: str
    amount: WireAmount
    label: Optional[str] = None
    vout: int
    fee: Optional[WireAmount] = None
    abandoned: Optional[bool] = None

    def to_model(self) -> model.GetTransactionDetail:
        return model.GetTransactionDetail(
            involves_watch_only=self.involves_watchonly,
            address=self.address,
            category=convert.variant(TransactionCategory, self.category, "category"),
            amount=convert.signed_amount(self.amount, "amount"),
            label=self.label,
            vout=convert.u32(self.vout, "vout"),
            fee=convert.optional(self.fee, lambda v: convert.signed_amount(v, "fee")),
            abandoned=self.abandoned,
        )


class GetTransaction(WalletTransaction):
    """Result of ``gettransaction``

    ``fee`` is only present for transactions the wallet sent.
    """

    amount: WireAmount
    fee: Optional[WireAmount] = None
    details: List[GetTransactionDetail]
    hex: str

    def to_model(self) -> model.GetTransaction:
        return model.GetTransaction(
            amount=convert.signed_amount(self.amount, "amount"),
            fee=convert.optional(self.fee, lambda v: convert.signed_amount(v, "fee")),
            details=convert.each("details", self.details, lambda detail: detail.to_model()),
            transaction=convert.hex_bytes(self.hex, "hex"),
            **self.wallet_fields(),
        )


class ListTransactionsItem(WalletTransaction):
    """Element of the ``listtransactions`` array"""

    involves_watchonly: Optional[bool] = Field(default=None, alias="involvesWatchonly")
    address: Optional[str] = None
    category: str
    amount: WireAmount
    label: Optional[str] = None
    vout: int
    fee: Optional[WireAmount] = None
    abandoned: Optional[bool] = None

    def to_model(self) -> model.ListTransactionsItem:
        return model.ListTransactionsItem(
            involves_watch_only=self.involves_watchonly,
            address=self.address,
            category=convert.variant(TransactionCategory, self.category, "category"),
            amount=convert.signed_amount(self.amount, "amount"),
            label=self.label,
            vout=convert.u32(self.vout, "vout"),
            fee=convert.optional(self.fee, lambda v: convert.signed_amount(v, "fee")),
            abandoned=self.abandoned,
            **self.wallet_fields(),
        )


class ListTransactions(WireRoot, RootModel[List[ListTransactionsItem]]):
    """Result of ``listtransactions``"""

    def to_model(self) -> model.ListTransactions:
        return model.ListTransactions(
            transactions=convert.each("transactions", self.root, lambda item: item.to_model())
        )


class ListUnspentItem(WireModel):
    """Element of the ``listunspent`` array"""

    txid: str
    vout: int
    address: Optional[str] = None
    label: Optional[str] = None
    script_pubkey: str = Field(alias="scriptPubKey")
    amount: WireAmount
    confirmations: int
    redeem_script: Optional[str] = Field(default=None, alias="redeemScript")
    witness_script: Optional[str] = Field(default=None, alias="witnessScript")
    spendable: bool
    solvable: bool
    desc: Optional[str] = None
    safe: bool

    def to_model(self) -> model.ListUnspentItem:
        return model.ListUnspentItem(
            txid=convert.hash256(self.txid, "txid"),
            vout=convert.u32(self.vout, "vout"),
            address=self.address,
            label=self.label,
            script_pubkey=convert.hex_bytes(self.script_pubkey, "scriptPubKey"),
            amount=convert.amount(self.amount, "amount"),
            confirmations=convert.u32(self.confirmations, "confirmations"),
            redeem_script=convert.optional(
                self.redeem_script, lambda v: convert.hex_bytes(v, "redeemScript")
            ),
            witness_script=convert.optional(
                self.witness_script, lambda v: convert.hex_bytes(v, "witnessScript")
            ),
            spendable=self.spendable,
            solvable=self.solvable,
            descriptor=self.desc,
            safe=self.safe,
        )


class ListUnspent(WireRoot, RootModel[List[ListUnspentItem]]):
    """Result of ``listunspent``"""

    def to_model(self) -> model.ListUnspent:
        return model.ListUnspent(
            outputs=convert.each("outputs", self.root, lambda item: item.to_model())
        )


# ============================================================================
# Sending
# ============================================================================

class SendToAddress(WireRoot, RootModel[str]):
    """Result of ``sendtoaddress``: txid"""

    def to_model(self) -> model.SendToAddress:
        return model.SendToAddress(txid=convert.hash256(self.root, "txid"))


class SendMany(WireRoot, RootModel[str]):
    """Result of ``sendmany``: txid"""

    def to_model(self) -> model.SendMany:
        return model.SendMany(txid=convert.hash256(self.root, "txid"))


class BumpFee(WireModel):
    """Result of ``bumpfee``"""

    txid: str
    origfee: WireAmount
    fee: WireAmount
    errors: List[str]

    def to_model(self) -> model.BumpFee:
        return model.BumpFee(
            txid=convert.hash256(self.txid, "txid"),
            original_fee=convert.amount(self.origfee, "origfee"),
            fee=convert.amount(self.fee, "fee"),
            errors=tuple(self.errors),
        )


# ============================================================================
# Wallet lifecycle
# ============================================================================

class CreateWallet(WireModel):
    """Result of ``createwallet``; ``warning`` is empty when there is none"""

    name: str
    warning: str

    def to_model(self) -> model.CreateWallet:
        return model.CreateWallet(name=self.name, warnings=single_warning(self.warning))


class LoadWallet(WireModel):
    """Result of ``loadwallet``"""

    name: str
    warning: str

    def to_model(self) -> model.LoadWallet:
        return model.LoadWallet(name=self.name, warnings=single_warning(self.warning))


def single_warning(warning: str) -> tuple:
    """Lift the legacy single ``warning`` string into a list of warnings"""
    if not warning:
        return ()
    return (warning,)


class ListWallets(WireRoot, RootModel[List[str]]):
    """Result of ``listwallets``"""

    def to_model(self) -> model.ListWallets:
        return model.ListWallets(wallets=tuple(self.root))


class GetNewAddress(WireRoot, RootModel[str]):
    """Result of ``getnewaddress``"""

    def to_model(self) -> model.GetNewAddress:
        return model.GetNewAddress(address=self.root)


class GetRawChangeAddress(WireRoot, RootModel[str]):
    """Result of ``getrawchangeaddress``"""

    def to_model(self) -> model.GetRawChangeAddress:
        return model.GetRawChangeAddress(address=self.root)


# ============================================================================
# Addresses and labels
# ============================================================================

class AddMultisigAddress(WireModel):
    """Result of ``addmultisigaddress``"""

    address: str
    redeem_script: str = Field(alias="redeemScript")

    def multisig_fields(self) -> Dict[str, Any]:
        return dict(
            address=self.address,
            redeem_script=convert.hex_bytes(self.redeem_script, "redeemScript"),
            descriptor=None,
            warnings=None,
        )

    def to_model(self) -> model.AddMultisigAddress:
        return model.AddMultisigAddress(**self.multisig_fields())


class AddressBookEntry(WireModel):
    purpose: str


class GetAddressesByLabel(WireRoot, RootModel[Dict[str, AddressBookEntry]]):
    """Result of ``getaddressesbylabel``: address -> purpose"""

    def to_model(self) -> model.GetAddressesByLabel:
        return model.GetAddressesByLabel(
            addresses=convert.each_value(
                "addresses", self.root,
                lambda address, entry: (address, convert.variant(AddressPurpose, entry.purpose, "purpose")),
            )
        )


class AddressInfoLabel(WireModel):
    """Label entry of ``getaddressinfo.labels`` before v0.20"""

    name: str
    purpose: str


class GetAddressInfo(WireModel):
    """Result of ``getaddressinfo``

    Most keys depend on the address kind and the wallet type, and several
    were added or renamed over the releases: ``solvable``, ``desc``,
    ``ischange`` and ``hdmasterfingerprint`` (replacing ``hdmasterkeyid``)
    from v0.18, ``parent_desc`` for descriptor wallets. ``labels`` holds
    name/purpose objects before v0.20 and plain names after.
    """

    address: str
    script_pubkey: str = Field(alias="scriptPubKey")
    ismine: bool
    iswatchonly: bool
    solvable: Optional[bool] = None
    desc: Optional[str] = None
    parent_desc: Optional[str] = None
    isscript: Optional[bool] = None
    ischange: Optional[bool] = None
    iswitness: Optional[bool] = None
    witness_version: Optional[int] = None
    witness_program: Optional[str] = None
    script: Optional[str] = None
    hex: Optional[str] = None
    pubkeys: Optional[List[str]] = None
    sigsrequired: Optional[int] = None
    pubkey: Optional[str] = None
    embedded: Optional[Dict[str, Any]] = None
    iscompressed: Optional[bool] = None
    label: Optional[str] = None
    timestamp: Optional[int] = None
    hdkeypath: Optional[str] = None
    hdseedid: Optional[str] = None
    hdmasterkeyid: Optional[str] = None
    hdmasterfingerprint: Optional[str] = None
    labels: List[Union[str, AddressInfoLabel]]

    @staticmethod
    def _label(item: Union[str, AddressInfoLabel]) -> model.AddressLabel:
        if isinstance(item, str):
            return model.AddressLabel(name=item, purpose=None)
        return model.AddressLabel(
            name=item.name, purpose=convert.variant(AddressPurpose, item.purpose, "purpose")
        )

    def to_model(self) -> model.GetAddressInfo:
        return model.GetAddressInfo(
            address=self.address,
            script_pubkey=convert.hex_bytes(self.script_pubkey, "scriptPubKey"),
            is_mine=self.ismine,
            is_watch_only=self.iswatchonly,
            solvable=self.solvable,
            descriptor=self.desc,
            parent_descriptor=self.parent_desc,
            is_script=self.isscript,
            is_change=self.ischange,
            is_witness=self.iswitness,
            witness_version=convert.optional(
                self.witness_version, lambda v: convert.u32(v, "witness_version")
            ),
            witness_program=convert.optional(
                self.witness_program, lambda v: convert.hex_bytes(v, "witness_program")
            ),
            script=convert.optional(self.script, lambda v: convert.variant(ScriptType, v, "script")),
            hex=convert.optional(self.hex, lambda v: convert.hex_bytes(v, "hex")),
            pubkeys=convert.optional(self.pubkeys, lambda items: convert.hex_list("pubkeys", items)),
            sigs_required=convert.optional(self.sigsrequired, lambda v: convert.u32(v, "sigsrequired")),
            pubkey=convert.optional(self.pubkey, lambda v: convert.hex_bytes(v, "pubkey")),
            is_compressed=self.iscompressed,
            label=self.label,
            timestamp=convert.optional(self.timestamp, lambda v: convert.u32(v, "timestamp")),
            hd_key_path=self.hdkeypath,
            hd_seed_id=convert.optional(self.hdseedid, lambda v: convert.hash160(v, "hdseedid")),
            hd_master_key_id=convert.optional(
                self.hdmasterkeyid, lambda v: convert.hash160(v, "hdmasterkeyid")
            ),
            hd_master_fingerprint=convert.optional(
                self.hdmasterfingerprint, lambda v: convert.hex_bytes(v, "hdmasterfingerprint", length=4)
            ),
            labels=convert.each("labels", self.labels, self._label),
        )


class GetReceivedByLabel(WireRoot, RootModel[WireAmount]):
    """Result of ``getreceivedbylabel``"""

    def to_model(self) -> model.GetReceivedByLabel:
        return model.GetReceivedByLabel(amount=convert.amount(self.root, "amount"))


class ListLabels(WireRoot, RootModel[List[str]]):
    """Result of ``listlabels``"""

    def to_model(self) -> model.ListLabels:
        return model.ListLabels(labels=tuple(self.root))


class GroupedAddress(WireModel):
    address: str
    amount: WireAmount
    label: Optional[str] = None

    def to_model(self) -> model.AddressGroupingItem:
        return model.AddressGroupingItem(
            address=self.address,
            amount=convert.amount(self.amount, "amount"),
            label=self.label,
        )


def _grouped_address(value: Any) -> Any:
    # [address, amount] or [address, amount, label]
    if isinstance(value, list) and len(value) in (2, 3):
        return dict(zip(("address", "amount", "label"), value))
    return value


class ListAddressGroupings(
    WireRoot, RootModel[List[List[Annotated[GroupedAddress, BeforeValidator(_grouped_address)]]]]
):
    """Result of ``listaddressgroupings``; each entry is a positional array"""

    def to_model(self) -> model.ListAddressGroupings:
        return model.ListAddressGroupings(
            groupings=convert.each(
                "groupings", self.root,
                lambda group: convert.each("addresses", group, lambda item: item.to_model()),
            )
        )


class ListReceivedByAddressItem(WireModel):
    """Element of the ``listreceivedbyaddress`` array"""

    involves_watchonly: Optional[bool] = Field(default=None, alias="involvesWatchonly")
    address: str
    amount: WireAmount
    confirmations: int
    label: str
    txids: List[str]

    def to_model(self) -> model.ListReceivedByAddressItem:
        return model.ListReceivedByAddressItem(
            involves_watch_only=self.involves_watchonly,
            address=self.address,
            amount=convert.amount(self.amount, "amount"),
            confirmations=convert.u32(self.confirmations, "confirmations"),
            label=self.label,
            txids=convert.hashes("txids", self.txids),
        )


class ListReceivedByAddress(WireRoot, RootModel[List[ListReceivedByAddressItem]]):
    """Result of ``listreceivedbyaddress``"""

    def to_model(self) -> model.ListReceivedByAddress:
        return model.ListReceivedByAddress(
            entries=convert.each("entries", self.root, lambda item: item.to_model())
        )


class ListReceivedByLabelItem(WireModel):
    """Element of the ``listreceivedbylabel`` array"""

    involves_watchonly: Optional[bool] = Field(default=None, alias="involvesWatchonly")
    amount: WireAmount
    confirmations: int
    label: str

    def to_model(self) -> model.ListReceivedByLabelItem:
        return model.ListReceivedByLabelItem(
            involves_watch_only=self.involves_watchonly,
            amount=convert.amount(self.amount, "amount"),
            confirmations=convert.u32(self.confirmations, "confirmations"),
            label=self.label,
        )


class ListReceivedByLabel(WireRoot, RootModel[List[ListReceivedByLabelItem]]):
    """Result of ``listreceivedbylabel``"""

    def to_model(self) -> model.ListReceivedByLabel:
        return model.ListReceivedByLabel(
            entries=convert.each("entries", self.root, lambda item: item.to_model())
        )


class SignMessage(WireRoot, RootModel[str]):
    """Result of ``signmessage``: base64 signature"""

    def to_model(self) -> model.SignMessage:
        return model.SignMessage(signature=convert.base64_bytes(self.root, "signature"))


# ============================================================================
# Coins and history
# ============================================================================

class LockedOutput(WireModel):
    txid: str
    vout: int

    def to_model(self) -> model.OutPoint:
        return model.OutPoint(
            txid=convert.hash256(self.txid, "txid"),
            vout=convert.u32(self.vout, "vout"),
        )


class ListLockUnspent(WireRoot, RootModel[List[LockedOutput]]):
    """Result of ``listlockunspent``"""

    def to_model(self) -> model.ListLockUnspent:
        return model.ListLockUnspent(
            outputs=convert.each("outputs", self.root, lambda item: item.to_model())
        )


class ListSinceBlock(WireModel):
    """Result of ``listsinceblock``; ``removed`` only with include_removed"""

    transactions: List[ListTransactionsItem]
    removed: Optional[List[ListTransactionsItem]] = None
    lastblock: str

    def to_model(self) -> model.ListSinceBlock:
        return model.ListSinceBlock(
            transactions=convert.each("transactions", self.transactions, lambda item: item.to_model()),
            removed=convert.optional(
                self.removed, lambda items: convert.each("removed", items, lambda item: item.to_model())
            ),
            last_block=convert.hash256(self.lastblock, "lastblock"),
        )


class RescanBlockchain(WireModel):
    """Result of ``rescanblockchain``"""

    start_height: int
    stop_height: Optional[int] = None

    def to_model(self) -> model.RescanBlockchain:
        return model.RescanBlockchain(
            start_height=convert.u32(self.start_height, "start_height"),
            stop_height=convert.optional(self.stop_height, lambda v: convert.u32(v, "stop_height")),
        )


class DumpWallet(WireModel):
    """Result of ``dumpwallet``; exposed at the wire level only"""

    filename: str


class ImportMultiError(WireModel):
    code: int
    message: str


class ImportMultiResult(WireModel):
    """``warnings`` is reported from v0.18 on"""

    success: bool
    warnings: Optional[List[str]] = None
    error: Optional[ImportMultiError] = None


class ImportMulti(WireRoot, RootModel[List[ImportMultiResult]]):
    """Result of ``importmulti``; exposed at the wire level only"""


# ============================================================================
# PSBT and signing
# ============================================================================

class SignRawTransactionWithWallet(raw_transactions.SignRawTransactionWithKey):
    """Result of ``signrawtransactionwithwallet``"""

    def to_model(self) -> model.SignRawTransactionWithWallet:
        return model.SignRawTransactionWithWallet(**self.signing_fields())


class WalletCreateFundedPsbt(WireModel):
    """Result of ``walletcreatefundedpsbt``"""

    psbt: str
    fee: WireAmount
    changepos: int

    def to_model(self) -> model.WalletCreateFundedPsbt:
        return model.WalletCreateFundedPsbt(
            psbt=convert.base64_bytes(self.psbt, "psbt"),
            fee=convert.amount(self.fee, "fee"),
            change_position=convert.i32(self.changepos, "changepos"),
        )


class WalletProcessPsbt(WireModel):
    """Result of ``walletprocesspsbt``"""

    psbt: str
    complete: bool

    def extracted(self) -> Optional[bytes]:
        """The finalized network transaction is not reported before v26"""
        return None

    def to_model(self) -> model.WalletProcessPsbt:
        return model.WalletProcessPsbt(
            psbt=convert.base64_bytes(self.psbt, "psbt"),
            complete=self.complete,
            transaction=self.extracted(),
        )
