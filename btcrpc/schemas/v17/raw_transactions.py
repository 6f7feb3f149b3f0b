# btcrpc/schemas/v17/raw_transactions.py

"""Wire Types: Raw Transactions (Bitcoin Core v0.17)

Decoded transaction shapes shared by ``getrawtransaction``,
``decoderawtransaction`` and ``gettxout``, plus the remaining
``== Rawtransactions ==`` results.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, RootModel

from btcrpc.core.exceptions import InconsistentFieldsError
from btcrpc.models import raw_transactions as model
from btcrpc.models.primitives import ScriptType
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.utils import convert


class ScriptPubKey(WireModel):
    """Output script; ``reqSigs``/``addresses`` are absent for nonstandard scripts"""

    asm: str
    hex: str
    req_sigs: Optional[int] = Field(default=None, alias="reqSigs")
    type: str
    addresses: Optional[List[str]] = None

    def to_model(self) -> model.ScriptPubKey:
        return model.ScriptPubKey(
            asm=self.asm,
            script=convert.hex_bytes(self.hex, "hex"),
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=None,
            address=None,
            addresses=None if self.addresses is None else tuple(self.addresses),
            required_signatures=convert.optional(self.req_sigs, lambda v: convert.u32(v, "reqSigs")),
        )


class ScriptSig(WireModel):
    asm: str
    hex: str


class TransactionInput(WireModel):
    """Element of ``vin``

    Coinbase inputs carry ``coinbase`` and nothing of ``txid``, ``vout`` and
    ``scriptSig``; every other input carries all three.
    """

    txid: Optional[str] = None
    vout: Optional[int] = None
    script_sig: Optional[ScriptSig] = Field(default=None, alias="scriptSig")
    coinbase: Optional[str] = None
    txinwitness: Optional[List[str]] = None
    sequence: int

    def _witness(self):
        return convert.optional(self.txinwitness, lambda items: convert.hex_list("txinwitness", items))

    def to_model(self) -> model.TransactionInput:
        spend_fields = [
            name for name, value in (
                ("txid", self.txid), ("vout", self.vout), ("scriptSig", self.script_sig)
            ) if value is not None
        ]

        if self.coinbase is not None:
            if spend_fields:
                raise InconsistentFieldsError(
                    ["coinbase"], f"coinbase input also carries {', '.join(spend_fields)}", self.coinbase
                )
            return model.CoinbaseInput(
                coinbase=convert.hex_bytes(self.coinbase, "coinbase"),
                witness=self._witness(),
                sequence=convert.u32(self.sequence, "sequence"),
            )

        if len(spend_fields) != 3:
            missing = sorted({"txid", "vout", "scriptSig"} - set(spend_fields))
            raise InconsistentFieldsError(
                [missing[0]], f"input is neither a coinbase nor a complete spend (missing {', '.join(missing)})", None
            )
        with convert.field("scriptSig"):
            script_sig = convert.hex_bytes(self.script_sig.hex, "hex")
        return model.SpendInput(
            txid=convert.hash256(self.txid, "txid"),
            vout=convert.u32(self.vout, "vout"),
            script_sig=script_sig,
            script_sig_asm=self.script_sig.asm,
            witness=self._witness(),
            sequence=convert.u32(self.sequence, "sequence"),
        )


class TransactionOutput(WireModel):
    """Element of ``vout``"""

    value: WireAmount
    n: int
    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")

    def to_model(self) -> model.TransactionOutput:
        with convert.field("scriptPubKey"):
            script_pubkey = self.script_pubkey.to_model()
        return model.TransactionOutput(
            value=convert.amount(self.value, "value"),
            n=convert.u32(self.n, "n"),
            script_pubkey=script_pubkey,
        )


class RawTransaction(WireModel):
    """Decoded transaction body common to the decoding methods"""

    txid: str
    hash: str
    version: int
    size: int
    vsize: int
    weight: int
    locktime: int
    vin: List[TransactionInput]
    vout: List[TransactionOutput]

    def transaction(self) -> model.Transaction:
        return model.Transaction(
            txid=convert.hash256(self.txid, "txid"),
            wtxid=convert.hash256(self.hash, "hash"),
            version=convert.i32(self.version, "version"),
            size=convert.u32(self.size, "size"),
            vsize=convert.u32(self.vsize, "vsize"),
            weight=convert.u32(self.weight, "weight"),
            lock_time=convert.u32(self.locktime, "locktime"),
            inputs=convert.each("vin", self.vin, lambda tx_in: tx_in.to_model()),
            outputs=convert.each("vout", self.vout, lambda tx_out: tx_out.to_model()),
        )


class DecodeRawTransaction(RawTransaction):
    """Result of ``decoderawtransaction``"""

    def to_model(self) -> model.DecodeRawTransaction:
        return model.DecodeRawTransaction(transaction=self.transaction())


class GetRawTransaction(WireRoot, RootModel[str]):
    """Result of ``getrawtransaction <txid> false``: serialized hex"""

    def to_model(self) -> model.GetRawTransaction:
        return model.GetRawTransaction(transaction=convert.hex_bytes(self.root, "transaction"))


class GetRawTransactionVerbose(RawTransaction):
    """Result of ``getrawtransaction <txid> true``

    The block fields are only present for confirmed transactions;
    ``in_active_chain`` only when a block hash was passed in.
    """

    hex: str
    blockhash: Optional[str] = None
    confirmations: Optional[int] = None
    time: Optional[int] = None
    blocktime: Optional[int] = None
    in_active_chain: Optional[bool] = None

    def to_model(self) -> model.GetRawTransactionVerbose:
        return model.GetRawTransactionVerbose(
            transaction=self.transaction(),
            raw=convert.hex_bytes(self.hex, "hex"),
            block_hash=convert.optional(self.blockhash, lambda v: convert.hash256(v, "blockhash")),
            confirmations=convert.optional(
                self.confirmations, lambda v: convert.u32(v, "confirmations")
            ),
            time=convert.optional(self.time, lambda v: convert.u32(v, "time")),
            block_time=convert.optional(self.blocktime, lambda v: convert.u32(v, "blocktime")),
            in_active_chain=self.in_active_chain,
        )


class CreateRawTransaction(WireRoot, RootModel[str]):
    """Result of ``createrawtransaction``: unsigned transaction hex"""

    def to_model(self) -> model.CreateRawTransaction:
        return model.CreateRawTransaction(transaction=convert.hex_bytes(self.root, "transaction"))


class SendRawTransaction(WireRoot, RootModel[str]):
    """Result of ``sendrawtransaction``: txid"""

    def to_model(self) -> model.SendRawTransaction:
        return model.SendRawTransaction(txid=convert.hash256(self.root, "txid"))


class MempoolAcceptance(WireModel):
    """Element of the ``testmempoolaccept`` array"""

    txid: str
    allowed: bool
    reject_reason: Optional[str] = Field(default=None, alias="reject-reason")

    def to_model(self) -> model.MempoolAcceptance:
        return model.MempoolAcceptance(
            txid=convert.hash256(self.txid, "txid"),
            wtxid=None,
            allowed=self.allowed,
            vsize=None,
            base_fee=None,
            reject_reason=self.reject_reason,
        )


class TestMempoolAccept(WireRoot, RootModel[List[MempoolAcceptance]]):
    """Result of ``testmempoolaccept``; one element per submitted transaction"""

    __test__ = False

    def to_model(self) -> model.TestMempoolAccept:
        return model.TestMempoolAccept(
            results=convert.each("results", self.root, lambda result: result.to_model())
        )


class CombineRawTransaction(WireRoot, RootModel[str]):
    """Result of ``combinerawtransaction``: merged transaction hex"""

    def to_model(self) -> model.CombineRawTransaction:
        return model.CombineRawTransaction(transaction=convert.hex_bytes(self.root, "transaction"))


# ============================================================================
# decodescript
# ============================================================================

class DecodeScriptSegwit(WireModel):
    """``decodescript.segwit``: the script wrapped as a witness output"""

    asm: str
    hex: str
    type: str
    req_sigs: Optional[int] = Field(default=None, alias="reqSigs")
    addresses: Optional[List[str]] = None
    p2sh_segwit: Optional[str] = Field(default=None, alias="p2sh-segwit")

    def to_model(self) -> model.DecodeScriptSegwit:
        return model.DecodeScriptSegwit(
            asm=self.asm,
            script=convert.hex_bytes(self.hex, "hex"),
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=None,
            address=None,
            addresses=None if self.addresses is None else tuple(self.addresses),
            required_signatures=convert.optional(self.req_sigs, lambda v: convert.u32(v, "reqSigs")),
            p2sh_segwit=self.p2sh_segwit,
        )


class DecodeScript(WireModel):
    """Result of ``decodescript``

    ``p2sh`` is omitted for scripts that cannot be P2SH-wrapped and
    ``segwit`` for scripts that cannot be witness-wrapped.
    """

    asm: str
    type: str
    req_sigs: Optional[int] = Field(default=None, alias="reqSigs")
    addresses: Optional[List[str]] = None
    p2sh: Optional[str] = None
    segwit: Optional[DecodeScriptSegwit] = None

    def to_model(self) -> model.DecodeScript:
        with convert.field("segwit"):
            segwit = convert.optional(self.segwit, lambda v: v.to_model())
        return model.DecodeScript(
            asm=self.asm,
            type=convert.variant(ScriptType, self.type, "type"),
            descriptor=None,
            address=None,
            addresses=None if self.addresses is None else tuple(self.addresses),
            required_signatures=convert.optional(self.req_sigs, lambda v: convert.u32(v, "reqSigs")),
            p2sh=self.p2sh,
            segwit=segwit,
        )


# ============================================================================
# Funding and signing
# ============================================================================

class FundRawTransaction(WireModel):
    """Result of ``fundrawtransaction``; ``changepos`` is -1 without change"""

    hex: str
    fee: WireAmount
    changepos: int

    def to_model(self) -> model.FundRawTransaction:
        return model.FundRawTransaction(
            transaction=convert.hex_bytes(self.hex, "hex"),
            fee=convert.amount(self.fee, "fee"),
            change_position=convert.i32(self.changepos, "changepos"),
        )


class SigningError(WireModel):
    """Element of the ``errors`` array of the signing calls

    ``witness`` is only reported when the input has witness data.
    """

    txid: str
    vout: int
    witness: Optional[List[str]] = None
    script_sig: str = Field(alias="scriptSig")
    sequence: int
    error: str

    def to_model(self) -> model.SigningError:
        return model.SigningError(
            txid=convert.hash256(self.txid, "txid"),
            vout=convert.u32(self.vout, "vout"),
            script_sig=convert.hex_bytes(self.script_sig, "scriptSig"),
            witness=convert.optional(self.witness, lambda items: convert.hex_list("witness", items)),
            sequence=convert.u32(self.sequence, "sequence"),
            error=self.error,
        )


class SignRawTransactionWithKey(WireModel):
    """Result of ``signrawtransactionwithkey``; ``errors`` only when some input failed"""

    hex: str
    complete: bool
    errors: Optional[List[SigningError]] = None

    def signing_fields(self) -> Dict[str, Any]:
        return dict(
            transaction=convert.hex_bytes(self.hex, "hex"),
            complete=self.complete,
            errors=convert.each("errors", self.errors or [], lambda error: error.to_model()),
        )

    def to_model(self) -> model.SignRawTransactionWithKey:
        return model.SignRawTransactionWithKey(**self.signing_fields())


# ============================================================================
# PSBT
# ============================================================================

class CreatePsbt(WireRoot, RootModel[str]):
    """Result of ``createpsbt``: base64 PSBT"""

    def to_model(self) -> model.CreatePsbt:
        return model.CreatePsbt(psbt=convert.base64_bytes(self.root, "psbt"))


class CombinePsbt(WireRoot, RootModel[str]):
    """Result of ``combinepsbt``: base64 PSBT"""

    def to_model(self) -> model.CombinePsbt:
        return model.CombinePsbt(psbt=convert.base64_bytes(self.root, "psbt"))


class ConvertToPsbt(WireRoot, RootModel[str]):
    """Result of ``converttopsbt``: base64 PSBT"""

    def to_model(self) -> model.ConvertToPsbt:
        return model.ConvertToPsbt(psbt=convert.base64_bytes(self.root, "psbt"))


class FinalizePsbt(WireModel):
    """Result of ``finalizepsbt``

    ``hex`` replaces ``psbt`` once the PSBT is complete and extraction was
    requested.
    """

    psbt: Optional[str] = None
    hex: Optional[str] = None
    complete: bool

    def to_model(self) -> model.FinalizePsbt:
        return model.FinalizePsbt(
            psbt=convert.optional(self.psbt, lambda v: convert.base64_bytes(v, "psbt")),
            transaction=convert.optional(self.hex, lambda v: convert.hex_bytes(v, "hex")),
            complete=self.complete,
        )
