# btcrpc/schemas/v21/wallet.py

"""Wire Types: Wallet (Bitcoin Core v0.21)

Descriptor wallets arrive: ``importdescriptors``, ``send``,
``psbtbumpfee`` and ``upgradewallet`` are new, and ``unloadwallet``
returns an object instead of null.
"""

from typing import Any, Dict, List, Optional

from pydantic import RootModel

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.schemas.v17.wallet import single_warning
from btcrpc.schemas.v19 import wallet as v19
from btcrpc.utils import convert


class GetWalletInfo(v19.GetWalletInfo):
    """Result of ``getwalletinfo``; adds ``descriptors``"""

    descriptors: bool

    def info_fields(self) -> Dict[str, Any]:
        fields = super().info_fields()
        fields["descriptors"] = self.descriptors
        return fields


class UnloadWallet(WireModel):
    """Result of ``unloadwallet``"""

    warning: str

    def to_model(self) -> model.UnloadWallet:
        return model.UnloadWallet(warnings=single_warning(self.warning))


class SendManyVerbose(WireModel):
    """Result of ``sendmany`` with verbose=true"""

    txid: str
    fee_reason: str

    def to_model(self) -> model.SendManyVerbose:
        return model.SendManyVerbose(
            txid=convert.hash256(self.txid, "txid"),
            fee_reason=self.fee_reason,
        )


class PsbtBumpFee(WireModel):
    """Result of ``psbtbumpfee``; ``psbt`` is base64"""

    psbt: str
    origfee: WireAmount
    fee: WireAmount
    errors: List[str]

    def to_model(self) -> model.PsbtBumpFee:
        return model.PsbtBumpFee(
            psbt=convert.base64_bytes(self.psbt, "psbt"),
            original_fee=convert.amount(self.origfee, "origfee"),
            fee=convert.amount(self.fee, "fee"),
            errors=tuple(self.errors),
        )


class Send(WireModel):
    """Result of ``send``

    ``txid``/``hex`` are set once the transaction is complete, ``psbt``
    while it still needs signatures.
    """

    complete: bool
    txid: Optional[str] = None
    hex: Optional[str] = None
    psbt: Optional[str] = None

    def to_model(self) -> model.Send:
        return model.Send(
            complete=self.complete,
            txid=convert.optional(self.txid, lambda v: convert.hash256(v, "txid")),
            transaction=convert.optional(self.hex, lambda v: convert.hex_bytes(v, "hex")),
            psbt=convert.optional(self.psbt, lambda v: convert.base64_bytes(v, "psbt")),
        )


class ImportDescriptorsError(WireModel):
    code: int
    message: str


class ImportDescriptorsResult(WireModel):
    """Element of the ``importdescriptors`` array"""

    success: bool
    warnings: Optional[List[str]] = None
    error: Optional[ImportDescriptorsError] = None

    def to_model(self) -> model.ImportDescriptorsResult:
        error = None
        if self.error is not None:
            error = model.ImportDescriptorsError(code=self.error.code, message=self.error.message)
        return model.ImportDescriptorsResult(
            success=self.success,
            warnings=None if self.warnings is None else tuple(self.warnings),
            error=error,
        )


class ImportDescriptors(WireRoot, RootModel[List[ImportDescriptorsResult]]):
    """Result of ``importdescriptors``; one element per request"""

    def to_model(self) -> model.ImportDescriptors:
        return model.ImportDescriptors(
            results=convert.each("results", self.root, lambda result: result.to_model())
        )


class UpgradeWallet(WireModel):
    """Result of ``upgradewallet``"""

    wallet_name: str
    previous_version: int
    current_version: int
    result: Optional[str] = None
    error: Optional[str] = None

    def to_model(self) -> model.UpgradeWallet:
        return model.UpgradeWallet(
            wallet_name=self.wallet_name,
            previous_version=convert.u32(self.previous_version, "previous_version"),
            current_version=convert.u32(self.current_version, "current_version"),
            result=self.result,
            error=self.error,
        )
