# btcrpc/schemas/v19/wallet.py

"""Wire Types: Wallet (Bitcoin Core v0.19)

Adds ``getbalances`` and the ``avoid_reuse``/``scanning`` wallet flags.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import Field

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireAmount, WireFloat, WireModel
from btcrpc.schemas.v17 import wallet as v17
from btcrpc.utils import convert


class WalletScanning(WireModel):
    """Rescan progress; ``duration`` in seconds, ``progress`` in [0, 1]"""

    duration: int
    progress: WireFloat

    def to_model(self) -> model.WalletScanning:
        return model.WalletScanning(
            duration=convert.u64(self.duration, "duration"),
            progress=self.progress,
        )


class GetWalletInfo(v17.GetWalletInfo):
    """Result of ``getwalletinfo``

    ``scanning`` is either ``false`` or a progress object.
    """

    avoid_reuse: bool
    scanning: Union[Literal[False], WalletScanning]

    def info_fields(self) -> Dict[str, Any]:
        fields = super().info_fields()
        fields["avoid_reuse"] = self.avoid_reuse
        if self.scanning is False:
            fields["scanning"] = False
        else:
            with convert.field("scanning"):
                fields["scanning"] = self.scanning.to_model()
        return fields


class GetBalancesMine(WireModel):
    """``mine`` object; ``used`` only for wallets with avoid_reuse set"""

    trusted: WireAmount
    untrusted_pending: WireAmount
    immature: WireAmount
    used: Optional[WireAmount] = None

    def to_model(self) -> model.GetBalancesMine:
        return model.GetBalancesMine(
            trusted=convert.amount(self.trusted, "trusted"),
            untrusted_pending=convert.amount(self.untrusted_pending, "untrusted_pending"),
            immature=convert.amount(self.immature, "immature"),
            used=convert.optional(self.used, lambda v: convert.amount(v, "used")),
        )


class GetBalancesWatchOnly(WireModel):
    """``watchonly`` object, present only if the wallet has watch-only keys"""

    trusted: WireAmount
    untrusted_pending: WireAmount
    immature: WireAmount

    def to_model(self) -> model.GetBalancesWatchOnly:
        return model.GetBalancesWatchOnly(
            trusted=convert.amount(self.trusted, "trusted"),
            untrusted_pending=convert.amount(self.untrusted_pending, "untrusted_pending"),
            immature=convert.amount(self.immature, "immature"),
        )


class GetBalances(WireModel):
    """Result of ``getbalances``"""

    mine: GetBalancesMine
    watch_only: Optional[GetBalancesWatchOnly] = Field(default=None, alias="watchonly")

    def balances_fields(self) -> Dict[str, Any]:
        with convert.field("mine"):
            mine = self.mine.to_model()
        with convert.field("watchonly"):
            watch_only = convert.optional(self.watch_only, lambda balances: balances.to_model())
        return dict(mine=mine, watch_only=watch_only, last_processed_block=None)

    def to_model(self) -> model.GetBalances:
        return model.GetBalances(**self.balances_fields())
