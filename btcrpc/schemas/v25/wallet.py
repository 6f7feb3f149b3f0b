# btcrpc/schemas/v25/wallet.py

"""Wire Types: Wallet (Bitcoin Core v25)

Wallet lifecycle results report a ``warnings`` array. The single
``warning`` string is deprecated and only returned when the daemon runs
with ``-deprecatedrpc=walletwarningfield``.
"""

from typing import List, Optional, Tuple

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireModel
from btcrpc.schemas.v17.wallet import single_warning


def merge_warnings(warnings: Optional[List[str]], warning: Optional[str]) -> Tuple[str, ...]:
    """Prefer the ``warnings`` array, fall back to the deprecated string"""
    if warnings is not None:
        return tuple(warnings)
    return single_warning(warning or "")


class CreateWallet(WireModel):
    """Result of ``createwallet``"""

    name: str
    warning: Optional[str] = None
    warnings: Optional[List[str]] = None

    def to_model(self) -> model.CreateWallet:
        return model.CreateWallet(name=self.name, warnings=merge_warnings(self.warnings, self.warning))


class LoadWallet(WireModel):
    """Result of ``loadwallet``"""

    name: str
    warning: Optional[str] = None
    warnings: Optional[List[str]] = None

    def to_model(self) -> model.LoadWallet:
        return model.LoadWallet(name=self.name, warnings=merge_warnings(self.warnings, self.warning))


class UnloadWallet(WireModel):
    """Result of ``unloadwallet``"""

    warning: Optional[str] = None
    warnings: Optional[List[str]] = None

    def to_model(self) -> model.UnloadWallet:
        return model.UnloadWallet(warnings=merge_warnings(self.warnings, self.warning))
