# btcrpc/schemas/v18/wallet.py

"""Wire Types: Wallet (Bitcoin Core v0.18)"""

from typing import List

from btcrpc.models import wallet as model
from btcrpc.schemas.base import WireModel
from btcrpc.utils import convert


class ListWalletDirItem(WireModel):
    name: str

    def to_model(self) -> model.ListWalletDirItem:
        return model.ListWalletDirItem(name=self.name)


class ListWalletDir(WireModel):
    """Result of ``listwalletdir``: wallets found in the wallet directory"""

    wallets: List[ListWalletDirItem]

    def to_model(self) -> model.ListWalletDir:
        return model.ListWalletDir(
            wallets=convert.each("wallets", self.wallets, lambda wallet: wallet.to_model())
        )
