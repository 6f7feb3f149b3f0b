# btcrpc/schemas/v23/raw_transactions.py

"""Wire Types: Raw Transactions (Bitcoin Core v23)

``scriptPubKey`` objects and ``decodescript`` results gain the output
descriptor ``desc``.
"""

from typing import List, Optional

from pydantic import Field

from btcrpc.schemas.v22 import raw_transactions as v22


class ScriptPubKey(v22.ScriptPubKey):
    """Output script with its inferred descriptor"""

    desc: str

    def descriptor(self) -> Optional[str]:
        return self.desc


class TransactionOutput(v22.TransactionOutput):
    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")


class DecodeRawTransaction(v22.DecodeRawTransaction):
    """Result of ``decoderawtransaction``"""

    vout: List[TransactionOutput]


class GetRawTransactionVerbose(v22.GetRawTransactionVerbose):
    """Result of ``getrawtransaction <txid> true``"""

    vout: List[TransactionOutput]


class DecodeScriptSegwit(v22.DecodeScriptSegwit):
    desc: str

    def descriptor(self) -> Optional[str]:
        return self.desc


class DecodeScript(v22.DecodeScript):
    """Result of ``decodescript``"""

    desc: str
    segwit: Optional[DecodeScriptSegwit] = None

    def descriptor(self) -> Optional[str]:
        return self.desc
