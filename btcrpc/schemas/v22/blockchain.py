# btcrpc/schemas/v22/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v22)"""

from pydantic import Field

from btcrpc.schemas.v17 import blockchain as v17
from btcrpc.schemas.v22.raw_transactions import ScriptPubKey


class GetTxOut(v17.GetTxOut):
    """Result of ``gettxout`` with the v22 ``scriptPubKey`` shape"""

    script_pubkey: ScriptPubKey = Field(alias="scriptPubKey")
