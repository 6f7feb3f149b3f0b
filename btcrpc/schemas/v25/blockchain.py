# btcrpc/schemas/v25/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v25)"""

from btcrpc.models import blockchain as model
from btcrpc.schemas.v17 import blockchain as v17
from btcrpc.utils import convert


class GetBlockStats(v17.GetBlockStats):
    """Result of ``getblockstats``

    The ``*_actual`` counters exclude unspendable outputs.
    """

    utxo_increase_actual: int
    utxo_size_inc_actual: int

    def to_model(self) -> model.GetBlockStats:
        return super().to_model().model_copy(update={
            "utxo_increase_actual": convert.i32(self.utxo_increase_actual, "utxo_increase_actual"),
            "utxo_size_increase_actual": convert.i64(
                self.utxo_size_inc_actual, "utxo_size_inc_actual"
            ),
        })
