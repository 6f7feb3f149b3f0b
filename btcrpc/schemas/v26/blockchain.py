# btcrpc/schemas/v26/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v26)"""

from typing import Optional

from btcrpc.models import blockchain as model
from btcrpc.schemas.base import WireAmount, WireModel
from btcrpc.utils import convert


class Unspendables(WireModel):
    genesis_block: WireAmount
    bip30: WireAmount
    scripts: WireAmount
    unclaimed_rewards: WireAmount


class TxOutSetBlockInfo(WireModel):
    """Per-block coin statistics, only reported with coinstatsindex"""

    prevout_spent: WireAmount
    coinbase: WireAmount
    new_outputs_ex_coinbase: WireAmount
    unspendable: WireAmount
    unspendables: Unspendables


class GetTxOutSetInfo(WireModel):
    """Result of ``gettxoutsetinfo``

    Exactly one of ``hash_serialized_3`` and ``muhash`` is present,
    depending on the requested hash type. With coinstatsindex the daemon
    reports ``total_unspendable_amount``/``block_info`` instead of
    ``transactions``/``disk_size``.
    """

    height: int
    bestblock: str
    txouts: int
    bogosize: int
    hash_serialized_3: Optional[str] = None
    muhash: Optional[str] = None
    total_amount: WireAmount
    transactions: Optional[int] = None
    disk_size: Optional[int] = None
    total_unspendable_amount: Optional[WireAmount] = None
    block_info: Optional[TxOutSetBlockInfo] = None

    def to_model(self) -> model.GetTxOutSetInfo:
        return model.GetTxOutSetInfo(
            height=convert.u32(self.height, "height"),
            best_block=convert.hash256(self.bestblock, "bestblock"),
            transactions=convert.optional(self.transactions, lambda v: convert.u64(v, "transactions")),
            tx_outs=convert.u64(self.txouts, "txouts"),
            bogo_size=convert.u64(self.bogosize, "bogosize"),
            hash_serialized=convert.optional(
                self.hash_serialized_3, lambda v: convert.hash256(v, "hash_serialized_3")
            ),
            muhash=convert.optional(self.muhash, lambda v: convert.hash256(v, "muhash")),
            disk_size=convert.optional(self.disk_size, lambda v: convert.u64(v, "disk_size")),
            total_amount=convert.amount(self.total_amount, "total_amount"),
            total_unspendable_amount=convert.optional(
                self.total_unspendable_amount, lambda v: convert.amount(v, "total_unspendable_amount")
            ),
        )


class DumpTxOutSet(WireModel):
    """Result of ``dumptxoutset``"""

    coins_written: int
    base_hash: str
    base_height: int
    path: str
    txoutset_hash: str
    nchaintx: int

    def to_model(self) -> model.DumpTxOutSet:
        return model.DumpTxOutSet(
            coins_written=convert.u64(self.coins_written, "coins_written"),
            base_hash=convert.hash256(self.base_hash, "base_hash"),
            base_height=convert.u32(self.base_height, "base_height"),
            path=self.path,
            txoutset_hash=convert.hash256(self.txoutset_hash, "txoutset_hash"),
            n_chain_tx=convert.u64(self.nchaintx, "nchaintx"),
        )
