# btcrpc/schemas/v17/mining.py

"""Wire Types: Mining and Generating (Bitcoin Core v0.17)"""

from typing import Dict, List, Optional

from pydantic import RootModel

from btcrpc.models import network as model
from btcrpc.schemas.base import WireFloat, WireModel, WireRoot
from btcrpc.utils import convert


class GenerateToAddress(WireRoot, RootModel[List[str]]):
    """Result of ``generatetoaddress``: hashes of the new blocks"""

    def to_model(self) -> model.GenerateToAddress:
        return model.GenerateToAddress(hashes=convert.hashes("hashes", self.root))


class GetMiningInfo(WireModel):
    """Result of ``getmininginfo``; exposed at the wire level only

    ``currentblockweight``/``currentblocktx`` are only known after a block
    template was built.
    """

    blocks: int
    currentblockweight: Optional[int] = None
    currentblocktx: Optional[int] = None
    difficulty: WireFloat
    networkhashps: WireFloat
    pooledtx: int
    chain: str
    warnings: str


class BlockTemplateTransaction(WireModel):
    """Element of ``getblocktemplate.transactions``; ``fee`` is in satoshis"""

    data: str
    txid: str
    hash: str
    depends: List[int]
    fee: int
    sigops: int
    weight: int

    def to_model(self) -> model.BlockTemplateTransaction:
        return model.BlockTemplateTransaction(
            data=convert.hex_bytes(self.data, "data"),
            txid=convert.hash256(self.txid, "txid"),
            wtxid=convert.hash256(self.hash, "hash"),
            depends=convert.each("depends", self.depends, lambda v: convert.u32(v, "depends")),
            fee=convert.satoshis(self.fee, "fee"),
            sigops=convert.u32(self.sigops, "sigops"),
            weight=convert.u32(self.weight, "weight"),
        )


class GetBlockTemplate(WireModel):
    """Result of ``getblocktemplate`` in template mode

    ``default_witness_commitment`` is present once the template holds
    segwit transactions; ``signet_challenge`` is only reported on signet.
    ``coinbasevalue`` is in satoshis.
    """

    capabilities: List[str]
    version: int
    rules: List[str]
    vbavailable: Dict[str, int]
    vbrequired: int
    previousblockhash: str
    transactions: List[BlockTemplateTransaction]
    coinbaseaux: Dict[str, str]
    coinbasevalue: int
    longpollid: str
    target: str
    mintime: int
    mutable: List[str]
    noncerange: str
    sigoplimit: int
    sizelimit: Optional[int] = None
    weightlimit: int
    curtime: int
    bits: str
    height: int
    default_witness_commitment: Optional[str] = None
    signet_challenge: Optional[str] = None

    def to_model(self) -> model.GetBlockTemplate:
        return model.GetBlockTemplate(
            version=convert.i32(self.version, "version"),
            rules=tuple(self.rules),
            version_bits_available=convert.each_value(
                "vbavailable", self.vbavailable, lambda name, bit: (name, convert.u32(bit, "bit"))
            ),
            version_bits_required=convert.u32(self.vbrequired, "vbrequired"),
            previous_block_hash=convert.hash256(self.previousblockhash, "previousblockhash"),
            transactions=convert.each("transactions", self.transactions, lambda tx: tx.to_model()),
            coinbase_aux=dict(self.coinbaseaux),
            coinbase_value=convert.satoshis(self.coinbasevalue, "coinbasevalue"),
            long_poll_id=self.longpollid,
            target=convert.hash256(self.target, "target"),
            min_time=convert.u32(self.mintime, "mintime"),
            mutable=tuple(self.mutable),
            nonce_range=convert.hex_bytes(self.noncerange, "noncerange", length=8),
            sigop_limit=convert.u32(self.sigoplimit, "sigoplimit"),
            size_limit=convert.optional(self.sizelimit, lambda v: convert.u32(v, "sizelimit")),
            weight_limit=convert.u32(self.weightlimit, "weightlimit"),
            current_time=convert.u32(self.curtime, "curtime"),
            bits=convert.hex_bytes(self.bits, "bits", length=4),
            height=convert.u32(self.height, "height"),
            default_witness_commitment=convert.optional(
                self.default_witness_commitment,
                lambda v: convert.hex_bytes(v, "default_witness_commitment"),
            ),
            signet_challenge=convert.optional(
                self.signet_challenge, lambda v: convert.hex_bytes(v, "signet_challenge")
            ),
            capabilities=tuple(self.capabilities),
        )
