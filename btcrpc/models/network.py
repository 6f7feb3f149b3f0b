# btcrpc/models/network.py

"""Network, control, mining and utility models"""

from typing import Annotated, Dict, Optional, Tuple

from pydantic import Field

from btcrpc.models.primitives import Address, Amount, BlockHash, FeeRate, Hash256, ModelBase, Txid, Wtxid

ServiceFlags = Annotated[bytes, Field(min_length=8, max_length=8)]


class GetNetworkInfoNetwork(ModelBase):
    """Reachability of one network (ipv4, ipv6, onion, ...)"""
    name: str
    limited: bool
    reachable: bool
    proxy: str
    proxy_randomize_credentials: bool


class GetNetworkInfoAddress(ModelBase):
    """Local address advertised to peers"""
    address: str
    port: int
    score: int


class GetNetworkInfo(ModelBase):
    version: int
    subversion: str
    protocol_version: int
    local_services: ServiceFlags
    local_services_names: Optional[Tuple[str, ...]]
    local_relay: bool
    time_offset: int
    connections: int
    connections_in: Optional[int]
    connections_out: Optional[int]
    network_active: bool
    networks: Tuple[GetNetworkInfoNetwork, ...]
    relay_fee: FeeRate
    incremental_fee: FeeRate
    local_addresses: Tuple[GetNetworkInfoAddress, ...]
    warnings: str


class ActiveCommand(ModelBase):
    method: str
    duration: int  # microseconds


class GetRpcInfo(ModelBase):
    active_commands: Tuple[ActiveCommand, ...]
    log_path: Optional[str]


class GenerateToAddress(ModelBase):
    """Hashes of the generated blocks"""
    hashes: Tuple[BlockHash, ...]


class GenerateToDescriptor(ModelBase):
    hashes: Tuple[BlockHash, ...]


class EstimateSmartFee(ModelBase):
    """Fee estimate; ``fee_rate`` is None when no estimate is available"""
    fee_rate: Optional[FeeRate]
    errors: Optional[Tuple[str, ...]]
    blocks: int


class BlockTemplateTransaction(ModelBase):
    """Candidate transaction; ``depends`` are 1-based positions in the template"""
    data: bytes
    txid: Txid
    wtxid: Wtxid
    depends: Tuple[int, ...]
    fee: Amount
    sigops: int
    weight: int


class GetBlockTemplate(ModelBase):
    """Block template for external mining software (BIP 22/23/9/145)"""
    version: int
    rules: Tuple[str, ...]
    version_bits_available: Dict[str, int]
    version_bits_required: int
    previous_block_hash: BlockHash
    transactions: Tuple[BlockTemplateTransaction, ...]
    coinbase_aux: Dict[str, str]
    coinbase_value: Amount
    long_poll_id: str
    target: Hash256
    min_time: int
    mutable: Tuple[str, ...]
    nonce_range: bytes
    sigop_limit: int
    size_limit: Optional[int]
    weight_limit: int
    current_time: int
    bits: bytes
    height: int
    default_witness_commitment: Optional[bytes]
    signet_challenge: Optional[bytes]
    capabilities: Tuple[str, ...]


class CreateMultisig(ModelBase):
    """P2SH (or segwit) multisig address and its redeem script"""
    address: Address
    redeem_script: bytes
    descriptor: Optional[str]
    warnings: Optional[Tuple[str, ...]]


class ValidateAddress(ModelBase):
    """Address check; only ``is_valid`` and ``error`` are set for a bad address"""
    is_valid: bool
    address: Optional[Address]
    script_pubkey: Optional[bytes]
    is_script: Optional[bool]
    is_witness: Optional[bool]
    witness_version: Optional[int]
    witness_program: Optional[bytes]
    error: Optional[str]
    error_locations: Optional[Tuple[int, ...]]


class DeriveAddresses(ModelBase):
    addresses: Tuple[Address, ...]


class GetDescriptorInfo(ModelBase):
    descriptor: str
    checksum: Optional[str]
    is_range: bool
    is_solvable: bool
    has_private_keys: bool
