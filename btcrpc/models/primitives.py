# btcrpc/models/primitives.py

"""Canonical Value Types

Strict value types shared by every model entity. Amounts are integer
satoshis, hashes are fixed-length byte strings kept in the byte order the
daemon prints them, hex blobs are decoded bytes.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

SATOSHIS_PER_BITCOIN = 100_000_000
MAX_MONEY = 21_000_000 * SATOSHIS_PER_BITCOIN

# Satoshis, never negative
Amount = Annotated[int, Field(ge=0, le=MAX_MONEY)]

# Satoshis, negative for outgoing wallet deltas and fees
SignedAmount = Annotated[int, Field(ge=-MAX_MONEY, le=MAX_MONEY)]

# Satoshis per 1000 virtual bytes
FeeRate = Annotated[int, Field(ge=0)]

Hash256 = Annotated[bytes, Field(min_length=32, max_length=32)]
Txid = Hash256
Wtxid = Hash256
BlockHash = Hash256

Hash160 = Annotated[bytes, Field(min_length=20, max_length=20)]

# Unvalidated address string, network checks are the caller's business
Address = str


class ModelBase(BaseModel):
    """Base for canonical model entities: immutable, strict, closed"""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")


class ChainTipsStatus(str, Enum):
    """Status of a chain tip reported by getchaintips"""
    INVALID = "invalid"
    HEADERS_ONLY = "headers-only"
    VALID_HEADERS = "valid-headers"
    VALID_FORK = "valid-fork"
    ACTIVE = "active"


class TransactionCategory(str, Enum):
    """Wallet transaction category"""
    SEND = "send"
    RECEIVE = "receive"
    GENERATE = "generate"
    IMMATURE = "immature"
    ORPHAN = "orphan"


class Bip125Replaceable(str, Enum):
    """Opt-in replace-by-fee signalling of a wallet transaction"""
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class SoftforkType(str, Enum):
    """Deployment mechanism of a softfork"""
    BURIED = "buried"
    BIP9 = "bip9"


class Bip9SoftforkStatus(str, Enum):
    """BIP-9 deployment state"""
    DEFINED = "defined"
    STARTED = "started"
    LOCKED_IN = "locked_in"
    ACTIVE = "active"
    FAILED = "failed"


class ScriptType(str, Enum):
    """Standard output script template"""
    NONSTANDARD = "nonstandard"
    PUBKEY = "pubkey"
    PUBKEYHASH = "pubkeyhash"
    SCRIPTHASH = "scripthash"
    MULTISIG = "multisig"
    NULLDATA = "nulldata"
    WITNESS_V0_KEYHASH = "witness_v0_keyhash"
    WITNESS_V0_SCRIPTHASH = "witness_v0_scripthash"
    WITNESS_V1_TAPROOT = "witness_v1_taproot"
    WITNESS_UNKNOWN = "witness_unknown"
    ANCHOR = "anchor"


class AddressPurpose(str, Enum):
    """Why an address book entry exists"""
    SEND = "send"
    RECEIVE = "receive"
    REFUND = "refund"
