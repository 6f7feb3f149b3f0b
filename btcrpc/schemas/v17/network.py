# btcrpc/schemas/v17/network.py

"""Wire Types: Network (Bitcoin Core v0.17)"""

from typing import Any, Dict, List, Optional

from pydantic import RootModel

from btcrpc.models import network as model
from btcrpc.schemas.base import WireAmount, WireModel, WireRoot
from btcrpc.utils import convert


class GetNetworkInfoNetwork(WireModel):
    """Element of ``getnetworkinfo.networks``"""

    name: str
    limited: bool
    reachable: bool
    proxy: str
    proxy_randomize_credentials: bool

    def to_model(self) -> model.GetNetworkInfoNetwork:
        return model.GetNetworkInfoNetwork(
            name=self.name,
            limited=self.limited,
            reachable=self.reachable,
            proxy=self.proxy,
            proxy_randomize_credentials=self.proxy_randomize_credentials,
        )


class GetNetworkInfoAddress(WireModel):
    """Element of ``getnetworkinfo.localaddresses``"""

    address: str
    port: int
    score: int

    def to_model(self) -> model.GetNetworkInfoAddress:
        return model.GetNetworkInfoAddress(
            address=self.address,
            port=convert.u32(self.port, "port"),
            score=convert.i32(self.score, "score"),
        )


class GetNetworkInfo(WireModel):
    """Result of ``getnetworkinfo``

    ``localservices`` is the service bit field as 16 hex digits; the relay
    fees are BTC/kvB.
    """

    version: int
    subversion: str
    protocolversion: int
    localservices: str
    localrelay: bool
    timeoffset: int
    networkactive: bool
    connections: int
    networks: List[GetNetworkInfoNetwork]
    relayfee: WireAmount
    incrementalfee: WireAmount
    localaddresses: List[GetNetworkInfoAddress]
    warnings: str

    def network_fields(self) -> Dict[str, Any]:
        """Model fields common to every getnetworkinfo shape"""
        return dict(
            version=convert.u32(self.version, "version"),
            subversion=self.subversion,
            protocol_version=convert.u32(self.protocolversion, "protocolversion"),
            local_services=convert.hex_bytes(self.localservices, "localservices", length=8),
            local_services_names=None,
            local_relay=self.localrelay,
            time_offset=convert.i64(self.timeoffset, "timeoffset"),
            connections=convert.u32(self.connections, "connections"),
            connections_in=None,
            connections_out=None,
            network_active=self.networkactive,
            networks=convert.each("networks", self.networks, lambda net: net.to_model()),
            relay_fee=convert.fee_rate(self.relayfee, "relayfee"),
            incremental_fee=convert.fee_rate(self.incrementalfee, "incrementalfee"),
            local_addresses=convert.each(
                "localaddresses", self.localaddresses, lambda address: address.to_model()
            ),
            warnings=self.warnings,
        )

    def to_model(self) -> model.GetNetworkInfo:
        return model.GetNetworkInfo(**self.network_fields())


class UploadTarget(WireModel):
    timeframe: int
    target: int
    target_reached: bool
    serve_historical_blocks: bool
    bytes_left_in_cycle: int
    time_left_in_cycle: int


class GetNetTotals(WireModel):
    """Result of ``getnettotals``; exposed at the wire level only"""

    totalbytesrecv: int
    totalbytessent: int
    timemillis: int
    uploadtarget: UploadTarget


class AddedNodeAddress(WireModel):
    """``connected`` is "inbound" or "outbound" """

    address: str
    connected: str


class AddedNode(WireModel):
    addednode: str
    connected: bool
    addresses: List[AddedNodeAddress]


class GetAddedNodeInfo(WireRoot, RootModel[List[AddedNode]]):
    """Result of ``getaddednodeinfo``; exposed at the wire level only"""


class Banned(WireModel):
    """Element of ``listbanned``

    ``ban_reason`` was dropped after v0.19; ``ban_duration`` and
    ``time_remaining`` appear from v22 on.
    """

    address: str
    banned_until: int
    ban_created: int
    ban_reason: Optional[str] = None
    ban_duration: Optional[int] = None
    time_remaining: Optional[int] = None


class ListBanned(WireRoot, RootModel[List[Banned]]):
    """Result of ``listbanned``; exposed at the wire level only"""
