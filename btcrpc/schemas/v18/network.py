# btcrpc/schemas/v18/network.py

"""Wire Types: Network (Bitcoin Core v0.18)"""

from typing import List

from pydantic import RootModel

from btcrpc.schemas.base import WireModel, WireRoot


class NodeAddress(WireModel):
    """Known peer address; ``services`` is the raw service bit field"""

    time: int
    services: int
    address: str
    port: int


class GetNodeAddresses(WireRoot, RootModel[List[NodeAddress]]):
    """Result of ``getnodeaddresses``; exposed at the wire level only"""
    pass
