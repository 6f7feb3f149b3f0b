# btcrpc/schemas/v21/network.py

"""Wire Types: Network (Bitcoin Core v0.21)"""

from typing import Any, Dict

from btcrpc.schemas.v19 import network as v19
from btcrpc.utils import convert


class GetNetworkInfo(v19.GetNetworkInfo):
    """Result of ``getnetworkinfo``; splits ``connections`` by direction"""

    connections_in: int
    connections_out: int

    def network_fields(self) -> Dict[str, Any]:
        fields = super().network_fields()
        fields["connections_in"] = convert.u32(self.connections_in, "connections_in")
        fields["connections_out"] = convert.u32(self.connections_out, "connections_out")
        return fields
