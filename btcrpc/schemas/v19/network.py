# btcrpc/schemas/v19/network.py

"""Wire Types: Network and Control (Bitcoin Core v0.19)"""

from typing import Any, Dict, List

from btcrpc.models import network as model
from btcrpc.schemas.v17 import network as v17
from btcrpc.schemas.v18 import control as v18


class GetNetworkInfo(v17.GetNetworkInfo):
    """Result of ``getnetworkinfo``; adds ``localservicesnames``"""

    localservicesnames: List[str]

    def network_fields(self) -> Dict[str, Any]:
        fields = super().network_fields()
        fields["local_services_names"] = tuple(self.localservicesnames)
        return fields


class GetRpcInfo(v18.GetRpcInfo):
    """Result of ``getrpcinfo``; adds the debug log location"""

    logpath: str

    def to_model(self) -> model.GetRpcInfo:
        return super().to_model().model_copy(update={"log_path": self.logpath})
