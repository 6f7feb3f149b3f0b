# btcrpc/schemas/v24/blockchain.py

"""Wire Types: Blockchain (Bitcoin Core v24)"""

from typing import Any, Dict

from btcrpc.schemas.base import WireAmount
from btcrpc.schemas.v21 import blockchain as v21
from btcrpc.utils import convert


class GetMempoolInfo(v21.GetMempoolInfo):
    """Result of ``getmempoolinfo``; adds the replacement policy fields"""

    incrementalrelayfee: WireAmount
    fullrbf: bool

    def info_fields(self) -> Dict[str, Any]:
        fields = super().info_fields()
        fields["incremental_relay_fee"] = convert.fee_rate(
            self.incrementalrelayfee, "incrementalrelayfee"
        )
        fields["full_rbf"] = self.fullrbf
        return fields
