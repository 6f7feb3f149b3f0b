# btcrpc/schemas/v20/control.py

"""Wire Types: Utility (Bitcoin Core v0.20)

``createmultisig`` reports the output descriptor of the new address.
"""

from typing import Any, Dict, List, Optional

from btcrpc.schemas.v17 import control as v17


class CreateMultisig(v17.CreateMultisig):
    """Result of ``createmultisig``; ``warnings`` is reported from v23 on"""

    descriptor: str
    warnings: Optional[List[str]] = None

    def multisig_fields(self) -> Dict[str, Any]:
        fields = super().multisig_fields()
        fields.update(
            descriptor=self.descriptor,
            warnings=None if self.warnings is None else tuple(self.warnings),
        )
        return fields
