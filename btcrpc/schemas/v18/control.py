# btcrpc/schemas/v18/control.py

"""Wire Types: Control (Bitcoin Core v0.18)

``getrpcinfo``, ``deriveaddresses`` and ``getdescriptorinfo`` first appear
in v0.18.
"""

from typing import List, Optional

from pydantic import RootModel

from btcrpc.models import network as model
from btcrpc.schemas.base import WireModel, WireRoot
from btcrpc.utils import convert


class ActiveCommand(WireModel):
    """Element of ``getrpcinfo.active_commands``"""

    method: str
    duration: int

    def to_model(self) -> model.ActiveCommand:
        return model.ActiveCommand(
            method=self.method,
            duration=convert.u64(self.duration, "duration"),
        )


class GetRpcInfo(WireModel):
    """Result of ``getrpcinfo``"""

    active_commands: List[ActiveCommand]

    def to_model(self) -> model.GetRpcInfo:
        return model.GetRpcInfo(
            active_commands=convert.each(
                "active_commands", self.active_commands, lambda command: command.to_model()
            ),
            log_path=None,
        )


# ============================================================================
# Util
# ============================================================================

class DeriveAddresses(WireRoot, RootModel[List[str]]):
    """Result of ``deriveaddresses``"""

    def to_model(self) -> model.DeriveAddresses:
        return model.DeriveAddresses(addresses=tuple(self.root))


class GetDescriptorInfo(WireModel):
    """Result of ``getdescriptorinfo``; ``checksum`` is reported from v0.19 on"""

    descriptor: str
    checksum: Optional[str] = None
    isrange: bool
    issolvable: bool
    hasprivatekeys: bool

    def to_model(self) -> model.GetDescriptorInfo:
        return model.GetDescriptorInfo(
            descriptor=self.descriptor,
            checksum=self.checksum,
            is_range=self.isrange,
            is_solvable=self.issolvable,
            has_private_keys=self.hasprivatekeys,
        )
