# btcrpc/schemas/v20/mining.py

"""Wire Types: Generating (Bitcoin Core v0.20)"""

from typing import List

from pydantic import RootModel

from btcrpc.models import network as model
from btcrpc.schemas.base import WireRoot
from btcrpc.utils import convert


class GenerateToDescriptor(WireRoot, RootModel[List[str]]):
    """Result of ``generatetodescriptor``: hashes of the new blocks"""

    def to_model(self) -> model.GenerateToDescriptor:
        return model.GenerateToDescriptor(hashes=convert.hashes("hashes", self.root))
