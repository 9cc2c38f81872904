"""FastAPI dependencies: data adapters per trust tier.

Each route names the tier it runs with in its signature, so the access level of
every data call is visible at the call site.
"""

from typing import Annotated

from fastapi import Depends

from hanami.core.domain_types import TrustTier
from hanami.infrastructure.data_adapter import DataAdapter


def get_standard_adapter() -> DataAdapter:
    """Adapter on the standard (row-level-security) pool."""
    return DataAdapter.for_tier(TrustTier.STANDARD)


def get_elevated_adapter() -> DataAdapter:
    """Adapter on the service-role pool. For administrative operations only."""
    return DataAdapter.for_tier(TrustTier.ELEVATED)


StandardAdapter = Annotated[DataAdapter, Depends(get_standard_adapter)]
ElevatedAdapter = Annotated[DataAdapter, Depends(get_elevated_adapter)]
