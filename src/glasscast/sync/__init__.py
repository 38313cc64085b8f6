"""City weather synchronization.

:class:`SyncEngine` is the single owner of the working set (current city
plus favorites) and the only component allowed to mutate it.
"""

from glasscast.sync.engine import SyncEngine
from glasscast.sync.state import EngineState

__all__ = ["EngineState", "SyncEngine"]
