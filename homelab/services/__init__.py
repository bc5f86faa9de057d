"""Application services coordinating the inventory and the cache."""

from .snapshot import InventorySnapshotService, SnapshotStage, SnapshotStageError

__all__ = ["InventorySnapshotService", "SnapshotStage", "SnapshotStageError"]
