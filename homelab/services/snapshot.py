"""
Inventory Snapshot Service

Writes a lab snapshot to the cache and reads it back to confirm the
round trip. Cache errors are not recovered here; they are wrapped with
the stage that failed and handed to the caller.
"""

from enum import Enum
from typing import Optional

import structlog

from ..domain.inventory import HomeLab
from ..infrastructure.cache import CacheClient, CacheException

logger = structlog.get_logger(__name__)


class SnapshotStage(str, Enum):
    """Steps of a snapshot round trip."""

    SERIALIZE = "serialize"
    WRITE = "write"
    READ = "read"
    VERIFY = "verify"


class SnapshotStageError(Exception):
    """A round trip stopped at ``stage``.

    ``cause`` holds the underlying error (a CacheException for the write
    and read stages) and is also chained as ``__cause__``.
    """

    def __init__(self, stage: SnapshotStage, message: str, cause: Optional[Exception] = None):
        self.stage = stage
        self.message = message
        self.cause = cause
        super().__init__(f"{stage.value} failed: {message}")
        if cause is not None:
            self.__cause__ = cause


class InventorySnapshotService:
    """Round-trips lab snapshots through a cache client."""

    def __init__(self, cache: CacheClient):
        self._cache = cache

    def round_trip(self, lab: HomeLab, key: str) -> str:
        """
        Serialize ``lab``, store it under ``key`` and read it back.

        Returns:
            The snapshot as read from the cache

        Raises:
            SnapshotStageError: If any stage fails, or the value read back
                differs from the value written
        """
        log = logger.bind(key=key, lab=lab.name)

        try:
            snapshot = lab.to_snapshot()
        except ValueError as e:
            raise SnapshotStageError(SnapshotStage.SERIALIZE, str(e), e)

        try:
            self._cache.put(key, snapshot)
        except CacheException as e:
            log.error("Snapshot write failed", error_code=e.error_code, error=e.message)
            raise SnapshotStageError(SnapshotStage.WRITE, e.message, e)

        try:
            stored = self._cache.get(key)
        except CacheException as e:
            log.error("Snapshot read failed", error_code=e.error_code, error=e.message)
            raise SnapshotStageError(SnapshotStage.READ, e.message, e)

        if stored != snapshot:
            log.error(
                "Snapshot read back does not match what was written",
                written_bytes=len(snapshot),
                read_bytes=len(stored),
            )
            raise SnapshotStageError(
                SnapshotStage.VERIFY, "value read back differs from value written"
            )

        log.info("Snapshot round trip completed", size_bytes=len(snapshot))
        return stored

    def load(self, key: str) -> HomeLab:
        """
        Read the snapshot stored under ``key`` and rebuild the lab.

        Raises:
            SnapshotStageError: With stage READ if the cache read fails, or
                stage SERIALIZE if the stored value is not a lab snapshot
        """
        try:
            stored = self._cache.get(key)
        except CacheException as e:
            raise SnapshotStageError(SnapshotStage.READ, e.message, e)

        try:
            return HomeLab.from_snapshot(stored)
        except ValueError as e:
            raise SnapshotStageError(SnapshotStage.SERIALIZE, str(e), e)
