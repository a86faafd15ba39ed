from .order_snapshot_repository import DatabaseOrderSnapshotReader, OrderSnapshotRepository

__all__ = ["DatabaseOrderSnapshotReader", "OrderSnapshotRepository"]
