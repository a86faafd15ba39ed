from .order_snapshot_reader_interface import IOrderSnapshotReader, OrderId

__all__ = ["IOrderSnapshotReader", "OrderId"]
