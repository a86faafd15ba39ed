"""
Interface for reading order snapshots
"""
from abc import ABC, abstractmethod
from typing import Union

from order_notifier.schemas.order_snapshot_schema import OrderSnapshot

OrderId = Union[int, str]


class IOrderSnapshotReader(ABC):
    """Read-only access to the order data shown in notifications"""

    @abstractmethod
    def get_snapshot(self, order_id: OrderId) -> OrderSnapshot:
        """Return a fresh snapshot of the order.

        Raises:
            NotFoundException: when no order matches ``order_id``.
        """
        pass
