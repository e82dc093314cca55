"""Transaction status enumeration.

Defines the lifecycle states of a ledger entry.
"""

from enum import Enum


class TransactionStatus(str, Enum):
    """Transaction lifecycle status.

    **Lifecycle Flow**:
        PENDING → SUCCESS (normal flow)
        PENDING → FAILED (processing error)
        PENDING → CANCELLED (voided)

    **Terminal States**: SUCCESS, FAILED, CANCELLED
    """

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"

    @classmethod
    def terminal_states(cls) -> list["TransactionStatus"]:
        """Return statuses that will not change again.

        Returns:
            List containing SUCCESS, FAILED, and CANCELLED.
        """
        return [cls.SUCCESS, cls.FAILED, cls.CANCELLED]
