from expense_tracker.errors import InvalidArgument
from expense_tracker.model import TransactionStore

__all__ = ["InvalidArgument", "TransactionStore"]
