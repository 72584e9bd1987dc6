# expense_tracker/listeners/base.py
from abc import ABC, abstractmethod

class BaseListener(ABC):
    @abstractmethod
    def update(self, store):
        """
        Called after every change to the store's transactions.
        Re-query the store for its current state.
        """
        pass
