# expense_tracker/model.py
from __future__ import annotations

import logging
import operator
from typing import Iterable, List, Set, Tuple

from expense_tracker.errors import InvalidArgument
from expense_tracker.listeners.base import BaseListener

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    Observable container for the tracker's transactions.

    Holds the transactions in insertion order together with the positions
    matched by the most recent filter. Every change to the transactions
    clears the filter result and synchronously notifies the registered
    listeners, in registration order, passing the store itself.
    Accessors always hand out copies of the internal containers.
    """

    def __init__(self) -> None:
        self._transactions: list = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[BaseListener] = []

    def add_transaction(self, t) -> None:
        """Append ``t`` and notify listeners.

        Raises
        ------
        InvalidArgument
            If ``t`` is None. Nothing is changed and nobody is notified.
        """
        if t is None:
            raise InvalidArgument("The new transaction must be non-null.")
        self._transactions.append(t)
        # The previous filter no longer describes the list.
        self._matched_filter_indices.clear()
        logger.debug("Added transaction %r (%d total)", t, len(self._transactions))
        self.state_changed()

    def remove_transaction(self, t) -> None:
        """Remove the first transaction equal to ``t``, if there is one.

        The filter result is cleared and listeners are notified even when
        no transaction matched.
        """
        try:
            self._transactions.remove(t)
            logger.debug("Removed transaction %r (%d left)", t, len(self._transactions))
        except ValueError:
            logger.debug("Transaction %r not tracked; nothing removed", t)
        self._matched_filter_indices.clear()
        self.state_changed()

    def get_transactions(self) -> Tuple:
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Iterable[int]) -> None:
        """Replace the positions matched by the current filter.

        Parameters
        ----------
        indices:
            Iterable of positions into the current transactions. Each one
            must be an integer (anything ``operator.index`` accepts, except
            bool) in ``[0, len(transactions))``. Duplicates are collapsed.

        Raises
        ------
        InvalidArgument
            If ``indices`` is None or holds any value out of range. The
            previous indices are kept in that case.
        """
        if indices is None:
            raise InvalidArgument("The matched filter indices must be non-null.")
        count = len(self._transactions)
        candidates = []
        for value in indices:
            try:
                index = operator.index(value)
            except TypeError:
                index = None
            if index is None or isinstance(value, bool):
                raise InvalidArgument(
                    f"Matched filter index {value!r} is not an integer."
                )
            if index < 0 or index >= count:
                raise InvalidArgument(
                    "Each matched filter index must be between 0 (inclusive) "
                    f"and the number of transactions ({count}, exclusive); got {index}."
                )
            candidates.append(index)
        self._matched_filter_indices = list(dict.fromkeys(candidates))
        logger.debug("Matched filter indices set to %s", self._matched_filter_indices)

    def get_matched_filter_indices(self) -> Set[int]:
        return set(self._matched_filter_indices)

    def register(self, listener: BaseListener) -> bool:
        """Register ``listener`` for change notifications.

        Returns True if it was added, False if it is None or already
        registered.
        """
        if listener is None or listener in self._listeners:
            return False
        self._listeners.append(listener)
        logger.debug("Registered listener %r", listener)
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: BaseListener) -> bool:
        return listener in self._listeners

    def state_changed(self) -> None:
        # Listener errors propagate; later listeners are skipped.
        for listener in list(self._listeners):
            listener.update(self)
