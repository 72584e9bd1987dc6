# expense_tracker/listeners/logging_listener.py
import logging

from expense_tracker.listeners.base import BaseListener

logger = logging.getLogger(__name__)


class LoggingListener(BaseListener):
    """
    Logs a one-line summary of the store every time it changes.
    """
    def __init__(self, config=None):
        self.config = config or {}
        self.updates = 0

    def update(self, store):
        self.updates += 1
        logger.info(
            "Store changed: %d transaction(s), %d matched filter index(es)",
            len(store.get_transactions()),
            len(store.get_matched_filter_indices()),
        )
