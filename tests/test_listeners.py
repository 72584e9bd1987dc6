import logging

import pytest

from expense_tracker.core.models import Transaction
from expense_tracker.listeners import get_listener
from expense_tracker.listeners.base import BaseListener
from expense_tracker.listeners.logging_listener import LoggingListener
from expense_tracker.model import TransactionStore


def test_get_listener_builds_from_dotted_path():
    cfg = {'log_level': 'DEBUG'}
    listener = get_listener('expense_tracker.listeners.logging_listener.LoggingListener', cfg)
    assert isinstance(listener, LoggingListener)
    assert listener.config is cfg


def test_get_listener_unknown_class():
    with pytest.raises(AttributeError):
        get_listener('expense_tracker.listeners.logging_listener.NoSuchListener', {})


def test_base_listener_requires_update():
    with pytest.raises(TypeError):
        BaseListener()


def test_logging_listener_logs_each_change(caplog):
    store = TransactionStore()
    listener = LoggingListener()
    store.register(listener)

    with caplog.at_level(logging.INFO, logger='expense_tracker.listeners.logging_listener'):
        store.add_transaction(Transaction(amount=3.5, category='food'))
        store.add_transaction(Transaction(amount=8.0, category='bills'))
        store.set_matched_filter_indices([0, 1])
        store.remove_transaction(Transaction(amount=1.0, category='other'))

    assert listener.updates == 3
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        'Store changed: 1 transaction(s), 0 matched filter index(es)',
        'Store changed: 2 transaction(s), 0 matched filter index(es)',
        'Store changed: 2 transaction(s), 0 matched filter index(es)',
    ]
