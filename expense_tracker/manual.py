# expense_tracker/manual.py
from datetime import date, datetime
import yaml
from expense_tracker.core.models import Transaction


def _parse_timestamp(value, entry):
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"Unrecognized 'timestamp' in manual entry: {entry}")


def load_manual_transactions(path):
    """Load manual transactions from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or []

    if not isinstance(data, list):
        raise ValueError(f"Manual file {path} must contain a list of entries, got {type(data).__name__}")

    txs = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Manual entry must be a mapping: {entry}")
        if entry.get('amount') is None:
            raise ValueError(f"Missing 'amount' in manual entry: {entry}")
        category = entry.get('category')
        if not category:
            raise ValueError(f"Missing 'category' in manual entry: {entry}")
        tx = Transaction(amount=float(entry['amount']), category=str(category))
        if entry.get('timestamp') is not None:
            tx.timestamp = _parse_timestamp(entry['timestamp'], entry)
        txs.append(tx)
    return txs
