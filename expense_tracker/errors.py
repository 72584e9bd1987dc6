# expense_tracker/errors.py


class InvalidArgument(ValueError):
    """Raised when a store operation receives an argument it cannot accept."""
