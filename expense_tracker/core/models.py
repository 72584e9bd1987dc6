# expense_tracker/core/models.py
from dataclasses import dataclass, field
from datetime import datetime

@dataclass
class Transaction:
    amount: float
    category: str
    timestamp: datetime = field(default_factory=datetime.now)
