# ============================================
# finance/models/__init__.py
# ============================================
from .salary import Salary
from .expense import OfficeExpense

__all__ = [
    'Salary',
    'OfficeExpense',
]
