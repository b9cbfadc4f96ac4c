# ============================================
# finance/selectors/finance.py
# ============================================
from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.db.models import QuerySet, Sum
from django.db.models.functions import TruncMonth

from finance.models import OfficeExpense, Salary

ZERO = Decimal('0.00')


class SalarySelector:

    @staticmethod
    def get_salary_by_id(salary_id) -> Optional[Salary]:
        try:
            return Salary.objects.select_related('user').get(id=salary_id)
        except (Salary.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def exists_for_month(user_id, month: str, exclude_id=None) -> bool:
        qs = Salary.objects.filter(user_id=user_id, month=month)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    @staticmethod
    def filter_salaries(*, user_id=None, month=None, start_date=None, end_date=None) -> QuerySet:
        """Date bounds apply to the record's creation day, inclusive"""
        qs = Salary.objects.select_related('user')
        if user_id is not None:
            qs = qs.filter(user_id=user_id)
        if month:
            qs = qs.filter(month=month)
        if start_date:
            qs = qs.filter(created_at__date__gte=start_date)
        if end_date:
            qs = qs.filter(created_at__date__lte=end_date)
        return qs

    @staticmethod
    def salaries_of(user_id) -> QuerySet:
        return Salary.objects.select_related('user').filter(user_id=user_id)


class ExpenseSelector:

    @staticmethod
    def get_expense_by_id(expense_id) -> Optional[OfficeExpense]:
        try:
            return OfficeExpense.objects.select_related('created_by').get(id=expense_id)
        except (OfficeExpense.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def filter_expenses(*, type=None, created_by=None, start_date=None, end_date=None) -> QuerySet:
        qs = OfficeExpense.objects.select_related('created_by')
        if type:
            qs = qs.filter(type=type)
        if created_by is not None:
            qs = qs.filter(created_by_id=created_by)
        if start_date:
            qs = qs.filter(date__gte=start_date)
        if end_date:
            qs = qs.filter(date__lte=end_date)
        return qs


def finance_stats() -> Dict[str, Any]:
    """
    Totals plus a per-month breakdown over every month that has a salary
    (by its YYYY-MM label) or an expense (by the month of its date).
    """
    total_salaries = Salary.objects.aggregate(total=Sum('amount'))['total'] or ZERO
    total_expenses = OfficeExpense.objects.aggregate(total=Sum('amount'))['total'] or ZERO

    salary_by_month: Dict[str, Decimal] = {
        row['month']: row['total'] or ZERO
        for row in Salary.objects.values('month').annotate(total=Sum('amount')).order_by()
    }

    expense_by_month: Dict[str, Dict[str, Decimal]] = defaultdict(dict)
    rows = (
        OfficeExpense.objects
        .annotate(m=TruncMonth('date'))
        .values('m', 'type')
        .annotate(total=Sum('amount'))
        .order_by()
    )
    for row in rows:
        expense_by_month[row['m'].strftime('%Y-%m')][row['type']] = row['total'] or ZERO

    breakdown: List[Dict[str, Any]] = []
    for month in sorted(set(salary_by_month) | set(expense_by_month)):
        by_type = expense_by_month.get(month, {})
        breakdown.append({
            'month': month,
            'total_salaries': salary_by_month.get(month, ZERO),
            'total_expenses': sum(by_type.values(), ZERO),
            'by_type': by_type,
        })

    return {
        'total_salaries': total_salaries,
        'total_expenses': total_expenses,
        'monthly_breakdown': breakdown,
    }
