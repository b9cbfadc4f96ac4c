# ============================================
# finance/services/finance.py
# ============================================
import logging
from typing import Any, Dict, Optional

from django.db import IntegrityError, transaction

from accounts.selectors.user import UserSelector
from core.errors import NotFoundError, ValidationFailedError
from core.policy import Policy, policy as default_policy
from finance.models import OfficeExpense, Salary
from finance.selectors.finance import ExpenseSelector, SalarySelector, finance_stats

logger = logging.getLogger(__name__)

SALARY_FIELDS = {'amount', 'month', 'tax', 'bonus', 'notes', 'metadata'}
EXPENSE_FIELDS = {'type', 'amount', 'description', 'date', 'notes', 'metadata'}


def _duplicate_month(month: str) -> ValidationFailedError:
    return ValidationFailedError(f'Salary record for {month} already exists for this user')


class FinanceService:
    """Salaries, office expenses and their stats; management is CEO/Manager only"""

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or default_policy

    # ---------- salaries ----------
    @staticmethod
    def _load_salary(salary_id) -> Salary:
        salary = SalarySelector.get_salary_by_id(salary_id)
        if not salary:
            raise NotFoundError('Salary record not found')
        return salary

    @staticmethod
    def _target_user(user_id):
        user = UserSelector.get_user_by_id(user_id)
        if not user:
            raise ValidationFailedError('Invalid user ID')
        return user

    def create_salary(self, *, actor, user_id, amount, month: str, tax=None, bonus=None,
                      notes: str = '', metadata: Optional[Dict[str, Any]] = None) -> Salary:
        self.policy.require('finance.manage', actor)
        user = self._target_user(user_id)
        if SalarySelector.exists_for_month(user.id, month):
            raise _duplicate_month(month)

        try:
            with transaction.atomic():
                salary = Salary.objects.create(
                    user=user,
                    amount=amount,
                    month=month,
                    tax=tax or 0,
                    bonus=bonus or 0,
                    notes=notes or '',
                    metadata=metadata or {},
                )
        except IntegrityError:
            raise _duplicate_month(month)

        logger.info("[finance] salary=%s user=%s month=%s by=%s", salary.id, user.id, month, actor.id)
        return salary

    def update_salary(self, *, salary_id, actor, **patch) -> Salary:
        """Partial update; moving to another user or month re-checks uniqueness"""
        self.policy.require('finance.manage', actor)
        salary = self._load_salary(salary_id)

        if patch.get('user_id') is not None:
            salary.user = self._target_user(patch['user_id'])
        for field, value in patch.items():
            if field in SALARY_FIELDS:
                setattr(salary, field, value)

        if SalarySelector.exists_for_month(salary.user_id, salary.month, exclude_id=salary.id):
            raise _duplicate_month(salary.month)

        try:
            with transaction.atomic():
                salary.save()
        except IntegrityError:
            raise _duplicate_month(salary.month)
        return salary

    def delete_salary(self, *, salary_id, actor) -> None:
        self.policy.require('finance.manage', actor)
        self._load_salary(salary_id).delete()

    def list_salaries(self, *, actor, **filters):
        self.policy.require('finance.manage', actor)
        return SalarySelector.filter_salaries(**filters)

    def list_my_salaries(self, *, actor):
        return SalarySelector.salaries_of(actor.id)

    # ---------- expenses ----------
    @staticmethod
    def _load_expense(expense_id) -> OfficeExpense:
        expense = ExpenseSelector.get_expense_by_id(expense_id)
        if not expense:
            raise NotFoundError('Expense record not found')
        return expense

    def create_expense(self, *, actor, type: str, amount, description: str, date,
                       notes: str = '', metadata: Optional[Dict[str, Any]] = None) -> OfficeExpense:
        self.policy.require('finance.manage', actor)
        if type not in OfficeExpense.ExpenseType.values:
            raise ValidationFailedError('Invalid expense type')
        expense = OfficeExpense.objects.create(
            type=type,
            amount=amount,
            description=description,
            date=date,
            created_by=actor,
            notes=notes or '',
            metadata=metadata or {},
        )
        logger.info("[finance] expense=%s type=%s amount=%s by=%s", expense.id, type, amount, actor.id)
        return expense

    def update_expense(self, *, expense_id, actor, **patch) -> OfficeExpense:
        self.policy.require('finance.manage', actor)
        expense = self._load_expense(expense_id)
        if 'type' in patch and patch['type'] not in OfficeExpense.ExpenseType.values:
            raise ValidationFailedError('Invalid expense type')
        for field, value in patch.items():
            if field in EXPENSE_FIELDS:
                setattr(expense, field, value)
        expense.save()
        return expense

    def delete_expense(self, *, expense_id, actor) -> None:
        self.policy.require('finance.manage', actor)
        self._load_expense(expense_id).delete()

    def list_expenses(self, *, actor, **filters):
        self.policy.require('finance.manage', actor)
        return ExpenseSelector.filter_expenses(**filters)

    # ---------- stats ----------
    def stats(self, *, actor) -> Dict[str, Any]:
        self.policy.require('finance.manage', actor)
        return finance_stats()
