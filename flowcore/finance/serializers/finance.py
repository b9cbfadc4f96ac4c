# ============================================
# finance/serializers/finance.py
# ============================================
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from finance.models import OfficeExpense, Salary

MONTH_REGEX = r'^\d{4}-\d{2}$'


def _money(**kwargs):
    return serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0, **kwargs)


# ----- Salary -----
class SalaryCreateSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    amount = _money()
    month = serializers.RegexField(MONTH_REGEX, error_messages={'invalid': 'Month must be in YYYY-MM format'})
    tax = _money(required=False, default=0)
    bonus = _money(required=False, default=0)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    metadata = serializers.JSONField(required=False, default=dict)


class SalaryUpdateSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(required=False)
    amount = _money(required=False)
    month = serializers.RegexField(MONTH_REGEX, required=False, error_messages={'invalid': 'Month must be in YYYY-MM format'})
    tax = _money(required=False)
    bonus = _money(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    metadata = serializers.JSONField(required=False)


class SalaryQuerySerializer(serializers.Serializer):
    user_id = serializers.IntegerField(required=False)
    month = serializers.RegexField(MONTH_REGEX, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)


class SalaryOutputSerializer(serializers.ModelSerializer):
    user = UserBriefSerializer(read_only=True)

    class Meta:
        model = Salary
        fields = ['id', 'user', 'amount', 'month', 'tax', 'bonus', 'notes', 'metadata', 'created_at', 'updated_at']


# ----- Office expense -----
class ExpenseCreateSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=OfficeExpense.ExpenseType.choices)
    amount = _money()
    description = serializers.CharField(max_length=500)
    date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    metadata = serializers.JSONField(required=False, default=dict)


class ExpenseUpdateSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=OfficeExpense.ExpenseType.choices, required=False)
    amount = _money(required=False)
    description = serializers.CharField(max_length=500, required=False)
    date = serializers.DateField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    metadata = serializers.JSONField(required=False)


class ExpenseQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=OfficeExpense.ExpenseType.choices, required=False)
    created_by = serializers.IntegerField(required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)


class ExpenseOutputSerializer(serializers.ModelSerializer):
    created_by = UserBriefSerializer(read_only=True)

    class Meta:
        model = OfficeExpense
        fields = ['id', 'type', 'amount', 'description', 'date', 'created_by', 'notes', 'metadata', 'created_at']


# ----- Stats -----
class MonthlyBreakdownSerializer(serializers.Serializer):
    month = serializers.CharField()
    total_salaries = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_expenses = serializers.DecimalField(max_digits=16, decimal_places=2)
    by_type = serializers.DictField(child=serializers.DecimalField(max_digits=16, decimal_places=2))


class FinanceStatsSerializer(serializers.Serializer):
    total_salaries = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_expenses = serializers.DecimalField(max_digits=16, decimal_places=2)
    monthly_breakdown = MonthlyBreakdownSerializer(many=True)
