from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

from core.models import TimeStampedModel

MONTH_VALIDATOR = RegexValidator(r'^\d{4}-\d{2}$', 'Month must be in YYYY-MM format')


class Salary(TimeStampedModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='salaries')
    amount = models.DecimalField(max_digits=14, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    month = models.CharField(max_length=7, validators=[MONTH_VALIDATOR], db_index=True)
    tax = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'), validators=[MinValueValidator(Decimal('0'))])
    bonus = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'), validators=[MinValueValidator(Decimal('0'))])
    notes = models.TextField(blank=True, default='')
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'salaries'
        ordering = ['-month', 'user_id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'month'], name='uniq_salary_user_month'),
        ]

    def __str__(self):
        return f"{self.user_id} {self.month}: {self.amount}"
