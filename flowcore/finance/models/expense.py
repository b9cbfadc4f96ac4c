from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from core.models import TimeStampedModel


class OfficeExpense(TimeStampedModel):
    class ExpenseType(models.TextChoices):
        ELECTRICITY = 'ELECTRICITY', 'Electricity'
        RENT = 'RENT', 'Rent'
        SUPPLIES = 'SUPPLIES', 'Supplies'
        TRAVEL = 'TRAVEL', 'Travel'
        OTHER = 'OTHER', 'Other'

    type = models.CharField(max_length=16, choices=ExpenseType.choices, db_index=True)
    amount = models.DecimalField(max_digits=14, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    description = models.CharField(max_length=500)
    date = models.DateField(db_index=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='office_expenses'
    )
    notes = models.TextField(blank=True, default='')
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'office_expenses'
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.type} {self.date}: {self.amount}"
