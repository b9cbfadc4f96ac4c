# ============================================
# finance/urls.py
# ============================================
from django.urls import path
from finance.views.finance import (
    SalaryCreateAPIView,
    SalaryUpdateAPIView,
    SalaryDeleteAPIView,
    SalaryListAPIView,
    MySalaryListAPIView,
    ExpenseCreateAPIView,
    ExpenseUpdateAPIView,
    ExpenseDeleteAPIView,
    ExpenseListAPIView,
    FinanceStatsAPIView,
)

app_name = 'finance'

urlpatterns = [
    # Salaries
    path('salary/create/', SalaryCreateAPIView.as_view(), name='salary-create'),
    path('salary/update/<int:salary_id>/', SalaryUpdateAPIView.as_view(), name='salary-update'),
    path('salary/delete/<int:salary_id>/', SalaryDeleteAPIView.as_view(), name='salary-delete'),
    path('salaries/', SalaryListAPIView.as_view(), name='salary-list'),
    path('salaries/my/', MySalaryListAPIView.as_view(), name='my-salaries'),

    # Office expenses
    path('expense/create/', ExpenseCreateAPIView.as_view(), name='expense-create'),
    path('expense/update/<int:expense_id>/', ExpenseUpdateAPIView.as_view(), name='expense-update'),
    path('expense/delete/<int:expense_id>/', ExpenseDeleteAPIView.as_view(), name='expense-delete'),
    path('expenses/', ExpenseListAPIView.as_view(), name='expense-list'),
    path('stats/', FinanceStatsAPIView.as_view(), name='stats'),
]
