# ============================================
# finance/views/finance.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.utils.pagination import DefaultPagination
from core.views.utils import (
    extend_schema, extend_schema_view,
    MessageSerializer, PAGE_PARAMS, path_int, q_date, q_int, q_str,
    responses_ok, std_errors,
)
from finance.serializers.finance import (
    SalaryCreateSerializer,
    SalaryUpdateSerializer,
    SalaryQuerySerializer,
    SalaryOutputSerializer,
    ExpenseCreateSerializer,
    ExpenseUpdateSerializer,
    ExpenseQuerySerializer,
    ExpenseOutputSerializer,
    FinanceStatsSerializer,
)
from finance.services.finance import FinanceService


class PaginatedAPIView(APIView):
    pagination_class = DefaultPagination

    def paginated(self, request, qs, serializer_cls):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(qs, request, view=self)
        if page is not None:
            return paginator.get_paginated_response(serializer_cls(page, many=True).data)
        return Response(serializer_cls(qs, many=True).data)


# ============================
# Salaries
# ============================
@extend_schema_view(
    post=extend_schema(
        tags=["Salary"],
        summary="Create a salary record (CEO/Manager)",
        description="One record per user and month.",
        request=SalaryCreateSerializer,
        responses={**responses_ok(SalaryOutputSerializer, code=201), **std_errors()},
    )
)
class SalaryCreateAPIView(APIView):
    """
    POST: Create a salary record

    Request body:
    - user_id: int (required)
    - amount: decimal >= 0 (required)
    - month: string YYYY-MM (required)
    - tax, bonus: decimal >= 0 (optional)
    - notes: string (optional)
    - metadata: object (optional)
    """

    def post(self, request):
        ser = SalaryCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        salary = FinanceService().create_salary(actor=request.user, **ser.validated_data)
        return Response(SalaryOutputSerializer(salary).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    patch=extend_schema(
        tags=["Salary"], summary="Update a salary record (CEO/Manager)",
        parameters=[path_int("salary_id", "Salary ID")],
        request=SalaryUpdateSerializer,
        responses={**responses_ok(SalaryOutputSerializer), **std_errors()},
    )
)
class SalaryUpdateAPIView(APIView):
    def patch(self, request, salary_id):
        ser = SalaryUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        salary = FinanceService().update_salary(salary_id=salary_id, actor=request.user, **ser.validated_data)
        return Response(SalaryOutputSerializer(salary).data)


@extend_schema_view(
    delete=extend_schema(
        tags=["Salary"], summary="Delete a salary record (CEO/Manager)",
        parameters=[path_int("salary_id", "Salary ID")],
        responses={**responses_ok(MessageSerializer), **std_errors()},
    )
)
class SalaryDeleteAPIView(APIView):
    def delete(self, request, salary_id):
        FinanceService().delete_salary(salary_id=salary_id, actor=request.user)
        return Response({"message": "Salary record deleted successfully"})


@extend_schema_view(
    get=extend_schema(
        tags=["Salary"],
        summary="All salary records (CEO/Manager)",
        description="`start_date`/`end_date` filter on the day the record was created.",
        parameters=PAGE_PARAMS + [
            q_int("user_id", "Filter by user"),
            q_str("month", "Filter by month (YYYY-MM)"),
            q_date("start_date", "Created on or after"),
            q_date("end_date", "Created on or before"),
        ],
        responses={**responses_ok(SalaryOutputSerializer, many=True), **std_errors()},
    )
)
class SalaryListAPIView(PaginatedAPIView):
    def get(self, request):
        query = SalaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        qs = FinanceService().list_salaries(actor=request.user, **query.validated_data)
        return self.paginated(request, qs, SalaryOutputSerializer)


@extend_schema_view(
    get=extend_schema(
        tags=["Salary"], summary="My salary records",
        parameters=PAGE_PARAMS,
        responses={**responses_ok(SalaryOutputSerializer, many=True), **std_errors()},
    )
)
class MySalaryListAPIView(PaginatedAPIView):
    def get(self, request):
        qs = FinanceService().list_my_salaries(actor=request.user)
        return self.paginated(request, qs, SalaryOutputSerializer)


# ============================
# Office expenses
# ============================
@extend_schema_view(
    post=extend_schema(
        tags=["Office Expense"], summary="Create an expense (CEO/Manager)",
        request=ExpenseCreateSerializer,
        responses={**responses_ok(ExpenseOutputSerializer, code=201), **std_errors()},
    )
)
class ExpenseCreateAPIView(APIView):
    def post(self, request):
        ser = ExpenseCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        expense = FinanceService().create_expense(actor=request.user, **ser.validated_data)
        return Response(ExpenseOutputSerializer(expense).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    patch=extend_schema(
        tags=["Office Expense"], summary="Update an expense (CEO/Manager)",
        parameters=[path_int("expense_id", "Expense ID")],
        request=ExpenseUpdateSerializer,
        responses={**responses_ok(ExpenseOutputSerializer), **std_errors()},
    )
)
class ExpenseUpdateAPIView(APIView):
    def patch(self, request, expense_id):
        ser = ExpenseUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        expense = FinanceService().update_expense(expense_id=expense_id, actor=request.user, **ser.validated_data)
        return Response(ExpenseOutputSerializer(expense).data)


@extend_schema_view(
    delete=extend_schema(
        tags=["Office Expense"], summary="Delete an expense (CEO/Manager)",
        parameters=[path_int("expense_id", "Expense ID")],
        responses={**responses_ok(MessageSerializer), **std_errors()},
    )
)
class ExpenseDeleteAPIView(APIView):
    def delete(self, request, expense_id):
        FinanceService().delete_expense(expense_id=expense_id, actor=request.user)
        return Response({"message": "Expense record deleted successfully"})


@extend_schema_view(
    get=extend_schema(
        tags=["Office Expense"], summary="All expenses (CEO/Manager)",
        parameters=PAGE_PARAMS + [
            q_str("type", "ELECTRICITY | RENT | SUPPLIES | TRAVEL | OTHER"),
            q_int("created_by", "Filter by creator"),
            q_date("start_date", "Expense date from"),
            q_date("end_date", "Expense date to"),
        ],
        responses={**responses_ok(ExpenseOutputSerializer, many=True), **std_errors()},
    )
)
class ExpenseListAPIView(PaginatedAPIView):
    def get(self, request):
        query = ExpenseQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        qs = FinanceService().list_expenses(actor=request.user, **query.validated_data)
        return self.paginated(request, qs, ExpenseOutputSerializer)


@extend_schema_view(
    get=extend_schema(
        tags=["Office Expense"],
        summary="Salary and expense totals with a monthly breakdown (CEO/Manager)",
        responses={**responses_ok(FinanceStatsSerializer), **std_errors()},
    )
)
class FinanceStatsAPIView(APIView):
    def get(self, request):
        stats = FinanceService().stats(actor=request.user)
        return Response(FinanceStatsSerializer(stats).data)
