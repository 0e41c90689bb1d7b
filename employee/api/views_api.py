from django.db.models import Sum, Count, Max, Q
from rest_framework import viewsets, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from common.api.serializers import DailyExpenseSerializer
from common.models import DailyExpense
from company.mixins import CompanyScopedMixin
from employee.models import Employee, Seller
from .filters import EmployeeFilter, SellerFilter
from .serializers import EmployeeSerializer, SellerSerializer


class EmployeeViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Employee.objects.all().order_by('employee_name')
    serializer_class = EmployeeSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = EmployeeFilter

    @action(detail=True, methods=['get'], url_path='salary-history')
    def salary_history(self, request, pk=None):
        """
        Salary expenses paid to the employee.
        Usage: /api/employees/{id}/salary-history/?start_date=&end_date=
        """
        employee = self.get_object()
        payments = DailyExpense.objects.for_company(self.get_company()).filter(
            employee=employee, expense_type='salary')
        start_date = request.query_params.get('start_date')
        end_date = request.query_params.get('end_date')
        if start_date:
            payments = payments.filter(date__gte=start_date)
        if end_date:
            payments = payments.filter(date__lte=end_date)

        summary = payments.aggregate(total=Sum('amount_base'), last=Max('date'))
        return Response({
            'employee_id': employee.id,
            'employee_name': employee.employee_name,
            'total_paid': float(summary['total'] or 0),
            'last_payment_date': summary['last'],
            'payments': DailyExpenseSerializer(payments.order_by('-date'), many=True,
                                               context=self.get_serializer_context()).data,
        })


class SellerViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Seller.objects.all().order_by('name')
    serializer_class = SellerSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = SellerFilter

    @action(detail=False, methods=['get'], url_path='stats')
    def stats(self, request):
        """
        Sales performance per seller, in the base currency. Deleted sales
        are not counted.
        """
        alive = Q(sales__is_deleted=False)
        sellers = self.filter_queryset(self.get_queryset()).annotate(
            total_sales=Count('sales', filter=alive),
            total_revenue=Sum('sales__total_base', filter=alive),
            total_quantity=Sum('sales__quantity', filter=alive),
        )
        return Response([{
            'seller_id': s.id,
            'name': s.name,
            'status': s.status,
            'total_sales': s.total_sales,
            'total_revenue': float(s.total_revenue or 0),
            'total_quantity': s.total_quantity or 0,
        } for s in sellers])
