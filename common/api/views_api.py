from django.db.models import Sum, Count
from rest_framework import viewsets, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from common.api.filters import DailyExpenseFilter
from common.api.serializers import DailyExpenseSerializer
from common.models import DailyExpense
from company.mixins import CompanyScopedMixin
from user.permissions import ModulePermission


class DailyExpenseViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = DailyExpense.objects.all().order_by('-date', '-id')
    serializer_class = DailyExpenseSerializer
    permission_classes = [permissions.IsAuthenticated, ModulePermission]
    filterset_class = DailyExpenseFilter
    permission_module = 'expenses'
    permission_actions = {'create': 'create', 'update': 'edit',
                          'partial_update': 'edit', 'destroy': 'delete'}

    @action(detail=False, methods=['get'], url_path='totals')
    def totals(self, request):
        """
        Returns the base-currency total of the filtered expenses, overall
        and per expense type.
        """
        queryset = self.filter_queryset(self.get_queryset())
        total = queryset.aggregate(total=Sum('amount_base'))['total'] or 0
        by_type = {row['expense_type']: float(row['total'] or 0) for row in
                   queryset.values('expense_type').annotate(total=Sum('amount_base'))
                   .order_by('expense_type')}
        return Response({
            "total": float(total),
            "count": queryset.aggregate(count=Count('id'))['count'],
            "by_type": by_type,
        })
