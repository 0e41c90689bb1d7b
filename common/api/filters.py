import django_filters
from common.models import DailyExpense


class DailyExpenseFilter(django_filters.FilterSet):
    date__gte = django_filters.DateFilter(field_name='date', lookup_expr='gte')
    date__lte = django_filters.DateFilter(field_name='date', lookup_expr='lte')
    expense_type = django_filters.CharFilter(field_name='expense_type', lookup_expr='iexact')

    class Meta:
        model = DailyExpense
        fields = ['date__gte', 'date__lte', 'expense_type', 'employee',
                  'paid_to_seller', 'currency']
