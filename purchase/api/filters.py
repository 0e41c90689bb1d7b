from django_filters import rest_framework as filters
from purchase.models import IncomingProductLog


class IncomingProductLogFilter(filters.FilterSet):
    date__gte = filters.DateFilter(field_name='date', lookup_expr='date__gte')
    date__lte = filters.DateFilter(field_name='date', lookup_expr='date__lte')
    product_code = filters.CharFilter(field_name='product_code', lookup_expr='iexact')
    supplier = filters.CharFilter(field_name='supplier', lookup_expr='icontains')

    class Meta:
        model = IncomingProductLog
        fields = ['date__gte', 'date__lte', 'product_code', 'supplier']
