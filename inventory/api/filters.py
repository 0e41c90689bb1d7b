from django_filters import rest_framework as filters
from inventory.models import InventoryLog


class InventoryLogFilter(filters.FilterSet):
    change_date__gte = filters.DateFilter(field_name='change_date', lookup_expr='date__gte')
    change_date__lte = filters.DateFilter(field_name='change_date', lookup_expr='date__lte')
    product_code = filters.CharFilter(field_name='product_code', lookup_expr='iexact')

    class Meta:
        model = InventoryLog
        fields = ['change_date__gte', 'change_date__lte', 'product_code']
