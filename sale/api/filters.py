import django_filters
from sale.models import Sale


class SaleFilter(django_filters.FilterSet):
    date__gte = django_filters.DateFilter(field_name='date', lookup_expr='date__gte')
    date__lte = django_filters.DateFilter(field_name='date', lookup_expr='date__lte')
    client_name = django_filters.CharFilter(field_name='client_name', lookup_expr='icontains')
    payment_type = django_filters.CharFilter(field_name='payment_type', lookup_expr='iexact')
    seller = django_filters.NumberFilter(field_name='seller_id')
    product_code = django_filters.CharFilter(field_name='product_code', lookup_expr='iexact')

    class Meta:
        model = Sale
        fields = ['date__gte', 'date__lte', 'client_name', 'payment_type',
                  'seller', 'product_code']
