import django_filters
from django.db import models
from products.models import Product


class ProductFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method='filter_search')
    category = django_filters.CharFilter(field_name='category', lookup_expr='iexact')
    low_stock = django_filters.BooleanFilter(field_name='low_stock')
    supplier = django_filters.CharFilter(field_name='supplier', lookup_expr='icontains')

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            models.Q(product_code__icontains=value) |
            models.Q(name__icontains=value)
        )

    class Meta:
        model = Product
        fields = ['search', 'category', 'low_stock', 'supplier']
