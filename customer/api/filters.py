import django_filters
from django.db import models
from customer.models import Client, Supplier


class ClientFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name='name', lookup_expr='icontains')
    search = django_filters.CharFilter(method='filter_search')

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            models.Q(name__icontains=value) |
            models.Q(phone__icontains=value) |
            models.Q(email__icontains=value)
        )

    class Meta:
        model = Client
        fields = ['name', 'search']


class SupplierFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name='name', lookup_expr='icontains')

    class Meta:
        model = Supplier
        fields = ['name']
