from django_filters import rest_framework as filters
from loans.models import ClientLoan, ClientPayment, ClientTransaction


class ClientLoanFilter(filters.FilterSet):
    date__gte = filters.DateFilter(field_name='date', lookup_expr='date__gte')
    date__lte = filters.DateFilter(field_name='date', lookup_expr='date__lte')
    client_name = filters.CharFilter(field_name='client_name', lookup_expr='icontains')

    class Meta:
        model = ClientLoan
        fields = ['client', 'client_name', 'currency', 'date__gte', 'date__lte']


class ClientPaymentFilter(filters.FilterSet):
    payment_date__gte = filters.DateFilter(field_name='payment_date', lookup_expr='date__gte')
    payment_date__lte = filters.DateFilter(field_name='payment_date', lookup_expr='date__lte')

    class Meta:
        model = ClientPayment
        fields = ['client', 'method', 'payment_date__gte', 'payment_date__lte']


class ClientTransactionFilter(filters.FilterSet):
    date__gte = filters.DateFilter(field_name='date', lookup_expr='date__gte')
    date__lte = filters.DateFilter(field_name='date', lookup_expr='date__lte')

    class Meta:
        model = ClientTransaction
        fields = ['client', 'type', 'related_type', 'date__gte', 'date__lte']
