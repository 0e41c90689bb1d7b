import django_filters
from employee.models import Employee, Seller


class EmployeeFilter(django_filters.FilterSet):
    employee_name = django_filters.CharFilter(field_name='employee_name', lookup_expr='icontains')
    position = django_filters.CharFilter(field_name='position', lookup_expr='icontains')

    class Meta:
        model = Employee
        fields = ['employee_name', 'position', 'status']


class SellerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name='name', lookup_expr='icontains')

    class Meta:
        model = Seller
        fields = ['name', 'status']
