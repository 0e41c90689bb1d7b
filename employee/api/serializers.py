from rest_framework import serializers
from base.utils import get_exchange_rate
from employee.models import Employee, Seller


class EmployeeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ['id', 'employee_name', 'position', 'phone', 'email', 'salary',
                  'salary_currency', 'hire_date', 'status', 'created_at',
                  'modified_at']
        read_only_fields = ['created_at', 'modified_at']

    def validate_salary_currency(self, value):
        get_exchange_rate(value)
        return value.upper()


class SellerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Seller
        fields = ['id', 'name', 'contact', 'status', 'created_at', 'modified_at']
        read_only_fields = ['created_at', 'modified_at']
