from django.conf import settings
from rest_framework import serializers
from base.utils import get_exchange_rate, to_base
from common.models import DailyExpense
from employee.models import Employee
from sale.api.serializers import CompanySellerField


class CompanyEmployeeField(serializers.PrimaryKeyRelatedField):
    def get_queryset(self):
        return Employee.objects.for_company(self.context.get('company'))


class DailyExpenseSerializer(serializers.ModelSerializer):
    paid_to_seller = CompanySellerField(required=False, allow_null=True)
    employee = CompanyEmployeeField(required=False, allow_null=True)

    class Meta:
        model = DailyExpense
        fields = ['id', 'expense_type', 'description', 'amount', 'currency',
                  'amount_base', 'date', 'paid_to_seller', 'paid_to_seller_name',
                  'employee', 'employee_name', 'created_at', 'modified_at']
        read_only_fields = ['amount_base', 'paid_to_seller_name', 'employee_name',
                            'created_at', 'modified_at']

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Amount must be positive.")
        return value

    def validate_currency(self, value):
        get_exchange_rate(value)
        return value.upper()

    def validate(self, attrs):
        def current(field, default=None):
            if field in attrs:
                return attrs[field]
            return getattr(self.instance, field, default) if self.instance else default

        expense_type = current('expense_type')
        if expense_type == 'others' and not (current('description') or '').strip():
            raise serializers.ValidationError(
                {'description': "A description is required for other expenses."})

        seller = current('paid_to_seller')
        employee = current('employee')
        if expense_type == 'salary':
            if not seller and not employee:
                raise serializers.ValidationError(
                    "Salary expenses must be paid to a seller or an employee.")
            attrs['paid_to_seller_name'] = seller.name if seller else ''
            attrs['employee_name'] = employee.employee_name if employee else ''
        else:
            attrs['paid_to_seller'] = None
            attrs['paid_to_seller_name'] = ''
            attrs['employee'] = None
            attrs['employee_name'] = ''

        attrs['amount_base'] = to_base(current('amount', 0),
                                       current('currency') or settings.BASE_CURRENCY)
        return attrs
