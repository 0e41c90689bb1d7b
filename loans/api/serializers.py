from rest_framework import serializers
from base.utils import get_exchange_rate
from customer.models import Client
from loans.models import ClientLoan, ClientPayment, ClientTransaction
from loans.utils import BALANCE_STATUSES


class CompanyClientField(serializers.PrimaryKeyRelatedField):
    """Client choices limited to the requesting user's company."""
    def get_queryset(self):
        company = self.context.get('company')
        return Client.objects.for_company(company)


class ClientLoanSerializer(serializers.ModelSerializer):
    client = CompanyClientField()

    class Meta:
        model = ClientLoan
        fields = ['id', 'client', 'client_name', 'loan_amount', 'currency',
                  'amount_base', 'description', 'due_date', 'date',
                  'created_at', 'modified_at']
        read_only_fields = ['client_name', 'amount_base', 'date', 'created_at',
                            'modified_at']

    def validate_loan_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Loan amount must be positive.")
        return value

    def validate_currency(self, value):
        get_exchange_rate(value)
        return value.upper()


class ClientPaymentSerializer(serializers.ModelSerializer):
    client = CompanyClientField()
    client_name = serializers.CharField(source='client.name', read_only=True)

    class Meta:
        model = ClientPayment
        fields = ['id', 'client', 'client_name', 'amount', 'method',
                  'reference', 'payment_date', 'created_at']
        read_only_fields = ['created_at']
        extra_kwargs = {'payment_date': {'required': False}}

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Payment amount must be positive.")
        return value


class ClientTransactionSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source='client.name', read_only=True)

    class Meta:
        model = ClientTransaction
        fields = ['id', 'client', 'client_name', 'type', 'amount', 'related_id',
                  'related_type', 'description', 'date']
        read_only_fields = fields


class ClientBalanceSerializer(serializers.Serializer):
    client_id = serializers.IntegerField()
    client_name = serializers.CharField()
    total_loan = serializers.DecimalField(max_digits=18, decimal_places=4)
    total_paid = serializers.DecimalField(max_digits=18, decimal_places=4)
    balance = serializers.DecimalField(max_digits=18, decimal_places=4)
    outstanding_balance = serializers.DecimalField(max_digits=18, decimal_places=4)
    overpaid_amount = serializers.DecimalField(max_digits=18, decimal_places=4)
    status = serializers.CharField()
    last_activity_date = serializers.DateTimeField(allow_null=True)


class ClientBalanceQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BALANCE_STATUSES,
                                     required=False, default='all')
    last_activity__gte = serializers.DateField(required=False)
    last_activity__lte = serializers.DateField(required=False)
