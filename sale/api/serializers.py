from rest_framework import serializers
from base.utils import get_exchange_rate
from employee.models import Seller
from loans.api.serializers import CompanyClientField
from products.models import normalize_product_code
from sale.models import Sale


class CompanySellerField(serializers.PrimaryKeyRelatedField):
    def get_queryset(self):
        return Seller.objects.for_company(self.context.get('company'))


class SaleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Sale
        fields = ['id', 'product', 'product_code', 'product_name', 'client',
                  'client_name', 'seller', 'seller_name', 'warehouse',
                  'quantity', 'sale_price', 'sale_price_currency', 'total',
                  'total_base', 'cost_of_goods_sold', 'gross_profit',
                  'payment_type', 'date', 'created_at', 'modified_at']
        read_only_fields = fields


class SaleWriteSerializer(serializers.Serializer):
    product_code = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    sale_price_currency = serializers.CharField(max_length=3, required=False)
    total = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0,
                                     required=False)
    client = CompanyClientField(required=False, allow_null=True)
    client_name = serializers.CharField(required=False, allow_blank=True)
    seller = CompanySellerField(required=False, allow_null=True)
    payment_type = serializers.ChoiceField(choices=Sale.PAYMENT_TYPE_CHOICES,
                                           required=False, default=Sale.PAYMENT_CASH)
    date = serializers.DateTimeField(required=False)

    def validate_product_code(self, value):
        code = normalize_product_code(value)
        if not code:
            raise serializers.ValidationError("Product code is required.")
        return code

    def validate_sale_price_currency(self, value):
        get_exchange_rate(value)
        return value.upper()


class SaleUpdateSerializer(SaleWriteSerializer):
    product_code = None
    payment_type = serializers.ChoiceField(choices=Sale.PAYMENT_TYPE_CHOICES,
                                           required=False)
