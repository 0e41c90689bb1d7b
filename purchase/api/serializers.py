from rest_framework import serializers
from products.models import normalize_product_code
from purchase.models import IncomingProductLog


class IncomingProductLogSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True,
                                         default=None)

    class Meta:
        model = IncomingProductLog
        fields = ['id', 'product', 'product_code', 'product_name', 'quantity',
                  'unit_cost', 'total_cost', 'supplier', 'date', 'created_at',
                  'modified_at']
        read_only_fields = fields


class IncomingReceiveSerializer(serializers.Serializer):
    product_code = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)
    unit_cost = serializers.DecimalField(max_digits=14, decimal_places=4,
                                         min_value=0)
    supplier = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    min_stock = serializers.IntegerField(required=False, min_value=0)

    def validate_product_code(self, value):
        code = normalize_product_code(value)
        if not code:
            raise serializers.ValidationError("Product code is required.")
        return code


class IncomingUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)
    unit_cost = serializers.DecimalField(max_digits=14, decimal_places=4,
                                         min_value=0)
    supplier = serializers.CharField(required=False, allow_blank=True)


class IncomingImportSerializer(serializers.Serializer):
    file = serializers.FileField()
