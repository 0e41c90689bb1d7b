from rest_framework import serializers
from base.utils import to_base, get_exchange_rate
from products.models import Product, normalize_product_code


class ProductSerializer(serializers.ModelSerializer):
    stock_value = serializers.DecimalField(max_digits=18, decimal_places=4,
                                           read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'product_code', 'name', 'category', 'quantity', 'cost',
            'purchase_price', 'purchase_price_currency', 'purchase_price_base',
            'selling_price', 'selling_price_currency', 'selling_price_base',
            'supplier', 'location', 'min_stock', 'low_stock', 'stock_value',
            'created_at', 'modified_at',
        ]
        read_only_fields = ['purchase_price_base', 'selling_price_base',
                            'low_stock', 'created_at', 'modified_at']

    def validate_product_code(self, value):
        code = normalize_product_code(value)
        if not code:
            raise serializers.ValidationError("Product code is required.")
        if self.instance is not None and code != self.instance.product_code:
            # receipts and sales refer to the product by its code
            raise serializers.ValidationError("Product code cannot be changed.")
        return code

    def validate_purchase_price_currency(self, value):
        get_exchange_rate(value)
        return value.upper()

    def validate_selling_price_currency(self, value):
        get_exchange_rate(value)
        return value.upper()

    def _with_base_prices(self, validated_data, instance=None):
        def current(field):
            if field in validated_data:
                return validated_data[field]
            if instance is not None:
                return getattr(instance, field)
            return Product._meta.get_field(field).get_default()

        validated_data['purchase_price_base'] = to_base(
            current('purchase_price') or 0, current('purchase_price_currency'))
        validated_data['selling_price_base'] = to_base(
            current('selling_price') or 0, current('selling_price_currency'))
        return validated_data

    def create(self, validated_data):
        validated_data = self._with_base_prices(validated_data)
        # A product entered by hand starts its average cost at the purchase price
        validated_data.setdefault('cost', validated_data['purchase_price_base'])
        return super().create(validated_data)

    def update(self, instance, validated_data):
        return super().update(instance, self._with_base_prices(validated_data, instance))


class StockAdjustmentSerializer(serializers.Serializer):
    product_code = serializers.CharField()
    qty = serializers.IntegerField(min_value=0)
    reason = serializers.CharField(required=False, allow_blank=True)

    def validate_product_code(self, value):
        return normalize_product_code(value)
