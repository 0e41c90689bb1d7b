from rest_framework import serializers
from inventory.models import InventoryLog


class InventoryLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = InventoryLog
        fields = ['id', 'product', 'product_code', 'change_quantity', 'reason',
                  'change_date', 'created_by']
