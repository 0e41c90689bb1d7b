from rest_framework import serializers
from customer.models import Client, Supplier


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ['id', 'name', 'phone', 'email', 'address', 'created_at',
                  'modified_at']
        read_only_fields = ['created_at', 'modified_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Client name is required.")
        return value


class SupplierSerializer(serializers.ModelSerializer):
    class Meta:
        model = Supplier
        fields = ['id', 'name', 'phone', 'email', 'created_at', 'modified_at']
        read_only_fields = ['created_at', 'modified_at']
