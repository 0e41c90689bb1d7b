from rest_framework import serializers
from company.models import Company


class CompanySerializer(serializers.ModelSerializer):
    owner_username = serializers.CharField(source='owner.username', read_only=True,
                                           default=None)

    class Meta:
        model = Company
        fields = ['id', 'name', 'owner', 'owner_username', 'user_count',
                  'warehouse_capacity', 'warehouse_capacity_type',
                  'base_currency', 'created_at', 'modified_at']
        read_only_fields = ['owner', 'base_currency', 'created_at', 'modified_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Company name is required.")
        return value

    def validate_user_count(self, value):
        if value < 1:
            raise serializers.ValidationError("A company has at least one user.")
        return value
