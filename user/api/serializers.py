from django.contrib.auth.models import User
from rest_framework import serializers
from user.models import UserProfile, UserActivity
from user.permissions import PERMISSION_MODULES


class UserProfileSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    company_name = serializers.CharField(source='company.name', read_only=True,
                                         default=None)

    class Meta:
        model = UserProfile
        fields = ['id', 'user_id', 'username', 'email', 'name', 'company',
                  'company_name', 'role', 'permissions']
        read_only_fields = ['company']

    def validate_role(self, value):
        if value == UserProfile.ROLE_DEVELOPER:
            raise serializers.ValidationError("The developer role cannot be assigned.")
        return value

    def validate_permissions(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Permissions must be an object.")
        cleaned = {}
        for module, actions in value.items():
            if module not in PERMISSION_MODULES:
                raise serializers.ValidationError(f"Unknown permission module '{module}'.")
            if not isinstance(actions, dict):
                raise serializers.ValidationError(f"Permissions for '{module}' must be an object.")
            unknown = set(actions) - set(PERMISSION_MODULES[module])
            if unknown:
                raise serializers.ValidationError(
                    f"Unknown actions for '{module}': {', '.join(sorted(unknown))}.")
            cleaned[module] = {a: bool(actions.get(a, False))
                               for a in PERMISSION_MODULES[module]}
        return cleaned


class InviteUserSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    role = serializers.ChoiceField(choices=[r for r in UserProfile.ROLE_CHOICES
                                            if r[0] != UserProfile.ROLE_DEVELOPER])

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value


class UserActivitySerializer(serializers.ModelSerializer):
    username = serializers.CharField(source='user.username', read_only=True)
    model = serializers.CharField(source='content_type.model', read_only=True)

    class Meta:
        model = UserActivity
        fields = ['id', 'username', 'model', 'object_id', 'action', 'changes',
                  'ip_address', 'timestamp']
        read_only_fields = fields
