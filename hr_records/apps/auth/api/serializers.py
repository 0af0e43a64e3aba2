from rest_framework import serializers

from hr_records.apps.auth.models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for user accounts; the password is write-only.
    """
    password = serializers.CharField(write_only=True, required=False, style={'input_type': 'password'})

    class Meta:
        model = User
        fields = [
            'id', 'user_id', 'username', 'email', 'full_name', 'role_level',
            'is_active', 'date_joined', 'last_login', 'created_by', 'updated_at',
            'updated_by', 'password',
        ]
        read_only_fields = ['user_id', 'date_joined', 'last_login', 'created_by', 'updated_at', 'updated_by']


class UserUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['full_name', 'email', 'role_level', 'is_active']
        extra_kwargs = {'email': {'required': False}}


class PasswordResetSerializer(serializers.Serializer):
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
