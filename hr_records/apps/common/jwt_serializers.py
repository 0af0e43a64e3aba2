"""
JWT serializers that put the user's role into the token
"""
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Adds the role and display name to the token claims and to the login
    response.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        token['username'] = user.username
        token['email'] = user.email
        token['full_name'] = getattr(user, 'full_name', '')
        role = getattr(user, 'effective_role', None)
        token['role'] = role
        token['is_admin'] = role == 'ADMIN'
        token['is_hr'] = role == 'HR'
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        user = self.user
        data['user'] = {
            'id': user.id,
            'user_id': getattr(user, 'user_id', None),
            'username': user.username,
            'email': user.email,
            'full_name': getattr(user, 'full_name', ''),
            'role': getattr(user, 'effective_role', None),
        }
        return data


def get_tokens_for_user(user):
    """
    Issue a token pair carrying the custom claims.

    Returns:
        dict: {'refresh': '...', 'access': '...'}
    """
    token = CustomTokenObtainPairSerializer.get_token(user)
    return {
        'refresh': str(token),
        'access': str(token.access_token),
    }
