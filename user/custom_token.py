from datetime import timedelta
from django.conf import settings
from django.utils import timezone
from rest_framework.authentication import TokenAuthentication
from rest_framework.exceptions import AuthenticationFailed


def token_expired(token):
    expiry_time = token.created + timedelta(hours=settings.TOKEN_TTL_HOURS)
    return timezone.now() > expiry_time


class ExpiringTokenAuthentication(TokenAuthentication):

    def authenticate_credentials(self, key):
        user, token = super().authenticate_credentials(key)

        if token_expired(token):
            token.delete()
            raise AuthenticationFailed("Token expired. Please log in again.")

        return (user, token)
