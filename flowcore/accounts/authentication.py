# ============================================
# accounts/authentication.py
# ============================================
from rest_framework import authentication, exceptions

from accounts.selectors.user import UserSelector
from accounts.services.token import TokenService
from core.config import get_config
from core.errors import AuthenticationFailedError

INVALID_TOKEN = 'Invalid or expired token'


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """
    Authorization: Bearer <access token>
    The token's `sub` (or `id`) must resolve to an active user.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = authentication.get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN)

        try:
            token = auth[1].decode()
            claims = TokenService(get_config()).verify_access_token(token)
        except (UnicodeError, AuthenticationFailedError):
            raise exceptions.AuthenticationFailed(INVALID_TOKEN)

        user = UserSelector.get_user_by_id(claims.get('sub') or claims.get('id'))
        if user is None:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN)
        return user, claims

    def authenticate_header(self, request):
        return self.keyword
