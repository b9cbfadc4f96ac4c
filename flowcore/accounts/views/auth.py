# ============================================
# accounts/views/auth.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.auth import (
    SignupSerializer,
    LoginSerializer,
    ForgotPasswordSerializer,
    ResetPasswordSerializer,
    TokenOutputSerializer,
)
from accounts.serializers.user import UserOutputSerializer
from accounts.services.auth import AuthService
from core.config import get_config
from core.errors import ErrorKind
from core.views.utils import (
    extend_schema, extend_schema_view,
    MessageSerializer, responses_ok, std_errors,
)


def _service() -> AuthService:
    return AuthService(get_config())


@extend_schema_view(
    post=extend_schema(
        tags=["Auth"],
        summary="Sign up",
        request=SignupSerializer,
        responses={**responses_ok(TokenOutputSerializer, code=201), **std_errors(ErrorKind.CONFLICT)},
    )
)
class SignupAPIView(APIView):
    """
    POST: Register a user and return an access token

    Request body:
    - name, email, password (min 6), type (ceo | manager | member)
    """
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        ser = SignupSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        result = _service().signup(
            name=data["name"], email=data["email"], password=data["password"], role=data["type"],
        )
        return Response(result, status=status.HTTP_201_CREATED)


@extend_schema_view(
    post=extend_schema(
        tags=["Auth"],
        summary="Log in",
        description="Wrong password and role mismatch both answer 401 'Invalid credentials'.",
        request=LoginSerializer,
        responses={**responses_ok(TokenOutputSerializer), **std_errors()},
    )
)
class LoginAPIView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        ser = LoginSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        result = _service().login(email=data["email"], password=data["password"], role=data["type"])
        return Response(result)


@extend_schema_view(
    post=extend_schema(
        tags=["Auth"],
        summary="Request a password reset link",
        request=ForgotPasswordSerializer,
        responses={**responses_ok(MessageSerializer), **std_errors()},
    )
)
class ForgotPasswordAPIView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        ser = ForgotPasswordSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        return Response(_service().forgot_password(email=ser.validated_data["email"]))


@extend_schema_view(
    post=extend_schema(
        tags=["Auth"],
        summary="Reset password with a reset token",
        request=ResetPasswordSerializer,
        responses={**responses_ok(MessageSerializer), **std_errors()},
    )
)
class ResetPasswordAPIView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        ser = ResetPasswordSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        return Response(_service().reset_password(token=data["token"], new_password=data["new_password"]))


@extend_schema_view(
    get=extend_schema(
        tags=["Auth"],
        summary="Current user",
        responses={**responses_ok(UserOutputSerializer), **std_errors()},
    )
)
class MeAPIView(APIView):
    def get(self, request):
        return Response(UserOutputSerializer(request.user).data)
